"""Core types for the external API event bridge.

Action kinds and config-failure kinds are closed ``str`` enums whose value
is the canonical external label. ``SymbolicTag`` stays available for legacy
producers that still dispatch unique tokens instead of enum members.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union


# =============================================================================
# KINDS
# =============================================================================

class ActionKind(str, Enum):
    """Kinds of actions flowing through the dispatch pipeline."""
    CONFERENCE_WILL_JOIN = "CONFERENCE_WILL_JOIN"
    CONFERENCE_JOINED = "CONFERENCE_JOINED"
    CONFERENCE_WILL_LEAVE = "CONFERENCE_WILL_LEAVE"
    CONFERENCE_LEFT = "CONFERENCE_LEFT"
    CONFERENCE_FAILED = "CONFERENCE_FAILED"
    LOAD_CONFIG_ERROR = "LOAD_CONFIG_ERROR"

    # Not bridged
    SET_CONFIG = "SET_CONFIG"
    APP_WILL_MOUNT = "APP_WILL_MOUNT"
    APP_WILL_UNMOUNT = "APP_WILL_UNMOUNT"


class ConfigLoadFailureKind(str, Enum):
    """Specific variant of a configuration load failure."""
    FETCH_ERROR = "config.fetch.error"
    NOT_FOUND = "config.not.found"
    PARSE_ERROR = "config.parse.error"


CONFERENCE_LIFECYCLE_KINDS = frozenset({
    ActionKind.CONFERENCE_JOINED,
    ActionKind.CONFERENCE_LEFT,
    ActionKind.CONFERENCE_WILL_JOIN,
    ActionKind.CONFERENCE_WILL_LEAVE,
})


class SymbolicTag:
    """Unique token carrying a descriptive label.

    Two tags with the same description are still distinct; equality is
    identity. ``str()`` renders the ``Symbol(<description>)`` wrapper.
    """

    __slots__ = ("description",)

    def __init__(self, description: str) -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description})"

    __str__ = __repr__


Tag = Union[Enum, SymbolicTag, str]


# =============================================================================
# ACTIONS
# =============================================================================

@dataclass(frozen=True)
class Action:
    """A single dispatched state transition.

    ``fields`` holds the kind-specific fields plus any pass-through context.
    It is exposed read-only.

    Usage:
        action = Action.create(
            ActionKind.CONFERENCE_JOINED,
            conference=conference,
            room="lobby",
        )
    """
    kind: Tag
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if "kind" in self.fields:
            raise ValueError("'kind' is reserved for the action discriminant")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def create(cls, kind: Tag, **fields: Any) -> "Action":
        return cls(kind=kind, fields=fields)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.fields


# =============================================================================
# OUTBOUND
# =============================================================================

Primitive = Union[str, int, float, bool]


@dataclass(frozen=True)
class OutboundEvent:
    """Serializable event crossing into the host."""
    name: str
    data: Dict[str, Primitive] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable dictionary."""
        return {"name": self.name, "data": dict(self.data)}


@dataclass(frozen=True)
class Destination:
    """Resolved host destination for an outbound event.

    ``NO_DESTINATION`` is the falsy sentinel returned when no host surface
    can receive events.
    """
    scope: Optional[str]

    def __bool__(self) -> bool:
        return bool(self.scope)


NO_DESTINATION = Destination(scope=None)


__all__ = [
    "Action",
    "ActionKind",
    "CONFERENCE_LIFECYCLE_KINDS",
    "ConfigLoadFailureKind",
    "Destination",
    "NO_DESTINATION",
    "OutboundEvent",
    "Primitive",
    "SymbolicTag",
    "Tag",
]
