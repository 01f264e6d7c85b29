"""Sanitization helpers turning internal values into host-safe primitives.

Nothing returned from here may hold a live handle, an enum member, a
symbolic tag or an exception instance.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Collection, Dict, Mapping, Optional

from external_api.protocols import (
    Action,
    LoggerProtocol,
    OutboundEvent,
    Primitive,
    SymbolicTag,
    Tag,
)

_SYMBOL_PREFIX = "Symbol("
_LEGACY_SIGIL = "@@"

# Action fields that never cross into the host as-is.
EXCLUDED_FIELDS = frozenset({"conference", "kind", "error"})


def tag_label(tag: Tag) -> str:
    """Return the external label of an action or failure kind.

    Enum members map through their value. Legacy tokens are unwrapped from
    ``Symbol(...)`` and lose one leading ``@@`` sigil.
    """
    if isinstance(tag, Enum):
        return str(tag.value)
    if isinstance(tag, SymbolicTag):
        description = tag.description
    else:
        description = str(tag)
        if description.startswith(_SYMBOL_PREFIX) and description.endswith(")"):
            description = description[len(_SYMBOL_PREFIX):-1]

    if description.startswith(_LEGACY_SIGIL):
        description = description[len(_LEGACY_SIGIL):]
    return description


def _error_part(error: Any, key: str) -> Any:
    if isinstance(error, Mapping):
        return error.get(key)
    return getattr(error, key, None)


def to_error_string(error: Any) -> str:
    """Render an error as text using the "Name: message" convention.

    Falsy errors render as ``""`` and strings are returned unchanged.
    Unrecognized shapes fall back to ``"Error"``.
    """
    if not error:
        return ""
    if isinstance(error, str):
        return error

    if isinstance(error, BaseException):
        name = getattr(error, "name", None) or type(error).__name__
        message = str(error)
    else:
        name = _error_part(error, "name")
        message = _error_part(error, "message")

    name = "Error" if name is None else str(name)
    message = "" if message is None else str(message)

    if not name:
        return message
    if not message:
        return name
    return f"{name}: {message}"


def to_url_string(url: Any) -> Optional[str]:
    """Normalize a URL-like value to its string form; None stays absent."""
    if url is None:
        return None
    if isinstance(url, str):
        return url
    geturl = getattr(url, "geturl", None)
    if callable(geturl):
        return geturl()
    href = getattr(url, "href", None)
    if isinstance(href, str):
        return href
    return str(url)


def is_recoverable(action: Action) -> bool:
    """Whether a conference failure is a local retry condition."""
    if action.get("recoverable"):
        return True
    return bool(_error_part(action.get("error"), "recoverable"))


def sanitize_fields(
    fields: Mapping[str, Any],
    excluded: Collection[str] = EXCLUDED_FIELDS,
    logger: Optional[LoggerProtocol] = None,
) -> Dict[str, Primitive]:
    """Copy pass-through fields, keeping only host-safe values."""
    data: Dict[str, Primitive] = {}
    for key, value in fields.items():
        if key in excluded or value is None:
            continue
        if isinstance(value, (Enum, SymbolicTag)):
            data[key] = tag_label(value)
        elif isinstance(value, (str, int, float, bool)):
            data[key] = value
        elif logger:
            logger.debug(
                "external_api_field_dropped",
                field=key,
                value_type=type(value).__name__,
            )
    return data


def _add_conference_url(data: Dict[str, Primitive], action: Action) -> None:
    """Replace the conference handle with its canonical URL."""
    conference = action.get("conference")
    if conference is None:
        return
    url = to_url_string(conference.canonical_url())
    if url is not None:
        data["url"] = url


def conference_event(
    action: Action,
    logger: Optional[LoggerProtocol] = None,
) -> OutboundEvent:
    """Build the event for a conference lifecycle action."""
    data = sanitize_fields(action.fields, logger=logger)
    _add_conference_url(data, action)
    return OutboundEvent(name=tag_label(action.kind), data=data)


def conference_failed_event(
    action: Action,
    logger: Optional[LoggerProtocol] = None,
) -> OutboundEvent:
    """Build the event for a fatal conference failure; ``error`` comes first."""
    data: Dict[str, Primitive] = {
        "error": to_error_string(action.get("error")),
        **sanitize_fields(action.fields, logger=logger),
    }
    _add_conference_url(data, action)
    return OutboundEvent(name=tag_label(action.kind), data=data)


def config_load_failed_event(action: Action) -> OutboundEvent:
    """Build the event for a config load failure.

    The event is named after the inner failure kind, not the action kind.
    """
    data: Dict[str, Primitive] = {"error": to_error_string(action.get("error"))}
    url = to_url_string(action.get("location_url"))
    if url is not None:
        data["url"] = url
    failure_kind = action.get("failure_kind") or action.kind
    return OutboundEvent(name=tag_label(failure_kind), data=data)


__all__ = [
    "EXCLUDED_FIELDS",
    "conference_event",
    "conference_failed_event",
    "config_load_failed_event",
    "is_recoverable",
    "sanitize_fields",
    "tag_label",
    "to_error_string",
    "to_url_string",
]
