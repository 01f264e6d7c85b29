"""Protocol definitions - interfaces for dependency injection.

These are typing.Protocol classes for static type checking. Concrete
implementations live in external_api.logging, external_api.app and in the
host embedding the bridge.
"""

from typing import Any, Callable, Dict, Protocol, runtime_checkable

from external_api.protocols.types import Action, Destination, Primitive


# =============================================================================
# LOGGING
# =============================================================================

@runtime_checkable
class LoggerProtocol(Protocol):
    """Structured logging interface."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def bind(self, **kwargs: Any) -> "LoggerProtocol": ...


# =============================================================================
# CONFERENCE
# =============================================================================

@runtime_checkable
class ConferenceProtocol(Protocol):
    """Opaque conference handle.

    The bridge only ever asks a handle for its canonical URL; live handles
    never cross into the host.
    """

    def canonical_url(self) -> Any: ...


# =============================================================================
# HOST
# =============================================================================

@runtime_checkable
class HostDispatchProtocol(Protocol):
    """Send primitive reaching the host listener.

    Synchronous and fire-and-forget. Failures propagate to the caller.
    """

    def send(self, name: str, data: Dict[str, Primitive], scope: str) -> None: ...


@runtime_checkable
class DestinationResolverProtocol(Protocol):
    """Resolves where outbound events go at send time."""

    def resolve(self) -> Destination: ...


# =============================================================================
# PIPELINE
# =============================================================================

Dispatch = Callable[[Action], Any]
Middleware = Callable[[Dispatch], Dispatch]


__all__ = [
    "ConferenceProtocol",
    "DestinationResolverProtocol",
    "Dispatch",
    "HostDispatchProtocol",
    "LoggerProtocol",
    "Middleware",
]
