"""Protocols and core types for the external API bridge."""

from external_api.protocols.types import (
    Action,
    ActionKind,
    CONFERENCE_LIFECYCLE_KINDS,
    ConfigLoadFailureKind,
    Destination,
    NO_DESTINATION,
    OutboundEvent,
    Primitive,
    SymbolicTag,
    Tag,
)
from external_api.protocols.interfaces import (
    ConferenceProtocol,
    DestinationResolverProtocol,
    Dispatch,
    HostDispatchProtocol,
    LoggerProtocol,
    Middleware,
)

__all__ = [
    # Types
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
    # Interfaces
    "ConferenceProtocol",
    "DestinationResolverProtocol",
    "Dispatch",
    "HostDispatchProtocol",
    "LoggerProtocol",
    "Middleware",
]
