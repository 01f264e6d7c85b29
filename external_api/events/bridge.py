"""ExternalAPIBridge - Translates pipeline actions into host events.

This bridge:
1. Registers as middleware on the ActionPipeline
2. Lets every action through first, then inspects it
3. Translates a fixed set of action kinds into serializable events
4. Forwards them to the host dispatch for the currently mounted surface

Action kinds handled:
  CONFERENCE_FAILED     → CONFERENCE_FAILED (non-recoverable only)
  CONFERENCE_WILL_JOIN  → CONFERENCE_WILL_JOIN
  CONFERENCE_JOINED     → CONFERENCE_JOINED
  CONFERENCE_WILL_LEAVE → CONFERENCE_WILL_LEAVE
  CONFERENCE_LEFT       → CONFERENCE_LEFT
  LOAD_CONFIG_ERROR     → <failure kind label>, e.g. config.fetch.error

Architecture:
    ActionPipeline.dispatch(action)
           | middleware
    ExternalAPIBridge (translation layer)
           | resolve() at send time
    DestinationResolver (mounted host surface scope)
           | send(name, data, scope)
    HostDispatch (host listener)
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TYPE_CHECKING

from external_api.events.transforms import (
    conference_event,
    conference_failed_event,
    config_load_failed_event,
    is_recoverable,
)
from external_api.protocols import (
    Action,
    ActionKind,
    CONFERENCE_LIFECYCLE_KINDS,
    DestinationResolverProtocol,
    Dispatch,
    HostDispatchProtocol,
    LoggerProtocol,
    OutboundEvent,
    Primitive,
)

if TYPE_CHECKING:
    from external_api.pipeline import ActionPipeline


class ExternalAPIBridge:
    """Bridges pipeline actions to the host listener.

    Purely observational: the action is always passed on and the result of
    the rest of the chain is returned unchanged. Host dispatch failures are
    not caught here.

    Usage:
        bridge = ExternalAPIBridge(host_dispatch, resolver, logger)
        bridge.start(pipeline)
        pipeline.dispatch(Action.create(ActionKind.CONFERENCE_JOINED, ...))
    """

    def __init__(
        self,
        host_dispatch: HostDispatchProtocol,
        resolver: DestinationResolverProtocol,
        logger: LoggerProtocol,
        log_events: bool = False,
    ) -> None:
        """Initialize ExternalAPIBridge.

        Args:
            host_dispatch: Send primitive reaching the host listener.
            resolver: Resolves the destination scope at send time.
            logger: Logger instance.
            log_events: Debug-log every event handed to the host.
        """
        self._host_dispatch = host_dispatch
        self._resolver = resolver
        self._logger = logger.bind(component="external_api_bridge")
        self._log_events = log_events
        self._pipeline: Optional["ActionPipeline"] = None

    @property
    def started(self) -> bool:
        return self._pipeline is not None

    def start(self, pipeline: "ActionPipeline") -> None:
        """Register the bridge as middleware on the pipeline."""
        if self._pipeline is not None:
            return

        pipeline.use(self)
        self._pipeline = pipeline

        self._logger.info("external_api_bridge_started")

    def stop(self) -> None:
        """Remove the bridge from its pipeline."""
        if self._pipeline is None:
            return

        self._pipeline.remove(self)
        self._pipeline = None

        self._logger.info("external_api_bridge_stopped")

    def __call__(self, next_dispatch: Dispatch) -> Dispatch:
        def dispatch(action: Action) -> Any:
            result = next_dispatch(action)
            self.on_action(action)
            return result

        return dispatch

    def on_action(self, action: Action) -> None:
        """Translate and emit an already-dispatched action."""
        event = self._translate_action(action)
        if event is not None:
            self.emit(event.name, event.data)

    def emit(self, name: str, data: Dict[str, Primitive]) -> None:
        """Send an event to the mounted host surface, if there is one."""
        destination = self._resolver.resolve()
        if not destination:
            return

        if self._log_events:
            self._logger.debug(
                "external_api_event_sent",
                event_name=name,
                scope=destination.scope,
                fields=sorted(data),
            )
        self._host_dispatch.send(name, data, destination.scope)

    def _translate_action(self, action: Action) -> Optional[OutboundEvent]:
        """Translate an action to an outbound event.

        Returns None if the action should not reach the host.
        """
        kind = action.kind

        if kind == ActionKind.CONFERENCE_FAILED:
            # Recoverable failures are retried locally (e.g. after a
            # password prompt) and are not final from the host's view.
            if is_recoverable(action):
                return None
            return conference_failed_event(action, logger=self._logger)

        elif kind in CONFERENCE_LIFECYCLE_KINDS:
            return conference_event(action, logger=self._logger)

        elif kind == ActionKind.LOAD_CONFIG_ERROR:
            return config_load_failed_event(action)

        return None


__all__ = ["ExternalAPIBridge"]
