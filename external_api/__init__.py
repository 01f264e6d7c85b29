"""External API event bridge.

Observes actions flowing through the application's dispatch pipeline and
re-emits a filtered, sanitized subset of them as named events to a host
listener that cannot see internal state.

Sub-packages:
- protocols/ - Action/event types and DI interfaces
- events/    - The bridge and its sanitization helpers
- app/       - Host surface mount state and destination resolution
- config/    - BridgeSettings (pydantic-settings)
- logging/   - structlog-backed LoggerProtocol implementation

Top-level modules:
- pipeline   - ActionPipeline and MiddlewareRegistry
- bootstrap  - create_bridge(), composition root
- errors     - Package exceptions

Usage:
    from external_api.bootstrap import create_bridge
    from external_api.app import HostSurface
    from external_api.protocols import Action, ActionKind

    context = create_bridge(host_dispatch=native_module)
    context.mount_state.mount(HostSurface(scope="room1"))
    context.pipeline.dispatch(Action.create(ActionKind.CONFERENCE_LEFT))
"""

__version__ = "1.0.0"
