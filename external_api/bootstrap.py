"""Composition Root - Build the bridge and wire its dependencies.

This is the only place where concrete implementations are instantiated and
wired together.

Usage:
    from external_api.bootstrap import create_bridge

    context = create_bridge(host_dispatch=native_module)
    context.mount_state.mount(HostSurface(scope="room1"))
    context.pipeline.dispatch(action)
"""

from dataclasses import dataclass
from typing import Optional

from external_api.app import AppMountState, MountedSurfaceResolver, get_mount_state
from external_api.config import BridgeSettings, get_settings
from external_api.events import ExternalAPIBridge
from external_api.logging import configure_logging, create_logger
from external_api.pipeline import ActionPipeline
from external_api.protocols import HostDispatchProtocol, LoggerProtocol


@dataclass
class BridgeContext:
    """Everything create_bridge() wired together."""
    settings: BridgeSettings
    logger: LoggerProtocol
    mount_state: AppMountState
    pipeline: ActionPipeline
    bridge: ExternalAPIBridge


def create_bridge(
    host_dispatch: HostDispatchProtocol,
    settings: Optional[BridgeSettings] = None,
    mount_state: Optional[AppMountState] = None,
    logger: Optional[LoggerProtocol] = None,
    pipeline: Optional[ActionPipeline] = None,
) -> BridgeContext:
    """Create and start an ExternalAPIBridge.

    Args:
        host_dispatch: Send primitive reaching the host listener.
        settings: Optional pre-configured settings. Uses get_settings() if None.
        mount_state: Mount state to resolve scopes from. Process-wide if None.
        logger: Root logger. Created after configuring logging if None.
        pipeline: Pipeline to attach to. A fresh one is created if None.

    Returns:
        BridgeContext with the started bridge.
    """
    if settings is None:
        settings = get_settings()

    if logger is None:
        configure_logging(level=settings.log_level, json_output=settings.json_logs)
        logger = create_logger("external_api")

    if mount_state is None:
        mount_state = get_mount_state()

    if pipeline is None:
        pipeline = ActionPipeline(logger=logger)

    bridge = ExternalAPIBridge(
        host_dispatch=host_dispatch,
        resolver=MountedSurfaceResolver(mount_state),
        logger=logger,
        log_events=settings.log_events,
    )
    bridge.start(pipeline)

    settings.log_status(logger)

    return BridgeContext(
        settings=settings,
        logger=logger,
        mount_state=mount_state,
        pipeline=pipeline,
        bridge=bridge,
    )


__all__ = ["BridgeContext", "create_bridge"]
