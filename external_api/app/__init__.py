"""Host surface mount state."""

from external_api.app.mount_state import (
    AppMountState,
    HostSurface,
    MountedSurfaceResolver,
    get_mount_state,
    reset_mount_state,
)

__all__ = [
    "AppMountState",
    "HostSurface",
    "MountedSurfaceResolver",
    "get_mount_state",
    "reset_mount_state",
]
