"""Host surface mount state and destination resolution.

A host surface is the host-side view that embeds the application. Events
can only be routed when exactly one surface is mounted and that surface has
a scope configured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from external_api.errors import SurfaceNotMountedError
from external_api.protocols import Destination, LoggerProtocol, NO_DESTINATION


@dataclass(frozen=True, eq=False)
class HostSurface:
    """A mounted host-facing surface.

    Identity-compared: two surfaces with the same scope are still distinct
    mounts.
    """
    scope: Optional[str] = None
    name: str = ""

    def __post_init__(self) -> None:
        if self.scope is not None and not isinstance(self.scope, str):
            raise TypeError("scope must be a string or None")


class AppMountState:
    """Process-wide record of mounted host surfaces."""

    def __init__(self, logger: Optional[LoggerProtocol] = None) -> None:
        self._surfaces: List[HostSurface] = []
        self._logger = logger.bind(component="app_mount_state") if logger else None

    def mount(self, surface: HostSurface) -> None:
        if any(s is surface for s in self._surfaces):
            return
        self._surfaces.append(surface)
        if self._logger:
            self._logger.debug(
                "host_surface_mounted",
                surface=surface.name,
                mounted=len(self._surfaces),
            )

    def unmount(self, surface: HostSurface) -> None:
        for index, mounted in enumerate(self._surfaces):
            if mounted is surface:
                del self._surfaces[index]
                break
        else:
            raise SurfaceNotMountedError(surface)
        if self._logger:
            self._logger.debug(
                "host_surface_unmounted",
                surface=surface.name,
                mounted=len(self._surfaces),
            )

    @property
    def surfaces(self) -> Tuple[HostSurface, ...]:
        return tuple(self._surfaces)

    @property
    def current(self) -> Optional[HostSurface]:
        """The mounted surface, or None unless exactly one is mounted."""
        if len(self._surfaces) == 1:
            return self._surfaces[0]
        return None

    def clear(self) -> None:
        self._surfaces.clear()


class MountedSurfaceResolver:
    """Resolves the destination scope from an AppMountState at send time."""

    def __init__(self, mount_state: AppMountState) -> None:
        self._mount_state = mount_state

    def resolve(self) -> Destination:
        surface = self._mount_state.current
        if surface is None or not surface.scope:
            return NO_DESTINATION
        return Destination(scope=surface.scope)


_mount_state: Optional[AppMountState] = None


def get_mount_state() -> AppMountState:
    """Get the process-wide mount state, creating it lazily."""
    global _mount_state
    if _mount_state is None:
        _mount_state = AppMountState()
    return _mount_state


def reset_mount_state() -> None:
    """Drop the process-wide mount state. Primarily for testing."""
    global _mount_state
    _mount_state = None


__all__ = [
    "AppMountState",
    "HostSurface",
    "MountedSurfaceResolver",
    "get_mount_state",
    "reset_mount_state",
]
