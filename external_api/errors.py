"""Exceptions raised by the external API bridge package."""


class ExternalAPIError(Exception):
    """Base class for external API bridge errors."""


class SurfaceNotMountedError(ExternalAPIError):
    """Raised when unmounting a host surface that was never mounted."""

    def __init__(self, surface: object):
        self.surface = surface
        super().__init__(f"Host surface is not mounted: {surface!r}")


class PipelineError(ExternalAPIError):
    """Raised when the action pipeline is used while it is being built."""


__all__ = [
    "ExternalAPIError",
    "PipelineError",
    "SurfaceNotMountedError",
]
