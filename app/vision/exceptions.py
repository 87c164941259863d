class VisionError(Exception):
    """Raised when the AI vision provider returns no usable answer."""


class VisionNetworkError(VisionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class VisionConfigurationError(VisionError):
    """Raised when the AI provider cannot be set up from settings."""
