"""Exception types raised outside the modelling core."""


class DockscopeError(Exception):
    """Base class for dockscope errors."""


class ConfigurationError(DockscopeError, ValueError):
    """Raised when a caller supplies an unusable combination of inputs."""


class StructureSourceError(DockscopeError):
    """Raised by a structure source when a lookup cannot be completed."""
