"""locroute exception hierarchy.

Route resolution itself never raises: an unknown path parses to ``None``.
Exceptions are reserved for invalid configuration handed to the package.
"""


class LocrouteError(Exception):
    """Base for all locroute-specific errors."""


class ConfigurationError(LocrouteError):
    """Raised when a domain override table or routing config is invalid.

    Typically raised while loading a deployment's domain configuration,
    before any path is parsed.
    """
