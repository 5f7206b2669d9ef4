"""Exception hierarchy for zapctl.

Only conditions that must stop a request are raised. Recoverable
conditions (missing metadata, unreadable Info.plist, failed probes)
are logged and degraded where they occur.
"""


class ZapctlError(Exception):
    """Base exception for zapctl errors."""


class HomeDirectoryNotFoundError(ZapctlError):
    """Raised when the user's home directory cannot be resolved.

    Discovery aborts before anything is probed or deleted.
    """


class ApplicationNotFoundError(ZapctlError):
    """Raised when an application cannot be found in the registry."""


class ConfigError(ZapctlError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""
