"""Exception hierarchy for inkcheck.

Construction-time errors (registration, configuration) propagate to the
caller. Plugin errors are raised close to the failing script and handled by
the loader or the plugin host, which log them and keep going.
"""


class InkcheckError(Exception):
    """Base class for all inkcheck errors."""
    pass


class ConfigError(InkcheckError):
    """Raised when a configuration file is missing, unreadable or invalid."""
    pass


class RegistrationError(InkcheckError):
    """Raised when a configured validator cannot be registered."""
    pass


class ParseError(InkcheckError):
    """Raised when an input file cannot be turned into a document."""
    pass


class PluginError(InkcheckError):
    """Base class for script plugin failures."""

    def __init__(self, message: str, plugin: str | None = None):
        self.plugin = plugin
        super().__init__(message)


class PluginLoadError(PluginError):
    """Raised when a plugin script fails to compile or initialise."""
    pass


class PluginIOError(PluginError):
    """Raised when a plugin script cannot be read from disk."""
    pass


class PluginRuntimeError(PluginError):
    """Raised when a plugin hook fails while executing."""

    def __init__(self, message: str, plugin: str | None = None, hook: str | None = None):
        self.hook = hook
        super().__init__(message, plugin)
