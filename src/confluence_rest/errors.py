"""Exception hierarchy for local Confluence client errors.

Only failures raised by this library itself live here. Transport, HTTP and
JSON errors raised by requests are passed to the caller unchanged.
"""


class ConfluenceError(Exception):
    """Base exception for all confluence-rest-client errors."""
    pass


class ConfigurationError(ConfluenceError):
    """Raised when the client is configured incorrectly."""

    def __init__(self, message: str, setting: str = "unknown"):
        super().__init__(message)
        self.setting = setting
