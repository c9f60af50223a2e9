"""Exception types raised by the UniFuncs MCP server."""

from typing import Optional


class UniFuncsError(Exception):
    """Base class for all UniFuncs MCP server errors"""


class ConfigurationError(UniFuncsError):
    """Raised at startup when required configuration is missing or invalid"""


class ApiError(UniFuncsError):
    """Raised when the remote API answers with a non-zero envelope code"""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
