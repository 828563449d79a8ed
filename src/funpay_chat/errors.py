"""
FunPay chat error types.

Parse absence (no chat, no message) is not an error and never raised.
"""

from typing import Any, Optional


class FunPayError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class AuthError(FunPayError):
    """CSRF token could not be extracted from the landing page."""

    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class NetworkError(FunPayError):
    """Transport failure or non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        details = {"status_code": status_code} if status_code is not None else None
        super().__init__("network_error", message, details)
        self.status_code = status_code


FetchError = NetworkError


class NotAuthenticated(FunPayError):
    def __init__(self, message: str = "csrf token is not initialized, call init() first"):
        super().__init__("not_authenticated", message)


class ConfigError(FunPayError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("config_error", message, details)
