"""Authentication exceptions.

``InvalidTokenError`` is raised while reading tokens and should be handled
by the caller. ``TokenConfigurationError`` signals a misconfigured process
and is meant to abort startup, not to be caught per request.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class TokenConfigurationError(AuthError):
    """Raised when the token signing configuration is missing or invalid."""

    def __init__(self, message: str = "Invalid token configuration"):
        super().__init__(message)
