"""Authentication exceptions.

These exceptions are raised by the pantry_auth package and should be
caught and handled by the application layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class HashError(AuthError):
    """Base exception for password hashing failures.

    Hash errors are fatal for the operation that triggered them; nothing
    is retried and no fallback value is produced.
    """

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message)


class SaltError(HashError):
    """Raised when a random salt cannot be created."""

    def __init__(self, message: str = "Failed to create salt"):
        super().__init__(message)


class PasswordHashError(HashError):
    """Raised when the key derivation step fails."""

    def __init__(self, message: str = "Failed to hash password"):
        super().__init__(message)


class PasswordVerificationError(HashError):
    """Raised when a password does not match its stored hash."""

    def __init__(self, message: str = "Password does not match"):
        super().__init__(message)
