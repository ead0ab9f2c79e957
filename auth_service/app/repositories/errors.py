class RepositoryError(Exception):
    """Base class for errors raised by repository implementations"""


class DuplicateEmailError(RepositoryError):
    """Raised when a write violates the unique constraint on users.email"""


class DuplicateUsernameError(RepositoryError):
    """Raised when a write violates the unique constraint on users.username"""
