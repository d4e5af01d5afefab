"""Exceptions raised by resultkit itself.

Domain failures never appear here: they travel as ``Err`` values. These are the
few conditions where the library has to leave the Result discipline.
"""


class ResultError(Exception):
    """Base class for exceptions raised by resultkit."""


class UnwrapError(ResultError):
    """Raised when unwrap() or expect() is called on an Err.

    Attributes:
        error: The domain failure held by the Err that was unwrapped.
    """

    def __init__(self, message: str, error: object) -> None:
        super().__init__(message)
        self.error = error


class ConfigurationError(ResultError):
    """Raised when a configuration value cannot be used."""
