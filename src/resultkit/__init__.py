"""Result type with Ok/Err variants and helpers for chaining and aggregating them."""

from resultkit import ops
from resultkit.exceptions import ConfigurationError, ResultError, UnwrapError
from resultkit.result import Err, Ok, Result, err, ok

__all__ = [
    "ConfigurationError",
    "Err",
    "Ok",
    "Result",
    "ResultError",
    "UnwrapError",
    "err",
    "ok",
    "ops",
]
