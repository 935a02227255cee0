"""Validation and check-digit computation for the alphanumeric CNPJ."""

from .core import apply_mask, calculate_check_digits, complete, is_valid, remove_mask
from .errors import (
    AllZerosError,
    CNPJError,
    InternalComputationError,
    InvalidCharactersError,
    InvalidFormatError,
    InvalidLengthError,
)

__version__ = "0.1.0"

__all__ = [
    "AllZerosError",
    "CNPJError",
    "InternalComputationError",
    "InvalidCharactersError",
    "InvalidFormatError",
    "InvalidLengthError",
    "apply_mask",
    "calculate_check_digits",
    "complete",
    "is_valid",
    "remove_mask",
]
