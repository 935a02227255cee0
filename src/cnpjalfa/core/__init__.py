"""Normalization, format checks and check-digit arithmetic."""

from .check_digits import (
    BASE_LENGTH,
    WEIGHTS_1,
    WEIGHTS_2,
    calculate_check_digits,
    char_value,
    complete,
    compute_digit,
)
from .formats import has_allowed_characters, is_all_zeros, is_base_format, is_full_format
from .normalizer import FULL_LENGTH, apply_mask, remove_mask
from .validator import is_valid

__all__ = [
    "BASE_LENGTH",
    "FULL_LENGTH",
    "WEIGHTS_1",
    "WEIGHTS_2",
    "apply_mask",
    "calculate_check_digits",
    "char_value",
    "complete",
    "compute_digit",
    "has_allowed_characters",
    "is_all_zeros",
    "is_base_format",
    "is_full_format",
    "is_valid",
    "remove_mask",
]
