"""
Check-digit engine for the alphanumeric CNPJ.

How the two digits are derived
------------------------------
1) Every base character becomes an integer: digits keep their value, letters
   take their ASCII code minus 48 (so 'A' -> 17, 'Z' -> 42). Numeric-only
   CNPJs therefore keep the same check digits they always had.
2) DV1 = weighted sum of the 12 base values with WEIGHTS_1, folded by mod 11.
3) DV2 = same fold over base + DV1 (13 values) with WEIGHTS_2.

Both weight vectors put the largest weight next to the most significant
character; WEIGHTS_2 is WEIGHTS_1 with one extra leading weight so that DV1
lines up with the final weight.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..errors import (
    AllZerosError,
    InternalComputationError,
    InvalidCharactersError,
    InvalidFormatError,
    InvalidLengthError,
)
from .formats import has_allowed_characters, is_all_zeros, is_base_format
from .normalizer import remove_mask

BASE_LENGTH = 12

WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_ZERO = ord("0")


def char_value(ch: str) -> int:
    """
    Map one normalized character to its numeric value.

    Raises:
        InvalidCharactersError: for anything outside [0-9A-Z].
    """
    if len(ch) == 1 and ("0" <= ch <= "9" or "A" <= ch <= "Z"):
        return ord(ch) - _ZERO
    raise InvalidCharactersError(f"invalid character: {ch!r}")


def values_of(chars: Iterable[str]) -> List[int]:
    return [char_value(ch) for ch in chars]


def compute_digit(values: Sequence[int], weights: Sequence[int]) -> int:
    """
    Fold a value sequence into one check digit (weighted sum, mod 11).

    Weights are consumed left to right; `values` may be shorter than
    `weights` but never longer.

    Returns:
        0 when the remainder is 0 or 1, otherwise 11 - remainder.
    """
    if len(values) > len(weights):
        raise InternalComputationError("length incompatible with weights")

    total = sum(v * w for v, w in zip(values, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _checked_base(base: str) -> str:
    """Run the computation-path preconditions in order and return the normalized base."""
    if not isinstance(base, str):
        raise InvalidFormatError(f"expected a string, got {type(base).__name__}")
    if not has_allowed_characters(base):
        raise InvalidCharactersError("CNPJ contains characters that are not allowed")

    normalized = remove_mask(base)
    if len(normalized) != BASE_LENGTH:
        raise InvalidLengthError(
            f"CNPJ base must have {BASE_LENGTH} characters, got {len(normalized)}"
        )
    if not is_base_format(normalized):
        raise InvalidFormatError("CNPJ base is not in the expected format")
    if is_all_zeros(normalized):
        raise AllZerosError("CNPJ base cannot be all zeros")
    return normalized


def calculate_check_digits(base: str) -> str:
    """
    Compute the two check digits for a 12-character base.

    The base may carry mask characters and lowercase letters; both are
    normalized away before the checks.

    Args:
        base: e.g. "12ABC34501DE" or "12.ABC.345/01DE".

    Returns:
        Two-digit string, e.g. "35".

    Raises:
        InvalidCharactersError, InvalidLengthError, InvalidFormatError,
        AllZerosError, InternalComputationError.
    """
    normalized = _checked_base(base)

    dv1 = compute_digit(values_of(normalized), WEIGHTS_1)
    if not 0 <= dv1 <= 9:
        raise InternalComputationError(f"first check digit out of range: {dv1}")

    dv2 = compute_digit(values_of(normalized + str(dv1)), WEIGHTS_2)
    if not 0 <= dv2 <= 9:
        raise InternalComputationError(f"second check digit out of range: {dv2}")

    return f"{dv1}{dv2}"


def complete(base: str) -> str:
    """Normalized base followed by its check digits ("12ABC34501DE" -> "12ABC34501DE35")."""
    return remove_mask(base) + calculate_check_digits(base)
