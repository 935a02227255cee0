"""Boolean validation of a full (14-character) CNPJ."""

from __future__ import annotations

from ..errors import CNPJError
from .check_digits import BASE_LENGTH, calculate_check_digits
from .formats import has_allowed_characters, is_all_zeros, is_full_format
from .normalizer import FULL_LENGTH, remove_mask


def is_valid(raw: str) -> bool:
    """
    Return True if `raw` is a well-formed CNPJ whose check digits match.

    Gates run in a fixed order and the first failure short-circuits:
      1) non-empty and only allowed characters (checked on the raw input)
      2) normalize (strip mask, upper-case)
      3) exactly 14 characters
      4) not fourteen zeros
      5) 12 alphanumerics + 2 digits
      6) informed DV == computed DV

    Never raises: every failure is reported as False.
    """
    if not isinstance(raw, str) or not raw.strip():
        return False
    if not has_allowed_characters(raw):
        return False

    cnpj = remove_mask(raw)
    if len(cnpj) != FULL_LENGTH:
        return False
    if is_all_zeros(cnpj):
        return False
    if not is_full_format(cnpj):
        return False

    base, informed = cnpj[:BASE_LENGTH], cnpj[BASE_LENGTH:]
    try:
        computed = calculate_check_digits(base)
    except CNPJError:
        return False
    return informed == computed
