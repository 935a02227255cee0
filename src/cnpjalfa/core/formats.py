r"""
Pattern checks applied before any arithmetic.

All patterns use explicit ASCII classes and `fullmatch`: `\d` would accept
non-ASCII digits and `$` would accept a trailing newline.
"""

from __future__ import annotations

import re

# Raw input gate: letters in either case, digits and the mask characters.
ALLOWED_CHARACTERS = re.compile(r"[A-Za-z0-9./-]*")

FULL_PATTERN = re.compile(r"[A-Z0-9]{12}[0-9]{2}")
BASE_PATTERN = re.compile(r"[A-Z0-9]{12}")


def has_allowed_characters(raw: str) -> bool:
    """True if the raw (still masked) input only holds letters, digits, '.', '-' and '/'."""
    return ALLOWED_CHARACTERS.fullmatch(raw) is not None


def is_full_format(cnpj: str) -> bool:
    """12 alphanumerics followed by 2 digits (normalized input)."""
    return FULL_PATTERN.fullmatch(cnpj) is not None


def is_base_format(base: str) -> bool:
    """12 alphanumerics (normalized input)."""
    return BASE_PATTERN.fullmatch(base) is not None


def is_all_zeros(cnpj: str) -> bool:
    return bool(cnpj) and all(ch == "0" for ch in cnpj)
