"""
Mask handling for CNPJ strings.

`remove_mask` is the canonicalization step every check runs first;
`apply_mask` is its display-side inverse (XX.XXX.XXX/XXXX-XX).
"""

from __future__ import annotations

import re

MASK_CHARACTERS = re.compile(r"[./-]")

FULL_LENGTH = 14


def remove_mask(raw: str) -> str:
    """
    Strip '.', '-' and '/' and upper-case what is left.

    Never fails: anything else passes through untouched so the format checks
    can reject it later.
    """
    return MASK_CHARACTERS.sub("", raw).upper()


def apply_mask(cnpj: str) -> str:
    """Format a 14-character CNPJ as XX.XXX.XXX/XXXX-XX; other lengths are returned normalized."""
    s = remove_mask(cnpj)
    if len(s) != FULL_LENGTH:
        return s
    return f"{s[:2]}.{s[2:5]}.{s[5:8]}/{s[8:12]}-{s[12:]}"
