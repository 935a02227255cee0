"""Errors raised by the check-digit computation path."""

from __future__ import annotations


class CNPJError(ValueError):
    """Base class for every CNPJ failure. `code` is stable and safe to expose."""

    code = "cnpj_error"


class InvalidCharactersError(CNPJError):
    code = "invalid_characters"


class InvalidLengthError(CNPJError):
    code = "invalid_length"


class InvalidFormatError(CNPJError):
    code = "invalid_format"


class AllZerosError(CNPJError):
    code = "all_zeros"


class InternalComputationError(CNPJError):
    """Weights and values disagree. Unreachable when preconditions hold."""

    code = "internal_computation"
