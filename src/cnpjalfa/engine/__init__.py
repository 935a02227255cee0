from .batch import BatchResult, CheckDigitOutcome, ValidationOutcome, check_digits_many, validate_many

__all__ = [
    "BatchResult",
    "CheckDigitOutcome",
    "ValidationOutcome",
    "check_digits_many",
    "validate_many",
]
