"""
Runs validation or check-digit computation over many identifiers.

One bad entry never aborts the batch: computation errors are recorded on the
entry's outcome and processing moves on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, List, Optional, TypeVar

import structlog

from ..core import calculate_check_digits, is_valid, remove_mask
from ..errors import CNPJError

log = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class ValidationOutcome:
    index: int  # 1-based, as printed
    raw: Any  # non-strings are reported as failures, not raised
    normalized: str
    valid: bool


@dataclass
class CheckDigitOutcome:
    index: int
    raw: Any  # non-strings are reported as failures, not raised
    base: str
    check_digits: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def full(self) -> Optional[str]:
        """Base followed by its check digits, or None when computation failed."""
        if self.check_digits is None:
            return None
        return self.base + self.check_digits


@dataclass
class BatchResult(Generic[T]):
    items: List[T] = field(default_factory=list)
    failures: int = 0

    @property
    def total(self) -> int:
        return len(self.items)


def validate_many(values: Iterable[Any]) -> BatchResult[ValidationOutcome]:
    """Validate each value; `failures` counts the invalid ones."""
    result: BatchResult[ValidationOutcome] = BatchResult()
    for i, raw in enumerate(values, start=1):
        valid = is_valid(raw)
        normalized = remove_mask(raw) if isinstance(raw, str) else ""
        result.items.append(ValidationOutcome(i, raw, normalized, valid))
        if not valid:
            result.failures += 1
    log.debug("validate_many", total=result.total, invalid=result.failures)
    return result


def check_digits_many(values: Iterable[Any]) -> BatchResult[CheckDigitOutcome]:
    """Compute check digits for each base; `failures` counts the entries that raised."""
    result: BatchResult[CheckDigitOutcome] = BatchResult()
    for i, raw in enumerate(values, start=1):
        base = remove_mask(raw) if isinstance(raw, str) else ""
        outcome = CheckDigitOutcome(index=i, raw=raw, base=base)
        try:
            outcome.check_digits = calculate_check_digits(raw)
        except CNPJError as e:
            outcome.error = str(e)
            outcome.error_code = e.code
            result.failures += 1
            log.info("check_digits_failed", index=i, cnpj=raw, code=e.code, error=str(e))
        result.items.append(outcome)
    log.debug("check_digits_many", total=result.total, failed=result.failures)
    return result
