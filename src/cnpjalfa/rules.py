"""
Pydantic validation rule for alphanumeric CNPJ fields.

    class Company(BaseModel):
        cnpj: CnpjAlfanumerico

Invalid values fail model validation with a localized message naming the
field ("O cnpj informado não é um CNPJ alfanumérico válido.").
"""

from __future__ import annotations

from typing import Annotated, Any, Callable

from pydantic import AfterValidator, ValidationInfo
from pydantic_core import PydanticCustomError

from .config import DEFAULT_RULE_MESSAGE
from .core import is_valid, remove_mask

ERROR_TYPE = "cnpj_alfanumerico"


def _make_check(message: str, normalize: bool) -> Callable[[Any, ValidationInfo], str]:
    def check(value: Any, info: ValidationInfo) -> str:
        if not is_valid(value):
            raise PydanticCustomError(
                ERROR_TYPE, message, {"attribute": info.field_name or "CNPJ"}
            )
        return remove_mask(value) if normalize else value

    return check


def cnpj_rule(message: str = DEFAULT_RULE_MESSAGE, normalize: bool = False) -> AfterValidator:
    """
    Build the validator used by `CnpjAlfanumerico`.

    Args:
        message: template; `{attribute}` is replaced by the field name.
        normalize: store the unmasked, upper-cased value instead of the input.
    """
    return AfterValidator(_make_check(message, normalize))


CnpjAlfanumerico = Annotated[str, cnpj_rule()]
