from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional
import yaml
from pydantic import BaseModel, Field

CONFIG_ENV_VAR = "CNPJALFA_CONFIG"

DEFAULT_RULE_MESSAGE = "O {attribute} informado não é um CNPJ alfanumérico válido."

# ---- Output (how the CLI prints results) ----
class OutputConfig(BaseModel):
    apply_mask: bool = False  # print completed CNPJs as XX.XXX.XXX/XXXX-XX
    valid_symbol: str = "✓"
    invalid_symbol: str = "✗"

# ---- Logging ----
class LoggingConfig(BaseModel):
    json_logs: bool = Field(default=True, alias="json")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = {"populate_by_name": True}

# ---- Validation rule (web/form adapters) ----
class RuleConfig(BaseModel):
    message: str = DEFAULT_RULE_MESSAGE  # {attribute} is replaced by the field name

# ---- Root config ----
class CnpjAlfaConfig(BaseModel):
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    rule: RuleConfig = Field(default_factory=RuleConfig)

# ---- Loader ----
def load_config(path: Optional[Path]) -> CnpjAlfaConfig:
    if not path:
        return CnpjAlfaConfig()
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return CnpjAlfaConfig(**data)

def config_from_env() -> CnpjAlfaConfig:
    """Load the file named by CNPJALFA_CONFIG, or defaults when it is unset."""
    env = os.getenv(CONFIG_ENV_VAR)
    return load_config(Path(env) if env else None)
