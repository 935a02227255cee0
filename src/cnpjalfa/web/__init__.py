"""HTTP API for alphanumeric CNPJ validation."""

from .api import app

__all__ = [
    "app",
]
