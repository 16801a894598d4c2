"""Check-digit validation for Brazilian CPF, CNPJ and PIS numbers."""

from .config import ValidatorConfig, load_config, config_from_env
from .engine import (
    DocumentValidator,
    ValidationResult,
    check,
    check_cpf,
    check_cnpj,
    check_pis,
)
from .errors import DocumentError, InvalidLength, InvalidFormat
from .normalize import clear_symbols
from .validators import Document, is_valid_cpf, is_valid_cnpj, is_valid_pis

__version__ = "0.1.0"

__all__ = [
    "is_valid_cpf",
    "is_valid_cnpj",
    "is_valid_pis",
    "check",
    "check_cpf",
    "check_cnpj",
    "check_pis",
    "clear_symbols",
    "Document",
    "DocumentValidator",
    "ValidationResult",
    "ValidatorConfig",
    "load_config",
    "config_from_env",
    "DocumentError",
    "InvalidLength",
    "InvalidFormat",
]
