"""
Result-returning validation, driven by `ValidatorConfig`.

`brdocs.validators` raises on malformed input, which forces callers to mix
try/except with boolean checks. `DocumentValidator.check` instead returns a
`ValidationResult` that carries either the checksum outcome or the error, so
both paths are handled in one place:

    result = check_cpf(form["cpf"])
    if result.error:
        ...  # wrong length / stray letters
    elif not result.valid:
        ...  # well-formed, bad check digits
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
import logging

from .config import ValidatorConfig
from .errors import DocumentError, InvalidFormat
from .normalize import clear_symbols
from .validators import SPECS, Document, check_digits, split_digits

logger = logging.getLogger(__name__)

DocumentLike = Union[Document, str]


@dataclass
class ValidationResult:
    """
    Outcome of validating one number.

    Attributes:
        document: Which document type was checked.
        value:    The normalized input (symbols stripped).
        valid:    True only if the input is well formed and passes the checksum.
        error:    The length/format error, if the input was malformed.
    """
    document: Document
    value: str
    valid: bool
    error: Optional[DocumentError] = None

    @property
    def ok(self) -> bool:
        """True when the input was well formed, whatever the checksum said."""
        return self.error is None

    def unwrap(self) -> bool:
        if self.error is not None:
            raise self.error
        return self.valid


def _as_document(document: DocumentLike) -> Document:
    if isinstance(document, Document):
        return document
    if not isinstance(document, str):
        raise TypeError(f"Expected Document or str, got {type(document).__name__}")
    try:
        return Document(document.lower())
    except ValueError:
        raise ValueError(f"Unknown document type: {document!r}") from None


class DocumentValidator:
    """
    Validates CPF/CNPJ/PIS numbers under a `ValidatorConfig` policy.

    Stateless apart from the config, so one instance can be shared across
    threads.
    """

    def __init__(self, cfg: Optional[ValidatorConfig] = None) -> None:
        self.cfg = cfg or ValidatorConfig()

    def check(self, document: DocumentLike, value: str) -> ValidationResult:
        """Validate `value`; length and format problems end up in `result.error`."""
        doc = _as_document(document)
        spec = SPECS[doc]
        norm = clear_symbols(value)

        try:
            digits = split_digits(spec, norm)
        except DocumentError as e:
            logger.debug(f"{spec.name} rejected malformed input: {e}")
            return ValidationResult(document=doc, value=norm, valid=False, error=e)

        valid = digits[spec.base_length:] == check_digits(spec, digits)
        if not valid:
            logger.debug(f"{spec.name} checksum mismatch: {norm}")

        if valid and self.cfg.reject_repeated_digits and len(set(norm)) == 1:
            logger.debug(f"{spec.name} rejected repeated digits: {norm}")
            valid = False

        return ValidationResult(document=doc, value=norm, valid=valid)

    def is_valid(self, document: DocumentLike, value: str) -> bool:
        """
        Boolean form of `check`.

        InvalidLength always propagates. InvalidFormat propagates unless
        `cfg.format_errors` is "invalid", in which case it yields False.
        """
        result = self.check(document, value)
        if isinstance(result.error, InvalidFormat) and self.cfg.format_errors == "invalid":
            return False
        return result.unwrap()


_default = DocumentValidator()


def check(document: DocumentLike, value: str) -> ValidationResult:
    return _default.check(document, value)


def check_cpf(cpf: str) -> ValidationResult:
    return _default.check(Document.cpf, cpf)


def check_cnpj(cnpj: str) -> ValidationResult:
    return _default.check(Document.cnpj, cnpj)


def check_pis(pis: str) -> ValidationResult:
    return _default.check(Document.pis, pis)
