"""
Check-digit validators for Brazilian identification numbers.

Supported documents
-------------------
- **CPF**  (Cadastro de Pessoas Físicas): 11 digits, last 2 are check digits.
- **CNPJ** (Cadastro Nacional da Pessoa Jurídica): 14 digits, last 2 are check digits.
- **PIS**  (Programa de Integração Social): 11 digits, last one is the check digit.

All three use the same weighted modulo-11 scheme; only the length and the
weight tables differ, so each document is described by a `DocumentSpec` and a
single routine computes the check digits.

Behaviour
---------
- Input is normalized with `clear_symbols` (dots, dashes, slashes...).
- Wrong normalized length raises `InvalidLength` before anything is computed.
- A non-digit that survives normalization raises `InvalidFormat`.
- Otherwise the result is a plain bool: do the trailing digits match?

These are pure functions with no shared state; safe to call from any thread.
Only the number is checked, not whether it was actually issued.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple
import logging

from .errors import InvalidLength
from .normalize import clear_symbols, to_digits

logger = logging.getLogger(__name__)


class Document(str, Enum):
    cpf = "cpf"
    cnpj = "cnpj"
    pis = "pis"


@dataclass(frozen=True)
class DocumentSpec:
    """
    Length and weight tables of one document type.

    `weights[k]` computes the k-th check digit. It is applied to the base digits
    followed by the k check digits already computed, so its length is
    `base_length + k`.
    """
    name: str
    length: int
    weights: Tuple[Tuple[int, ...], ...]

    @property
    def base_length(self) -> int:
        return self.length - len(self.weights)


CPF = DocumentSpec(
    name="CPF",
    length=11,
    weights=(
        (10, 9, 8, 7, 6, 5, 4, 3, 2),
        (11, 10, 9, 8, 7, 6, 5, 4, 3, 2),
    ),
)

CNPJ = DocumentSpec(
    name="CNPJ",
    length=14,
    weights=(
        (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
        (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    ),
)

PIS = DocumentSpec(
    name="PIS",
    length=11,
    weights=((3, 2, 9, 8, 7, 6, 5, 4, 3, 2),),
)

SPECS: Dict[Document, DocumentSpec] = {
    Document.cpf: CPF,
    Document.cnpj: CNPJ,
    Document.pis: PIS,
}


def mod11_digit(total: int) -> int:
    """
    Turn a weighted sum into a check digit.

    r = total mod 11; remainders 0 and 1 give 0, anything else gives 11 - r.
    Since r <= 10 the result is always a single digit (0..9).
    """
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def check_digits(spec: DocumentSpec, base: Sequence[int]) -> List[int]:
    """
    Compute the check digits for `base` (the first `spec.base_length` digits).

    Example (CPF 111.444.777-XX):
      pass 1: 1*10 + 1*9 + ... + 7*2 = 162, 162 % 11 = 8  -> 3
      pass 2: same digits + 3, weights 11..2 = 204, % 11 = 6 -> 5
      => [3, 5]
    """
    seq = list(base[: spec.base_length])
    computed: List[int] = []
    for weights in spec.weights:
        total = sum(d * w for d, w in zip(seq, weights))
        digit = mod11_digit(total)
        computed.append(digit)
        seq.append(digit)
    return computed


def split_digits(spec: DocumentSpec, value: str) -> List[int]:
    """Normalize `value` and return its digits, enforcing the document length."""
    norm = clear_symbols(value)
    if len(norm) != spec.length:
        logger.debug(f"{spec.name} rejected wrong length: {len(norm)} chars")
        raise InvalidLength(spec.name, norm, spec.length)
    return to_digits(norm, spec.name)


def verify(spec: DocumentSpec, value: str) -> bool:
    """
    Validate `value` against `spec`.

    Raises:
        InvalidLength: normalized length differs from `spec.length`.
        InvalidFormat: a non-digit survived normalization.
    """
    digits = split_digits(spec, value)
    expected = check_digits(spec, digits)
    actual = digits[spec.base_length:]
    is_valid = actual == expected
    if not is_valid:
        logger.debug(f"{spec.name} checksum mismatch: expected {expected}, got {actual}")
    return is_valid


def is_valid_cpf(cpf: str) -> bool:
    """
    Validate a CPF by its two check digits.

    >>> is_valid_cpf("111.444.777-35")
    True
    >>> is_valid_cpf("111.444.777-36")
    False
    """
    return verify(CPF, cpf)


def is_valid_cnpj(cnpj: str) -> bool:
    """
    Validate a CNPJ by its two check digits.

    >>> is_valid_cnpj("11.222.333/0001-81")
    True
    """
    return verify(CNPJ, cnpj)


def is_valid_pis(pis: str) -> bool:
    """Validate a PIS/PASEP/NIT number by its single check digit."""
    return verify(PIS, pis)
