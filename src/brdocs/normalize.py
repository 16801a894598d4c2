"""
Normalizers applied to raw document numbers before validation.

Users type CPF/CNPJ/PIS numbers with all kinds of punctuation
("111.444.777-35", "11.222.333/0001-81", "120.12345.67-2"). These helpers turn
them into the bare digit form the check-digit code works on.
"""

from __future__ import annotations

from typing import List

from .errors import InvalidFormat

# Characters dropped by `clear_symbols`. Anything else (letters, inner spaces,
# accents) is kept and left for `to_digits` to reject.
SYMBOLS = (
    "-", "_", ".", ",", "\\", "/", "|", "~", "#", "$", "%", "&", "@", '"', "'",
    "*", "=", "+", "ª", "º", ">", "<", ":", ";", "?", "!",
)

_DIGITS = "0123456789"


def clear_symbols(value: str) -> str:
    """
    Trim surrounding whitespace and remove every character in `SYMBOLS`.

    Total and idempotent: the empty string maps to itself and a digit-only
    string comes back unchanged.

    Examples:
      ' 111.444.777-35 '    -> '11144477735'
      '11.222.333/0001-81'  -> '11222333000181'
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")

    result = value.strip()
    for symbol in SYMBOLS:
        result = result.replace(symbol, "")
    return result


def to_digits(value: str, document: str) -> List[int]:
    """
    Convert a normalized number into a list of ints.

    Only ASCII 0-9 count as digits (`str.isdigit` would also accept things
    like '²'). The first offending character raises `InvalidFormat`.
    """
    digits: List[int] = []
    for i, ch in enumerate(value):
        if ch not in _DIGITS:
            raise InvalidFormat(document, value, i)
        digits.append(ord(ch) - 48)  # '0' -> 48
    return digits
