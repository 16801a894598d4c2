import pytest

from brdocs.errors import InvalidFormat
from brdocs.normalize import SYMBOLS, clear_symbols, to_digits


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("111.444.777-35", "11144477735"),
        ("11.222.333/0001-81", "11222333000181"),
        ("  120.12345.67-2\n", "12012345672"),
        ("nº 123", "n 123"),
        ("Ação!", "Ação"),  # accents are kept
        ("AbC", "AbC"),  # case is kept
        ("", ""),
        ("   ", ""),
    ],
)
def test_clear_symbols(raw, expected):
    assert clear_symbols(raw) == expected


def test_clear_symbols_removes_every_symbol():
    assert clear_symbols("1" + "".join(SYMBOLS) + "2") == "12"


def test_clear_symbols_keeps_inner_whitespace():
    assert clear_symbols(" 1 2 ") == "1 2"


@pytest.mark.parametrize("value", ["11144477735", "12.3/4", " a-b "])
def test_clear_symbols_is_idempotent(value):
    once = clear_symbols(value)
    assert clear_symbols(once) == once


def test_clear_symbols_rejects_non_strings():
    with pytest.raises(TypeError):
        clear_symbols(None)


def test_to_digits():
    assert to_digits("0129", "CPF") == [0, 1, 2, 9]
    assert to_digits("", "CPF") == []


@pytest.mark.parametrize(
    "value, position",
    [("12a4", 2), ("x", 0), ("12 4", 2), ("1²", 1)],
)
def test_to_digits_reports_first_non_digit(value, position):
    with pytest.raises(InvalidFormat) as exc:
        to_digits(value, "PIS")
    assert exc.value.position == position
    assert exc.value.document == "PIS"
    assert "PIS" in str(exc.value)
