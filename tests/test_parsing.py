import pytest

from services import (
    FractionFormatError,
    amount_to_text,
    common_fraction,
    format_quantity,
    normalize_fractions,
    parse_quantity,
    update_amount,
)
from utils import sanitize_quantity_text


@pytest.mark.parametrize(
    "text,expected",
    (
        ("½", "1/2"),
        ("1½", "1 1/2"),
        ("2 ¾", "2 3/4"),
        ("1⁄2", "1/2"),
        ("1 1/2", "1 1/2"),
        ("3", "3"),
    ),
)
def test_normalize_fractions(text: str, expected: str) -> None:
    assert normalize_fractions(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    (
        ("  1   1/2 ", "1 1/2"),
        ("1 1/2", "1 1/2"),
        (None, ""),
        (2, "2"),
        ("1" * 50, "1" * 32),
    ),
)
def test_sanitize_quantity_text(text, expected: str) -> None:
    assert sanitize_quantity_text(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    (
        ("1 1/2", 1.5),
        ("1½", 1.5),
        ("¼", 0.25),
        ("2", 2.0),
        (" 0.75 ", 0.75),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("1/0", 0.0),
    ),
)
def test_parse_quantity(text, expected: float) -> None:
    assert parse_quantity(text) == pytest.approx(expected)


def test_parse_quantity_default() -> None:
    assert parse_quantity("a pinch", default=1.0) == 1.0
    assert parse_quantity("", default=1.0) == 1.0


def test_update_amount_follows_valid_text() -> None:
    amount = 0.0
    for text, expected in (
        ("1", 1.0),
        ("1 ", 1.0),
        ("1 1", 1.0),
        ("1 1/", 1.0),
        ("1 1/2", 1.5),
        ("", 1.5),
        ("3/4", 0.75),
    ):
        amount = update_amount(text, amount)
        assert amount == pytest.approx(expected)


@pytest.mark.parametrize(
    "amount,expected",
    ((None, ""), (0, "0"), (1.5, "1 1/2"), (0.33, "33/100"), (2, "2")),
)
def test_amount_to_text(amount, expected: str) -> None:
    assert amount_to_text(amount) == expected


def test_amount_to_text_rejects_negative_amount() -> None:
    with pytest.raises(FractionFormatError):
        amount_to_text(-2)


@pytest.mark.parametrize(
    "amount,expected",
    (
        (None, "0"),
        (0, "0"),
        (4.0, "4"),
        (0.33, "1/3"),
        (0.67, "2/3"),
        (1.5, "1 1/2"),
        (2.125, "2 1/8"),
        (0.2, "1/5"),
        (1.1, "1 1/10"),
        (-0.5, "-1/2"),
        (-2.33, "-2 1/3"),
        (-3, "-3"),
    ),
)
def test_format_quantity(amount, expected: str) -> None:
    assert format_quantity(amount) == expected


@pytest.mark.parametrize(
    "decimal,expected",
    ((0.5, "1/2"), (0.33, "1/3"), (0.66, "2/3"), (0.13, "1/8"), (0.1, None), (0.95, None)),
)
def test_common_fraction(decimal: float, expected) -> None:
    assert common_fraction(decimal) == expected
