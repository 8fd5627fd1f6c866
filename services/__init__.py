"""
Services Package

Quantity conversion logic for the recipe application.
"""

from .fractions import (
    FractionFormatError,
    continued_fraction,
    decimal_to_fraction,
    fraction_to_decimal,
    gcd,
    is_valid_fraction,
)

from .parsing import (
    amount_to_text,
    common_fraction,
    format_quantity,
    normalize_fractions,
    parse_quantity,
    update_amount,
)

__all__ = [
    # Codec
    'FractionFormatError',
    'continued_fraction',
    'decimal_to_fraction',
    'fraction_to_decimal',
    'gcd',
    'is_valid_fraction',
    # Parsing
    'amount_to_text',
    'common_fraction',
    'format_quantity',
    'normalize_fractions',
    'parse_quantity',
    'update_amount',
]
