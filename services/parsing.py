"""
Parsing Service

Functions for turning quantity text from the ingredient editor into stored
amounts, and stored amounts back into text for display and editing.
"""

import logging
import math
import re

from constants import (
    COMMON_FRACTIONS, COMMON_FRACTION_TOLERANCE, FRACTION_SLASH, FRACTION_TOLERANCE,
    MAX_EXPANSION_STEPS, MAX_LENGTHS, UNICODE_FRACTIONS
)
from utils.sanitizer import sanitize_quantity_text
from .fractions import decimal_to_fraction, fraction_to_decimal, is_valid_fraction

logger = logging.getLogger(__name__)


def normalize_fractions(text):
    """Replace Unicode fraction characters with ASCII fraction text."""
    text = text.replace(FRACTION_SLASH, '/')

    for char, fraction in UNICODE_FRACTIONS.items():
        if char in text:
            # Mixed fraction like "1½" or "1 ½" becomes "1 1/2"
            pattern = r'(\d+)\s*' + re.escape(char)
            text = re.sub(pattern, r'\1 ' + fraction, text)
            text = text.replace(char, fraction)
    return text


def _clean(value, max_length):
    return normalize_fractions(sanitize_quantity_text(value, max_length=max_length))


def parse_quantity(value, default=0.0, max_length=MAX_LENGTHS['quantity_text']):
    """
    Parse quantity text like '1 1/2', '1/4', '2' or '1½' into a float.

    Returns default when the text is empty or not a valid quantity.
    """
    if not value:
        return default

    text = _clean(value, max_length)
    if not is_valid_fraction(text):
        logger.debug("Discarding invalid quantity text %r", value)
        return default
    return fraction_to_decimal(text)


def update_amount(text, current, max_length=MAX_LENGTHS['quantity_text']):
    """
    Amount to store after the quantity field changed to text.

    Valid text replaces the amount; anything else (including a half-typed
    fraction like '1 1/') keeps the current amount.
    """
    text = _clean(text, max_length)
    if is_valid_fraction(text):
        return fraction_to_decimal(text)
    return current


def amount_to_text(amount, tolerance=FRACTION_TOLERANCE, max_steps=MAX_EXPANSION_STEPS):
    """Fraction text to prefill the quantity field with a stored amount."""
    if amount is None:
        return ''
    return decimal_to_fraction(amount, tolerance=tolerance, max_steps=max_steps)


def common_fraction(decimal):
    """Label of the common cooking fraction within snapping distance of decimal, or None."""
    for value, label in COMMON_FRACTIONS.items():
        if abs(decimal - value) < COMMON_FRACTION_TOLERANCE:
            return label
    return None


def format_quantity(value, tolerance=FRACTION_TOLERANCE, max_steps=MAX_EXPANSION_STEPS):
    """
    Convert float to fraction string for display.

    Amounts close to a common cooking fraction are shown as that fraction
    (0.33 -> '1/3'); anything else falls back to the exact conversion.
    Negative amounts are shown with a leading '-'.
    """
    if value is None or value == 0:
        return '0'
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if value < 0:
        return '-' + format_quantity(-value, tolerance=tolerance, max_steps=max_steps)

    whole = math.floor(value)
    if value == whole:
        return str(whole)
    label = common_fraction(value - whole)
    if label is None:
        return decimal_to_fraction(value, tolerance=tolerance, max_steps=max_steps)
    if whole > 0:
        return f"{whole} {label}"
    return label
