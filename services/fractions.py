"""
Fraction Codec

Converts ingredient quantities between stored decimal amounts and the
fraction text cooks type and read ("3", "1/2", "1 1/2").

Validation and parsing share one grammar (see constants.validation), so any
text accepted by is_valid_fraction() converts cleanly with
fraction_to_decimal().
"""

import logging
import math

from constants import FRACTION_TOLERANCE, MAX_EXPANSION_STEPS, NUMERAL_PATTERN, FRACTION_PATTERN

logger = logging.getLogger(__name__)


class FractionFormatError(ValueError):
    """Raised when a quantity cannot be converted to or from fraction text."""

    def __init__(self, value, reason):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid quantity {value!r}: {reason}")


def gcd(a, b):
    """Greatest common divisor by Euclid's algorithm."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def continued_fraction(x, tolerance=FRACTION_TOLERANCE, max_steps=MAX_EXPANSION_STEPS):
    """
    Best rational approximation of x by continued-fraction expansion.

    Builds convergents h/k with h[i] = a*h[i-1] + h[i-2] and
    k[i] = a*k[i-1] + k[i-2], where a is the integer part of the current
    residual. Stops when a convergent is within tolerance of x, when the
    residual has no fractional part left, or after max_steps steps.

    Args:
        x: Non-negative value to approximate
        tolerance: Acceptable distance between x and the result
        max_steps: Maximum number of expansion steps

    Returns:
        (numerator, denominator, steps) tuple; numerator and denominator
        are ints, not necessarily in lowest terms
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    if max_steps < 1:
        raise ValueError(f"max_steps must be at least 1, got {max_steps}")

    h_prev, h = 0, 1
    k_prev, k = 1, 0
    residual = x
    steps = 0

    while steps < max_steps:
        a = math.floor(residual)
        h, h_prev = a * h + h_prev, h
        k, k_prev = a * k + k_prev, k
        steps += 1

        if abs(x - h / k) <= tolerance:
            break
        remainder = residual - a
        if remainder == 0:
            break
        residual = 1 / remainder
    else:
        logger.debug("Expansion of %r stopped at %d steps with %d/%d", x, steps, h, k)

    return h, k, steps


def _to_decimal(text):
    """Convert trimmed, non-empty quantity text using the shared grammar."""
    if NUMERAL_PATTERN.fullmatch(text):
        value = float(text)
    else:
        match = FRACTION_PATTERN.fullmatch(text)
        if match is None:
            raise FractionFormatError(text, 'expected a number, fraction or mixed number')
        if not match.group('denominator').strip('0'):
            raise FractionFormatError(text, 'denominator is zero')
        try:
            whole = int(match.group('whole') or 0)
            value = whole + int(match.group('numerator')) / int(match.group('denominator'))
        except (OverflowError, ValueError) as e:
            # Digit runs beyond float range or the int conversion limit
            raise FractionFormatError(text, 'quantity is too large') from e

    if not math.isfinite(value):
        raise FractionFormatError(text, 'quantity is too large')
    return value


def is_valid_fraction(text):
    """
    Check whether text is a quantity the editor can accept.

    Accepts plain numerals ("2", "1.5") and simple or mixed fractions
    ("1/2", "1 1/2"). Empty or whitespace-only text is invalid. Never raises.
    """
    if not isinstance(text, str) or not text.strip():
        return False
    try:
        _to_decimal(text.strip())
    except FractionFormatError:
        return False
    return True


def fraction_to_decimal(text):
    """
    Convert fraction text like '1 1/2' into a decimal amount.

    Empty or whitespace-only text is 0. Raises FractionFormatError for text
    that is_valid_fraction() rejects, including a zero denominator.
    """
    if not isinstance(text, str):
        raise FractionFormatError(text, 'expected text')
    text = text.strip()
    if not text:
        return 0.0
    return _to_decimal(text)


def decimal_to_fraction(value, tolerance=FRACTION_TOLERANCE, max_steps=MAX_EXPANSION_STEPS):
    """
    Convert a decimal amount to fraction text for editing.

    1.5 -> '1 1/2', 0.25 -> '1/4', 3 -> '3', 0 -> '0'. The fractional part is
    approximated by continued-fraction expansion within tolerance and
    reduced to lowest terms.

    Raises FractionFormatError for negative, NaN or infinite amounts.
    """
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise FractionFormatError(value, 'expected a number')
    try:
        finite = math.isfinite(float(value))
    except OverflowError:
        finite = False
    if not finite:
        raise FractionFormatError(value, 'quantity must be finite')
    if value < 0:
        raise FractionFormatError(value, 'quantity cannot be negative')
    if value == 0:
        return '0'
    if value == int(value):
        return str(int(value))

    whole = math.floor(value)
    numerator, denominator, _ = continued_fraction(value - whole, tolerance, max_steps)

    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    # The nearest convergent can be a whole unit (0.99999 -> 1/1)
    whole += numerator // denominator
    numerator %= denominator
    if numerator == 0:
        return str(whole)

    if whole == 0:
        return f"{numerator}/{denominator}"
    return f"{whole} {numerator}/{denominator}"
