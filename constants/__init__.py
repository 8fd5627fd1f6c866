# Constants for the quantity codec
from .fractions import (
    FRACTION_TOLERANCE, MAX_EXPANSION_STEPS, COMMON_FRACTION_TOLERANCE,
    COMMON_FRACTIONS, UNICODE_FRACTIONS, FRACTION_SLASH
)
from .validation import NUMERAL_PATTERN, FRACTION_PATTERN, MAX_LENGTHS
