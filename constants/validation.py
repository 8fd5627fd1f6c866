"""
Validation Constants

Grammar and limits for validating quantity text typed into the
ingredient editor.
"""

import re

# Plain base-10 numeral: "3", "1.5", "2.", ".5" (ASCII digits only)
NUMERAL_PATTERN = re.compile(r'\d+\.?\d*|\.\d+', re.ASCII)

# Simple or mixed fraction: "1/2", "1 1/2" (exactly one space after the whole part)
FRACTION_PATTERN = re.compile(r'(?:(?P<whole>\d+) )?(?P<numerator>\d+)/(?P<denominator>\d+)', re.ASCII)

# Maximum field lengths for security
MAX_LENGTHS = {
    'quantity_text': 32,
}
