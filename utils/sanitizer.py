"""
Input Sanitization Module

Cleans raw quantity text from forms before it reaches the fraction codec.
"""

import re

from constants import MAX_LENGTHS


def sanitize_quantity_text(text, max_length=MAX_LENGTHS['quantity_text']):
    """
    Normalize whitespace in quantity text and cap its length.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Normalize all whitespace (including non-breaking spaces) to single spaces
    text = re.sub(r'[\s\u00a0\u2000-\u200b]+', ' ', text)

    # Strip leading/trailing whitespace
    text = text.strip()

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length]

    return text
