# Utility modules for the quantity codec
from .sanitizer import sanitize_quantity_text
