"""
Fraction Constants

Tolerances, iteration bounds and lookup tables used when converting
ingredient quantities between decimals and fraction text.
"""

# Largest allowed gap between a quantity and the fraction chosen for it
FRACTION_TOLERANCE = 0.0001

# Hard upper bound on continued-fraction expansion steps per conversion
MAX_EXPANSION_STEPS = 100

# Snap distance used when labelling a quantity with a common cooking fraction
COMMON_FRACTION_TOLERANCE = 0.02

# Common fractions for display (using precise values)
COMMON_FRACTIONS = {
    0.125: '1/8', 0.25: '1/4', 1/3: '1/3', 0.375: '3/8',
    0.5: '1/2', 0.625: '5/8', 2/3: '2/3', 0.75: '3/4', 0.875: '7/8'
}

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bd': '1/2',  # ½
    '\u2153': '1/3',  # ⅓
    '\u2154': '2/3',  # ⅔
    '\u00bc': '1/4',  # ¼
    '\u00be': '3/4',  # ¾
    '\u2155': '1/5',  # ⅕
    '\u2156': '2/5',  # ⅖
    '\u2157': '3/5',  # ⅗
    '\u2158': '4/5',  # ⅘
    '\u2159': '1/6',  # ⅙
    '\u215a': '5/6',  # ⅚
    '\u215b': '1/8',  # ⅛
    '\u215c': '3/8',  # ⅜
    '\u215d': '5/8',  # ⅝
    '\u215e': '7/8',  # ⅞
}

# Unicode fraction slash, as in "1⁄2"
FRACTION_SLASH = '\u2044'
