"""
Shared constants for Cart Price Transform.

Centralizes the reserved attribute key and the bounds used across modules.
"""

import re
from decimal import Decimal

# Reserved line attribute carrying the externally determined target price
PRICE_ATTRIBUTE_KEY = "_Price"

# Target prices are written as "$600" or "$19.99"
PRICE_VALUE_PREFIX = "$"

# Plain '.'-separated decimal: optional sign and exponent, no separators,
# no whitespace, ASCII digits only. Always applied with fullmatch. Locale
# formats such as "1,000.00" or "19,99" do not match.
PRICE_NUMBER_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')

MIN_PERCENTAGE = Decimal(0)
MAX_PERCENTAGE = Decimal(100)

DEFAULT_CURRENCY = "USD"
