"""Product field bounds.

Shared by the model validators, the request serializer and the DTOs so the
limits are declared in exactly one place.
"""

from decimal import Decimal

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100

DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500

CATEGORY_MAX_LENGTH = 255

PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
PRICE_MIN = Decimal("0.01")
PRICE_MAX = Decimal("1000000.00")

QUANTITY_MIN = 0
QUANTITY_MAX = 10_000

DEFAULT_LOW_STOCK_THRESHOLD = 10
