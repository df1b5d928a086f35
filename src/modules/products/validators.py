"""Request rule sets for the product routes.

Each rule lists its checks in evaluation order; all of them run, so a
missing ``price`` yields three violations.
"""

from __future__ import annotations

from modules.core.validation import body, is_positive, param
from modules.products.constants import (
    AVAILABILITY_INVALID,
    INVALID_ID,
    NAME_REQUIRED,
    PRICE_INVALID,
    PRICE_REQUIRED,
)

PRODUCT_ID = param("id").is_int(INVALID_ID)

PRODUCT_NAME = body("name").not_empty(NAME_REQUIRED)

PRODUCT_PRICE = (
    body("price")
    .is_numeric(PRICE_INVALID)
    .not_empty(PRICE_REQUIRED)
    .custom(is_positive, PRICE_INVALID)
)

PRODUCT_AVAILABILITY = body("availability").is_boolean(AVAILABILITY_INVALID)

CREATE_RULES = (PRODUCT_NAME, PRODUCT_PRICE)
UPDATE_RULES = (PRODUCT_ID, PRODUCT_NAME, PRODUCT_PRICE, PRODUCT_AVAILABILITY)
ID_RULES = (PRODUCT_ID,)
