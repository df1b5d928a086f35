"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views) and the Service
layer.  DTOs are immutable (``frozen=True``) and are only built after
the request rule set has passed.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product replacement.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.constants import NAME_MAX_LENGTH, NAME_REQUIRED, NAME_TOO_LONG, PRICE_INVALID

_CENT = Decimal("0.01")
_PRICE_CEILING = Decimal("100000000")


class _ProductFieldsDTO(BaseModel):
    """Shared ``name`` / ``price`` normalisation.

    Validates:
    - ``name`` is non-blank text of at most 100 characters (numbers are
      accepted and stored as text).
    - ``price`` is rounded to cents and stays strictly positive.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(NAME_REQUIRED)
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(NAME_TOO_LONG)
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v >= _PRICE_CEILING:
            raise ValueError(PRICE_INVALID)
        # Rounding can push a price onto either bound.
        v = v.quantize(_CENT, rounding=ROUND_HALF_UP)
        if not 0 < v < _PRICE_CEILING:
            raise ValueError(PRICE_INVALID)
        return v


class CreateProductDTO(_ProductFieldsDTO):
    """Immutable DTO for product creation requests.

    ``availability`` is optional and defaults to ``True``.
    """

    availability: bool = True


class UpdateProductDTO(_ProductFieldsDTO):
    """Immutable DTO for full product updates; every field is replaced."""

    availability: bool
