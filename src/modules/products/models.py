"""Product model.

Business rules implemented:
- Price must be greater than zero (DB constraint; requests are checked
  earlier by the rule set and the DTOs).
- Availability defaults to ``True`` and is never null.
- Deletion is physical: a deleted ``id`` no longer resolves.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel
from modules.products.constants import NAME_MAX_LENGTH


class Product(TimestampedModel):
    """The catalogue entry exposed by ``/api/products``."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-price", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def toggle_availability(self) -> None:
        self.availability = not self.availability

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
