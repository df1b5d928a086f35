"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: ``get_by_id`` returns ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into an API response.  Any other database error
propagates unchanged.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# Largest value a BigAutoField primary key can hold.
_MAX_PK = 2**63 - 1


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list(
        self, order_by: Optional[Sequence[str]] = None, limit: Optional[int] = None
    ) -> List[Product]:
        """List products, e.g. ``list(order_by=["-price"], limit=50)``."""
        queryset = Product.objects.all()
        if order_by:
            queryset = queryset.order_by(*order_by)
        if limit is not None:
            queryset = queryset[:limit]
        return list(queryset)

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for unknown IDs and for integers no row can hold.
        """
        if not -_MAX_PK <= id <= _MAX_PK:
            return None
        return Product.objects.filter(pk=id).first()

    def create(self, **fields: Any) -> Product:
        product = Product.objects.create(**fields)
        logger.info("product.inserted", product_id=product.id)
        return product

    def save(
        self, entity: Product, update_fields: Optional[Sequence[str]] = None
    ) -> Product:
        """Persist an existing product, optionally only ``update_fields``."""
        entity.save(update_fields=update_fields)
        logger.info("product.saved", product_id=entity.id, fields=update_fields)
        return entity

    def delete(self, entity: Product) -> None:
        product_id = entity.id
        entity.delete()
        logger.info("product.deleted_from_store", product_id=product_id)
