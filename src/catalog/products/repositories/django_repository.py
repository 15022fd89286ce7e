"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into an API response.  Database errors propagate.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set
from uuid import UUID

import structlog
import uuid6
from django.conf import settings
from django.db import transaction

from catalog.products.dtos import ProductCreateDTO
from catalog.products.models import Product
from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def __init__(self, batch_size: Optional[int] = None) -> None:
        self._batch_size = batch_size or settings.PRODUCT_BULK_BATCH_SIZE

    def get_by_id(self, id: UUID) -> Optional[Product]:
        """Retrieve an active product by primary key."""
        return Product.objects.active().filter(id=id).first()

    def get_all(self) -> List[Product]:
        """List every active product.

        No ordering is applied; rows come back in storage order.
        """
        return list(Product.objects.active())

    def get_existing_names(self, names: Iterable[str]) -> Set[str]:
        names = list(names)
        logger.debug("product.names_check_started", count=len(names))
        if not names:
            return set()
        existing = set(
            Product.objects.active()
            .filter(product_name__in=names)
            .values_list("product_name", flat=True)
        )
        logger.debug("product.names_checked", existing=len(existing))
        return existing

    @transaction.atomic
    def bulk_insert(self, products: Sequence[ProductCreateDTO]) -> List[Product]:
        """Insert all products in a single transaction using batched inserts."""
        rows = [
            Product(
                id=dto.id or uuid6.uuid7(),
                product_name=dto.product_name,
                category_id=dto.category_id,
                supplier_id=dto.supplier_id,
                unit_price=dto.unit_price,
                units_in_stock=dto.units_in_stock,
                discontinued=dto.discontinued,
            )
            for dto in products
        ]
        created = Product.objects.bulk_create(rows, batch_size=self._batch_size)
        logger.info("product.bulk_inserted", count=len(created))
        return created
