"""Product model backing the ``product`` table.

Business rules implemented:
- A product name is unique among active (non-discontinued) products.
  The rule is enforced by ``ProductService`` at insert time, not by a
  database constraint, because a discontinued product may share its
  name with an active one.
- Discontinued products are invisible to every read path; use
  ``Product.objects.active()``.
- Unit price and units in stock cannot be negative.
"""

from __future__ import annotations

from decimal import Decimal

import uuid6
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from catalog.products.dtos import MAX_PRODUCT_NAME_LENGTH, MAX_UNIT_PRICE


class ProductQuerySet(models.QuerySet):
    def active(self) -> ProductQuerySet:
        """Return only products that are not discontinued."""
        return self.filter(discontinued=False)


class ProductManager(models.Manager.from_queryset(ProductQuerySet)):
    pass


class Product(models.Model):
    """Product aggregate root."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    product_name = models.CharField(max_length=MAX_PRODUCT_NAME_LENGTH)
    category_id = models.UUIDField()
    supplier_id = models.UUIDField()
    unit_price = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        validators=[
            MinValueValidator(Decimal("0")),
            MaxValueValidator(MAX_UNIT_PRICE),
        ],
    )
    units_in_stock = models.PositiveIntegerField()
    discontinued = models.BooleanField(default=False)

    objects = ProductManager()

    class Meta:
        db_table = "product"
        indexes = [
            models.Index(
                fields=["product_name", "discontinued"],
                name="product_name_active_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(unit_price__gte=0),
                name="product_unit_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return self.product_name
