"""Product DRF serializers.

Request validation happens in the Pydantic DTOs from ``dtos.py``;
``ProductCreateSerializer`` and ``ErrorResponseSerializer`` only describe
payload shapes to drf-spectacular.  ``ProductResponseSerializer`` also
renders every product response, so the schema and the wire format agree.
"""

from __future__ import annotations

from rest_framework import serializers

from catalog.products.dtos import (
    MAX_PRODUCT_NAME_LENGTH,
    MAX_UNIT_PRICE,
    MAX_UNITS_IN_STOCK,
)


class ProductCreateSerializer(serializers.Serializer):
    """One element of the bulk creation body."""

    id = serializers.UUIDField(required=False, allow_null=True)
    product_name = serializers.CharField(max_length=MAX_PRODUCT_NAME_LENGTH)
    category_id = serializers.UUIDField()
    supplier_id = serializers.UUIDField()
    unit_price = serializers.DecimalField(
        max_digits=18, decimal_places=2, min_value=0, max_value=MAX_UNIT_PRICE
    )
    units_in_stock = serializers.IntegerField(
        min_value=0, max_value=MAX_UNITS_IN_STOCK
    )
    discontinued = serializers.BooleanField(required=False, allow_null=True)


class ProductResponseSerializer(serializers.Serializer):
    """Renders a ``ProductResponseDTO``; prices go out as exact decimal strings."""

    id = serializers.UUIDField()
    product_name = serializers.CharField()
    category_id = serializers.UUIDField()
    supplier_id = serializers.UUIDField()
    unit_price = serializers.DecimalField(
        max_digits=18, decimal_places=2, coerce_to_string=True
    )
    units_in_stock = serializers.IntegerField()
    discontinued = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    status_code = serializers.IntegerField()
    message = serializers.CharField()
    description = serializers.CharField()
