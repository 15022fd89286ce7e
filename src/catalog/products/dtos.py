"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductCreateDTO``: one element of a bulk creation request.
- ``ProductResponseDTO``: output with all product fields.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

if TYPE_CHECKING:
    from catalog.products.models import Product

# Largest values every supported backend stores and reads back exactly:
# sqlite keeps 15 significant digits in a DECIMAL column, and
# PositiveIntegerField is a signed 32-bit integer on PostgreSQL and MySQL.
MAX_PRODUCT_NAME_LENGTH = 255
MAX_UNIT_PRICE = Decimal("9999999999999.99")
MAX_UNITS_IN_STOCK = 2_147_483_647


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductCreateDTO(BaseModel):
    """Immutable DTO for one product in a bulk creation request.

    Validates:
    - ``product_name`` is a non-blank string of at most 255 characters.
    - ``unit_price`` is a non-negative Decimal with at most 2 decimal places,
      no greater than ``MAX_UNIT_PRICE``.
    - ``units_in_stock`` is non-negative and fits a 32-bit column.

    ``id`` is optional; the repository generates one when it is absent.
    A null ``discontinued`` is read as ``False``.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[UUID] = None
    product_name: str = Field(max_length=MAX_PRODUCT_NAME_LENGTH)
    category_id: UUID
    supplier_id: UUID
    unit_price: Decimal = Field(max_digits=18, decimal_places=2, le=MAX_UNIT_PRICE)
    units_in_stock: int = Field(le=MAX_UNITS_IN_STOCK)
    discontinued: bool = False

    @field_validator("product_name")
    @classmethod
    def product_name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Product name must not be empty.")
        return v

    @field_validator("unit_price")
    @classmethod
    def unit_price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Unit price cannot be negative.")
        return v

    @field_validator("units_in_stock")
    @classmethod
    def units_in_stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Units in stock cannot be negative.")
        return v

    @field_validator("discontinued", mode="before")
    @classmethod
    def null_discontinued_is_false(cls, v: Optional[bool]) -> bool:
        return False if v is None else v


ProductCreateListAdapter = TypeAdapter(List[ProductCreateDTO])


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductResponseDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    product_name: str
    category_id: UUID
    supplier_id: UUID
    unit_price: Decimal
    units_in_stock: int
    discontinued: bool

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponseDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            product_name=product.product_name,
            category_id=product.category_id,
            supplier_id=product.supplier_id,
            unit_price=product.unit_price,
            units_in_stock=product.units_in_stock,
            discontinued=product.discontinued,
        )
