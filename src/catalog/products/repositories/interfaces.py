"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups required by the
unique-active-name rule and the bulk registration use case.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional, Set, Sequence
from uuid import UUID

from catalog.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from catalog.products.dtos import ProductCreateDTO
    from catalog.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    Every read ignores discontinued products.
    """

    @abstractmethod
    def get_by_id(self, id: UUID) -> Optional["Product"]:
        """Retrieve an active product by primary key, or ``None``."""

    @abstractmethod
    def get_all(self) -> List["Product"]:
        """Return every active product in storage order."""

    @abstractmethod
    def get_existing_names(self, names: Iterable[str]) -> Set[str]:
        """Return the subset of ``names`` already used by active products.

        Matching is exact; case and whitespace handling follow the
        database collation.
        """

    @abstractmethod
    def bulk_insert(self, products: Sequence["ProductCreateDTO"]) -> List["Product"]:
        """Persist all ``products`` atomically (all or nothing).

        Products without an ``id`` receive a newly generated one.
        """
