"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository`` and read caching to
the injected Django cache backend.

Business rules enforced here:
- Product names must be unique within a bulk request.
- Product names must not collide with an active product.
- Discontinued products are never returned (repository contract).

Reads follow the cache-aside pattern: entries expire a fixed time after
they are written and are never invalidated by writes.  Two concurrent
misses on the same key may both hit the repository and both write the
same value; that race is harmless.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, List, Optional, Sequence
from uuid import UUID

import structlog
from django.conf import settings
from django.core.cache import caches
from django.db import transaction

from catalog.products.dtos import ProductResponseDTO
from catalog.products.exceptions import (
    InvalidProductRequest,
    ProductAlreadyExists,
    ProductNotFound,
)

if TYPE_CHECKING:
    from django.core.cache.backends.base import BaseCache

    from catalog.products.dtos import ProductCreateDTO
    from catalog.products.models import Product
    from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def product_cache_key(product_id: UUID) -> str:
    return f"product:{product_id}"


def page_cache_key(page_number: Optional[int], page_size: Optional[int]) -> str:
    return f"products:{page_number}_{page_size}"


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` and a cache via constructor
    injection (DIP).  The cache defaults to the process-local
    alias named by ``settings.PRODUCT_CACHE_ALIAS``.
    """

    def __init__(
        self,
        repository: IProductRepository,
        cache: Optional[BaseCache] = None,
        cache_timeout: Optional[int] = None,
    ) -> None:
        self._repo = repository
        self._cache = (
            cache if cache is not None else caches[settings.PRODUCT_CACHE_ALIAS]
        )
        self._cache_timeout = (
            cache_timeout
            if cache_timeout is not None
            else settings.PRODUCT_CACHE_TIMEOUT
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_products(self, products: Sequence[ProductCreateDTO]) -> List[Product]:
        """Register a batch of products after enforcing name uniqueness.

        Nothing is written unless every name is unique within the batch
        and unused by active products.

        Raises:
            InvalidProductRequest: if ``products`` is empty.
            ProductAlreadyExists: if a name is repeated in the batch or
                already belongs to an active product.
        """
        if not products:
            raise InvalidProductRequest("No products were provided.")

        log = logger.bind(count=len(products))
        log.debug("product.add_requested")

        name_counts = Counter(p.product_name for p in products)
        duplicates = [name for name, count in name_counts.items() if count > 1]
        if duplicates:
            joined = ", ".join(duplicates)
            log.warning("product.duplicate_names_in_request", names=duplicates)
            raise ProductAlreadyExists(
                f"The provided data contains duplicate product names: {joined}"
            )

        existing = self._repo.get_existing_names(list(name_counts))
        if existing:
            taken = [name for name in name_counts if name in existing]
            joined = ", ".join(taken)
            log.warning("product.names_already_exist", names=taken)
            raise ProductAlreadyExists(f"Products with names '{joined}' already exist")

        created = self._repo.bulk_insert(products)
        log.info("product.created")
        return created

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, product_id: UUID) -> ProductResponseDTO:
        """Retrieve a single active product, serving from cache when possible.

        Raises:
            ProductNotFound: if no active product has this ID.
        """
        log = logger.bind(product_id=str(product_id))
        key = product_cache_key(product_id)

        product = self._cache.get(key)
        if product is not None:
            log.debug("product.cache_hit")
            return ProductResponseDTO.from_entity(product)

        product = self._repo.get_by_id(product_id)
        if product is None:
            log.warning("product.not_found")
            raise ProductNotFound(f"No product has been found for the ID: {product_id}")

        self._cache.set(key, product, self._cache_timeout)
        log.info("product.retrieved")
        return ProductResponseDTO.from_entity(product)

    def get_products(
        self,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Optional[List[ProductResponseDTO]]:
        """Return active products, optionally paginated.

        Returns ``None`` (not an empty list) when there is nothing to
        return: the store is empty, the requested page lies past the end,
        or either page parameter is below 1.

        Only paginated results are cached; the unpaginated listing is
        read from the repository every time.
        """
        log = logger.bind(page_number=page_number, page_size=page_size)
        key = page_cache_key(page_number, page_size)

        cached = self._cache.get(key)
        if cached is not None:
            log.debug("product.page_cache_hit")
            return [ProductResponseDTO.from_entity(p) for p in cached]

        products = self._repo.get_all()
        if not products:
            log.debug("product.none_stored")
            return None

        if page_number is None or page_size is None:
            return [ProductResponseDTO.from_entity(p) for p in products]

        page = self._paginate(products, page_number, page_size)
        if not page:
            log.debug("product.page_empty")
            return None

        self._cache.set(key, page, self._cache_timeout)
        log.info("product.page_retrieved", count=len(page))
        return [ProductResponseDTO.from_entity(p) for p in page]

    @staticmethod
    def _paginate(
        products: Sequence[Product], page_number: int, page_size: int
    ) -> List[Product]:
        # Non-positive page numbers or sizes select nothing
        if page_number < 1 or page_size < 1:
            return []
        start = (page_number - 1) * page_size
        return list(products[start : start + page_size])
