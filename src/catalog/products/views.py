"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Service errors propagate to ``api_exception_handler``, which maps
them to status codes.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

import structlog
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from catalog.products.dtos import ProductCreateListAdapter
from catalog.products.exceptions import InvalidProductRequest
from catalog.products.repositories.django_repository import ProductDjangoRepository
from catalog.products.serializers import (
    ErrorResponseSerializer,
    ProductCreateSerializer,
    ProductResponseSerializer,
)
from catalog.products.services import ProductService

logger = structlog.get_logger(__name__)


def _optional_int(request: Request, name: str) -> Optional[int]:
    raw = request.query_params.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidProductRequest(
            f"Query parameter '{name}' must be an integer."
        ) from None


def _parse_product_id(pk: Optional[str]) -> UUID:
    try:
        return UUID(str(pk))
    except ValueError:
        raise InvalidProductRequest(f"'{pk}' is not a valid product ID.") from None


class ProductViewSet(ViewSet):
    """ViewSet for product registration and look-ups.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("pageNumber", OpenApiTypes.INT, required=False),
            OpenApiParameter("pageSize", OpenApiTypes.INT, required=False),
        ],
        responses={
            200: ProductResponseSerializer(many=True),
            204: OpenApiResponse(description="No products to return."),
            400: ErrorResponseSerializer,
        },
    )
    def list(self, request: Request) -> Response:
        """GET /api/product?pageNumber=&pageSize="""
        page_number = _optional_int(request, "pageNumber")
        page_size = _optional_int(request, "pageSize")

        products = self._service.get_products(page_number, page_size)
        if products is None:
            logger.info(
                "product.list_empty", page_number=page_number, page_size=page_size
            )
            return Response(status=status.HTTP_204_NO_CONTENT)

        return Response(ProductResponseSerializer(products, many=True).data)

    @extend_schema(
        responses={
            200: ProductResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def retrieve(self, request: Request, pk: Optional[str] = None) -> Response:
        """GET /api/product/{pk}"""
        product = self._service.get_product(_parse_product_id(pk))
        return Response(ProductResponseSerializer(product).data)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(
        request=ProductCreateSerializer(many=True),
        responses={
            201: OpenApiResponse(description="All products were created."),
            400: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
    )
    def create(self, request: Request) -> Response:
        """POST /api/product"""
        data = request.data
        if not isinstance(data, list):
            raise InvalidProductRequest("Request body must be a JSON array of products.")

        try:
            dtos = ProductCreateListAdapter.validate_python(data)
        except PydanticValidationError as exc:
            raise InvalidProductRequest(str(exc)) from exc

        self._service.add_products(dtos)
        return Response(status=status.HTTP_201_CREATED)
