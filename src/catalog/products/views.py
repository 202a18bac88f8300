"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Payloads and
query strings are validated by serializers before any service call; domain
exceptions are left to propagate and are translated once by
``catalog.core.exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers, status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from catalog.core.exceptions import ConstraintViolation
from catalog.core.responses import ok
from catalog.products.repositories.django_repository import ProductDjangoRepository
from catalog.products.serializers import (
    LowStockQuerySerializer,
    PriceRangeQuerySerializer,
    ProductRequestSerializer,
    ProductResponseSerializer,
    SearchQuerySerializer,
)
from catalog.products.services import ProductService


def _parse_id(pk: str | None) -> int:
    try:
        return int(pk)
    except (TypeError, ValueError):
        raise serializers.ValidationError({"id": "A valid integer is required."})


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD and catalogue queries.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    serializer_class = ProductResponseSerializer
    lookup_value_regex = r"[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    @staticmethod
    def _many(products) -> list:
        return ProductResponseSerializer(products, many=True).data

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products"""
        products = self._service.get_all_products()
        return ok(self._many(products), "Products retrieved successfully")

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        product = self._service.get_product_by_id(_parse_id(pk))
        return ok(
            ProductResponseSerializer(product).data, "Product retrieved successfully"
        )

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductRequestSerializer)
    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        payload = ProductRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        product = self._service.create_product(payload.to_dto())
        return ok(
            ProductResponseSerializer(product).data,
            "Product created successfully",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=ProductRequestSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}"""
        id = _parse_id(pk)
        payload = ProductRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        product = self._service.update_product(id, payload.to_dto())
        return ok(ProductResponseSerializer(product).data, "Product updated successfully")

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}"""
        self._service.delete_product(_parse_id(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Catalogue queries
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"], url_path=r"category/(?P<category>[^/]+)")
    def by_category(self, request: Request, category: str) -> Response:
        """GET /api/v1/products/category/{category}"""
        products = self._service.get_products_by_category(category)
        return ok(self._many(products), "Products retrieved successfully")

    @extend_schema(parameters=[LowStockQuerySerializer])
    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request: Request) -> Response:
        """GET /api/v1/products/low-stock?threshold=N (default 10)"""
        query = LowStockQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        products = self._service.get_low_stock_products(
            query.validated_data["threshold"]
        )
        return ok(self._many(products), "Low stock products retrieved successfully")

    @extend_schema(parameters=[SearchQuerySerializer])
    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request: Request) -> Response:
        """GET /api/v1/products/search?keyword=K"""
        query = SearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        products = self._service.search_products(query.validated_data["keyword"])
        return ok(self._many(products), "Search results retrieved successfully")

    @extend_schema(
        parameters=[
            OpenApiParameter("min_price", float, required=True),
            OpenApiParameter("max_price", float, required=True),
        ]
    )
    @action(detail=False, methods=["get"], url_path="price-range")
    def price_range(self, request: Request) -> Response:
        """GET /api/v1/products/price-range?min_price=A&max_price=B"""
        query = PriceRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        min_price = query.validated_data["min_price"]
        max_price = query.validated_data["max_price"]
        if min_price < 0 or max_price < 0:
            raise ConstraintViolation("price", "bounds must not be negative")
        if min_price > max_price:
            raise ConstraintViolation("price", "min_price must not exceed max_price")

        products = self._service.get_products_by_price_range(min_price, max_price)
        return ok(self._many(products), "Products retrieved successfully")
