"""Product API views.

Every handler runs behind ``validate_request``: the route's rule set is
evaluated and the input-error gate answers 400 before any look-up, so a
malformed ID is always reported ahead of a 404.  Domain exceptions are
caught and translated into HTTP responses; persistence errors propagate.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, inline_serializer
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.validation import (
    RequestContext,
    invalid_request_response,
    validate_request,
    violations_from_pydantic,
)
from modules.products.constants import PRODUCT_DELETED, PRODUCT_NOT_FOUND
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    DeletedEnvelopeSerializer,
    NotFoundSerializer,
    ProductEnvelopeSerializer,
    ProductListEnvelopeSerializer,
    ProductSerializer,
    ValidationErrorsSerializer,
)
from modules.products.services import ProductService
from modules.products.validators import CREATE_RULES, ID_RULES, UPDATE_RULES

ID_PARAMETER = OpenApiParameter(
    "id",
    OpenApiTypes.INT,
    OpenApiParameter.PATH,
    description="The ID of the product",
)

_ProductInput = inline_serializer(
    name="ProductInput",
    fields={
        "name": serializers.CharField(),
        "price": serializers.DecimalField(max_digits=10, decimal_places=2),
        "availability": serializers.BooleanField(required=False),
    },
)


def _body_fields(ctx: RequestContext, *names: str) -> dict:
    return {name: ctx.body[name] for name in names if name in ctx.body}


def _not_found() -> Response:
    return Response({"error": PRODUCT_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND)


class _ProductView(APIView):
    """Base view wiring ``ProductService`` to an injectable repository.

    ``repository_class`` can be overridden with ``as_view(repository_class=...)``.
    """

    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())


class ProductListView(_ProductView):
    """``/api/products``: list and create."""

    @extend_schema(
        tags=["Products"],
        summary="Get a list of products",
        description="Return up to 50 products, most expensive first",
        responses={200: ProductListEnvelopeSerializer},
    )
    @validate_request()
    def get(self, request: Request, ctx: RequestContext) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @extend_schema(
        tags=["Products"],
        summary="Create a new product",
        description="Returns a new record in the database",
        request=_ProductInput,
        responses={201: ProductEnvelopeSerializer, 400: ValidationErrorsSerializer},
    )
    @validate_request(*CREATE_RULES)
    def post(self, request: Request, ctx: RequestContext) -> Response:
        """POST /api/products"""
        try:
            dto = CreateProductDTO(**_body_fields(ctx, "name", "price", "availability"))
        except PydanticValidationError as exc:
            return invalid_request_response(violations_from_pydantic(exc))

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )


class ProductDetailView(_ProductView):
    """``/api/products/<id>``: fetch, replace, toggle availability, delete."""

    @extend_schema(
        tags=["Products"],
        summary="Get a product detail by ID",
        parameters=[ID_PARAMETER],
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(*ID_RULES)
    def get(self, request: Request, ctx: RequestContext) -> Response:
        """GET /api/products/<id>"""
        try:
            product = self._service.get_product(int(ctx.params["id"]))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        tags=["Products"],
        summary="Updates a product with user input",
        parameters=[ID_PARAMETER],
        request=_ProductInput,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(*UPDATE_RULES)
    def put(self, request: Request, ctx: RequestContext) -> Response:
        """PUT /api/products/<id>"""
        try:
            dto = UpdateProductDTO(**_body_fields(ctx, "name", "price", "availability"))
        except PydanticValidationError as exc:
            return invalid_request_response(violations_from_pydantic(exc))

        try:
            product = self._service.update_product(int(ctx.params["id"]), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        tags=["Products"],
        summary="Update product availability",
        parameters=[ID_PARAMETER],
        request=None,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(*ID_RULES)
    def patch(self, request: Request, ctx: RequestContext) -> Response:
        """PATCH /api/products/<id>"""
        try:
            product = self._service.toggle_availability(int(ctx.params["id"]))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        tags=["Products"],
        summary="Deletes a product by a given ID",
        parameters=[ID_PARAMETER],
        responses={
            200: DeletedEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(*ID_RULES)
    def delete(self, request: Request, ctx: RequestContext) -> Response:
        """DELETE /api/products/<id>"""
        try:
            self._service.delete_product(int(ctx.params["id"]))
        except ProductNotFound:
            return _not_found()
        return Response({"data": PRODUCT_DELETED})
