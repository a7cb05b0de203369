"""
Dashboard product API views.
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import error_payload
from api.responses import paginated, success, validation_error
from api.v1.products.serializers import (
    ProductListQuerySerializer,
    ProductOverviewSerializer,
    ProductRequestSerializer,
    ProductSerializer,
)
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from categories.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from core.instrumentation import Status, StatusCode, get_tracer
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    GetProductHandler,
    GetProductOverviewHandler,
    ListProductsHandler,
    UpdateProductHandler,
)
from products.application.queries.list_products import ListProductsQuery
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()
_category_repo = DjangoCategoryRepository()
_brand_repo = DjangoBrandRepository()

tracer = get_tracer(__name__)


class ProductListView(APIView):
    """View for the product table and product creation."""

    @extend_schema(
        operation_id="list_products",
        summary="List Products",
        description="Products with category and brand, newest first, searched and paginated.",
        tags=["Dashboard: Products"],
        parameters=[ProductListQuerySerializer],
        responses={200: ProductSerializer(many=True), 400: {"description": "Bad Request"}},
    )
    def get(self, request: Request) -> Response:
        """List products."""
        return async_to_sync(self._handle_list_products)(request)

    async def _handle_list_products(self, request: Request) -> Response:
        """Async handler for list products."""
        with tracer.start_as_current_span("list_products") as span:
            serializer = ProductListQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = ListProductsHandler(product_repository=_product_repo)
            page = await handler.handle(ListProductsQuery(listing=serializer.to_query()))

            span.set_attribute("products.total", page.total_items)
            span.set_status(Status(StatusCode.OK))
            return paginated(page, ProductSerializer(page.items, many=True).data)

    @extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description="Create a product. The slug is derived from the name.",
        tags=["Dashboard: Products"],
        request=ProductRequestSerializer,
        responses={
            201: ProductSerializer,
            400: {"description": "Bad Request or unknown category/brand"},
            409: {"description": "Product with this name already exists"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create_product)(request)

    async def _handle_create_product(self, request: Request) -> Response:
        """Async handler for create product."""
        with tracer.start_as_current_span("create_product") as span:
            serializer = ProductRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = CreateProductHandler(
                product_repository=_product_repo,
                category_repository=_category_repo,
                brand_repository=_brand_repo,
            )
            product = await handler.handle(CreateProductCommand(details=serializer.to_details()))

            span.set_attribute("product.id", str(product.id))
            span.set_status(Status(StatusCode.OK))
            return success(
                ProductSerializer(product).data,
                message="Product created successfully",
                status_code=status.HTTP_201_CREATED,
            )


class ProductOverviewView(APIView):
    """View for the product table with its category and brand lookups."""

    @extend_schema(
        operation_id="product_overview",
        summary="Product Overview",
        description=(
            "All products plus category and brand id/name pairs. On failure the "
            "three lists are empty and the error is set."
        ),
        tags=["Dashboard: Products"],
        responses={200: ProductOverviewSerializer},
    )
    def get(self, request: Request) -> Response:
        """Get the product overview."""
        with tracer.start_as_current_span("product_overview") as span:
            handler = GetProductOverviewHandler(
                product_repository=_product_repo,
                category_repository=_category_repo,
                brand_repository=_brand_repo,
            )
            overview = async_to_sync(handler.handle)()
            data = ProductOverviewSerializer(overview).data

            if overview.error:
                span.set_status(Status(StatusCode.ERROR, overview.error))
                return Response(
                    {**error_payload(overview.error, "PERSISTENCE_ERROR"), "data": data},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )
            span.set_status(Status(StatusCode.OK))
            return success(data)


class ProductLookupView(APIView):
    """View for reading a product by id or slug."""

    @extend_schema(
        operation_id="get_product",
        summary="Get Product",
        description="Look a product up by UUID or slug.",
        tags=["Dashboard: Products"],
        responses={200: ProductSerializer, 404: {"description": "Product not found"}},
    )
    def get(self, request: Request, identifier: str) -> Response:
        """Get a product by id or slug."""
        product = async_to_sync(GetProductHandler(_product_repo).handle)(identifier)
        return success(ProductSerializer(product).data)


class ProductBySlugView(APIView):
    """View for reading a product by slug only."""

    @extend_schema(
        operation_id="get_product_by_slug",
        summary="Get Product By Slug",
        tags=["Dashboard: Products"],
        responses={200: ProductSerializer, 404: {"description": "Product not found"}},
    )
    def get(self, request: Request, slug: str) -> Response:
        """Get a product by slug."""
        product = async_to_sync(GetProductHandler(_product_repo).handle_slug)(slug)
        return success(ProductSerializer(product).data)


class ProductDetailView(APIView):
    """View for reading, editing and deleting one product."""

    @extend_schema(
        operation_id="get_product_by_id",
        summary="Get Product By Id",
        tags=["Dashboard: Products"],
        responses={200: ProductSerializer, 404: {"description": "Product not found"}},
    )
    def get(self, request: Request, product_id: uuid.UUID) -> Response:
        """Get a product by id."""
        product = async_to_sync(GetProductHandler(_product_repo).handle)(str(product_id))
        return success(ProductSerializer(product).data)

    @extend_schema(
        operation_id="update_product",
        summary="Update Product",
        description="Edit a product. The slug is regenerated from the name.",
        tags=["Dashboard: Products"],
        request=ProductRequestSerializer,
        responses={
            200: ProductSerializer,
            400: {"description": "Bad Request or unknown category/brand"},
            404: {"description": "Product not found"},
            409: {"description": "Product with this name already exists"},
        },
    )
    def put(self, request: Request, product_id: uuid.UUID) -> Response:
        """Update a product."""
        return async_to_sync(self._handle_update_product)(request, product_id)

    async def _handle_update_product(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for update product."""
        with tracer.start_as_current_span("update_product") as span:
            span.set_attribute("product.id", str(product_id))

            serializer = ProductRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = UpdateProductHandler(
                product_repository=_product_repo,
                category_repository=_category_repo,
                brand_repository=_brand_repo,
            )
            product = await handler.handle(
                UpdateProductCommand(product_id=product_id, details=serializer.to_details())
            )

            span.set_status(Status(StatusCode.OK))
            return success(ProductSerializer(product).data, message="Product updated successfully")

    @extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        description="Delete a product that was never ordered. It is removed from carts first.",
        tags=["Dashboard: Products"],
        responses={
            200: {"description": "Product deleted successfully"},
            404: {"description": "Product not found"},
            409: {"description": "Cannot delete product with existing orders"},
        },
    )
    def delete(self, request: Request, product_id: uuid.UUID) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete_product)(request, product_id)

    async def _handle_delete_product(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for delete product."""
        with tracer.start_as_current_span("delete_product") as span:
            span.set_attribute("product.id", str(product_id))

            handler = DeleteProductHandler(product_repository=_product_repo)
            await handler.handle(DeleteProductCommand(product_id=product_id))

            span.set_status(Status(StatusCode.OK))
            return success(message="Product deleted successfully")
