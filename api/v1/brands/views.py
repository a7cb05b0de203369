"""
Dashboard brand API views.

Listing, creation, editing and deletion of brands. Access is limited to
administrators by DashboardAccessMiddleware.
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.responses import paginated, success, validation_error
from api.v1.brands.serializers import (
    BrandListQuerySerializer,
    BrandSerializer,
    CreateBrandRequestSerializer,
    UpdateBrandRequestSerializer,
)
from brands.application.commands.create_brand import CreateBrandCommand
from brands.application.commands.delete_brand import DeleteBrandCommand
from brands.application.commands.update_brand import UpdateBrandCommand
from brands.application.handlers.brand_handlers import (
    CreateBrandHandler,
    DeleteBrandHandler,
    GetBrandHandler,
    ListBrandsHandler,
    UpdateBrandHandler,
)
from brands.application.queries.list_brands import ListBrandsQuery
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_brand_repo = DjangoBrandRepository()

tracer = get_tracer(__name__)


class BrandListView(APIView):
    """View for the brand table and brand creation."""

    @extend_schema(
        operation_id="list_brands",
        summary="List Brands",
        description="Brands with product counts, newest first, searched and paginated.",
        tags=["Dashboard: Brands"],
        parameters=[BrandListQuerySerializer],
        responses={200: BrandSerializer(many=True), 400: {"description": "Bad Request"}},
    )
    def get(self, request: Request) -> Response:
        """List brands."""
        return async_to_sync(self._handle_list_brands)(request)

    async def _handle_list_brands(self, request: Request) -> Response:
        """Async handler for list brands."""
        with tracer.start_as_current_span("list_brands") as span:
            serializer = BrandListQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = ListBrandsHandler(brand_repository=_brand_repo)
            page = await handler.handle(ListBrandsQuery(listing=serializer.to_query()))

            span.set_attribute("brands.total", page.total_items)
            span.set_status(Status(StatusCode.OK))
            return paginated(page, BrandSerializer(page.items, many=True).data)

    @extend_schema(
        operation_id="create_brand",
        summary="Create Brand",
        description="Create a brand. The slug is derived from the name.",
        tags=["Dashboard: Brands"],
        request=CreateBrandRequestSerializer,
        responses={
            201: BrandSerializer,
            400: {"description": "Bad Request"},
            409: {"description": "Brand with this name already exists"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a brand."""
        return async_to_sync(self._handle_create_brand)(request)

    async def _handle_create_brand(self, request: Request) -> Response:
        """Async handler for create brand."""
        with tracer.start_as_current_span("create_brand") as span:
            serializer = CreateBrandRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = CreateBrandHandler(brand_repository=_brand_repo)
            brand = await handler.handle(CreateBrandCommand(**serializer.validated_data))

            span.set_attribute("brand.id", str(brand.id))
            span.set_status(Status(StatusCode.OK))
            return success(
                BrandSerializer(brand).data,
                message="Brand created successfully",
                status_code=status.HTTP_201_CREATED,
            )


class BrandDetailView(APIView):
    """View for reading, editing and deleting one brand."""

    @extend_schema(
        operation_id="get_brand",
        summary="Get Brand",
        tags=["Dashboard: Brands"],
        responses={200: BrandSerializer, 404: {"description": "Brand not found"}},
    )
    def get(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Get a brand."""
        brand = async_to_sync(GetBrandHandler(_brand_repo).handle)(brand_id)
        return success(BrandSerializer(brand).data)

    @extend_schema(
        operation_id="update_brand",
        summary="Update Brand",
        description="Edit a brand, including its slug.",
        tags=["Dashboard: Brands"],
        request=UpdateBrandRequestSerializer,
        responses={
            200: BrandSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Brand not found"},
            409: {"description": "Brand with this slug already exists"},
        },
    )
    def put(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Update a brand."""
        return async_to_sync(self._handle_update_brand)(request, brand_id)

    async def _handle_update_brand(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for update brand."""
        with tracer.start_as_current_span("update_brand") as span:
            span.set_attribute("brand.id", str(brand_id))

            serializer = UpdateBrandRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = UpdateBrandHandler(brand_repository=_brand_repo)
            brand = await handler.handle(
                UpdateBrandCommand(brand_id=brand_id, **serializer.validated_data)
            )

            span.set_status(Status(StatusCode.OK))
            return success(BrandSerializer(brand).data, message="Brand updated successfully")

    @extend_schema(
        operation_id="delete_brand",
        summary="Delete Brand",
        description="Delete a brand that no product references.",
        tags=["Dashboard: Brands"],
        responses={
            200: {"description": "Brand deleted successfully"},
            404: {"description": "Brand not found"},
            409: {"description": "Cannot delete brand with products"},
        },
    )
    def delete(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Delete a brand."""
        return async_to_sync(self._handle_delete_brand)(request, brand_id)

    async def _handle_delete_brand(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for delete brand."""
        with tracer.start_as_current_span("delete_brand") as span:
            span.set_attribute("brand.id", str(brand_id))

            handler = DeleteBrandHandler(brand_repository=_brand_repo)
            await handler.handle(DeleteBrandCommand(brand_id=brand_id))

            span.set_status(Status(StatusCode.OK))
            return success(message="Brand deleted successfully")
