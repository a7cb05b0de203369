"""
Dashboard category API views.
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.responses import paginated, success, validation_error
from api.v1.categories.serializers import (
    CategoryListQuerySerializer,
    CategorySerializer,
    CreateCategoryRequestSerializer,
    UpdateCategoryRequestSerializer,
)
from categories.application.commands.create_category import CreateCategoryCommand
from categories.application.commands.delete_category import DeleteCategoryCommand
from categories.application.commands.update_category import UpdateCategoryCommand
from categories.application.handlers.category_handlers import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
    GetCategoryHandler,
    ListCategoriesHandler,
    UpdateCategoryHandler,
)
from categories.application.queries.list_categories import ListCategoriesQuery
from categories.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from core.instrumentation import Status, StatusCode, get_tracer

_category_repo = DjangoCategoryRepository()

tracer = get_tracer(__name__)


class CategoryListView(APIView):
    """View for the category table and category creation."""

    @extend_schema(
        operation_id="list_categories",
        summary="List Categories",
        description="Categories with parent, children and product counts, newest first.",
        tags=["Dashboard: Categories"],
        parameters=[CategoryListQuerySerializer],
        responses={200: CategorySerializer(many=True), 400: {"description": "Bad Request"}},
    )
    def get(self, request: Request) -> Response:
        """List categories."""
        return async_to_sync(self._handle_list_categories)(request)

    async def _handle_list_categories(self, request: Request) -> Response:
        """Async handler for list categories."""
        with tracer.start_as_current_span("list_categories") as span:
            serializer = CategoryListQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = ListCategoriesHandler(category_repository=_category_repo)
            page = await handler.handle(ListCategoriesQuery(listing=serializer.to_query()))

            span.set_attribute("categories.total", page.total_items)
            span.set_status(Status(StatusCode.OK))
            return paginated(page, CategorySerializer(page.items, many=True).data)

    @extend_schema(
        operation_id="create_category",
        summary="Create Category",
        description=(
            "Create a category. The slug is derived from the name; a parent_id "
            'of "none" or "" makes a top-level category.'
        ),
        tags=["Dashboard: Categories"],
        request=CreateCategoryRequestSerializer,
        responses={
            201: CategorySerializer,
            400: {"description": "Bad Request or unknown parent"},
            409: {"description": "Category with this name already exists"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a category."""
        return async_to_sync(self._handle_create_category)(request)

    async def _handle_create_category(self, request: Request) -> Response:
        """Async handler for create category."""
        with tracer.start_as_current_span("create_category") as span:
            serializer = CreateCategoryRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = CreateCategoryHandler(category_repository=_category_repo)
            category = await handler.handle(CreateCategoryCommand(**serializer.validated_data))

            span.set_attribute("category.id", str(category.id))
            span.set_status(Status(StatusCode.OK))
            return success(
                CategorySerializer(category).data,
                message="Category created successfully",
                status_code=status.HTTP_201_CREATED,
            )


class CategoryDetailView(APIView):
    """View for reading, editing and deleting one category."""

    @extend_schema(
        operation_id="get_category",
        summary="Get Category",
        tags=["Dashboard: Categories"],
        responses={200: CategorySerializer, 404: {"description": "Category not found"}},
    )
    def get(self, request: Request, category_id: uuid.UUID) -> Response:
        """Get a category."""
        category = async_to_sync(GetCategoryHandler(_category_repo).handle)(category_id)
        return success(CategorySerializer(category).data)

    @extend_schema(
        operation_id="update_category",
        summary="Update Category",
        description="Edit a category, including its slug and parent.",
        tags=["Dashboard: Categories"],
        request=UpdateCategoryRequestSerializer,
        responses={
            200: CategorySerializer,
            400: {"description": "Bad Request, unknown parent or parent cycle"},
            404: {"description": "Category not found"},
            409: {"description": "Category with this slug already exists"},
        },
    )
    def put(self, request: Request, category_id: uuid.UUID) -> Response:
        """Update a category."""
        return async_to_sync(self._handle_update_category)(request, category_id)

    async def _handle_update_category(self, request: Request, category_id: uuid.UUID) -> Response:
        """Async handler for update category."""
        with tracer.start_as_current_span("update_category") as span:
            span.set_attribute("category.id", str(category_id))

            serializer = UpdateCategoryRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = UpdateCategoryHandler(category_repository=_category_repo)
            category = await handler.handle(
                UpdateCategoryCommand(category_id=category_id, **serializer.validated_data)
            )

            span.set_status(Status(StatusCode.OK))
            return success(
                CategorySerializer(category).data, message="Category updated successfully"
            )

    @extend_schema(
        operation_id="delete_category",
        summary="Delete Category",
        description="Delete a category with no products. Its children become top-level.",
        tags=["Dashboard: Categories"],
        responses={
            200: {"description": "Category deleted successfully"},
            404: {"description": "Category not found"},
            409: {"description": "Cannot delete category with products"},
        },
    )
    def delete(self, request: Request, category_id: uuid.UUID) -> Response:
        """Delete a category."""
        with tracer.start_as_current_span("delete_category") as span:
            span.set_attribute("category.id", str(category_id))
            handler = DeleteCategoryHandler(category_repository=_category_repo)
            async_to_sync(handler.handle)(DeleteCategoryCommand(category_id=category_id))
            span.set_status(Status(StatusCode.OK))
        return success(message="Category deleted successfully")
