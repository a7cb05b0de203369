"""
Storefront API views.

Public, read-only product browsing. These routes are not guarded by
DashboardAccessMiddleware.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.responses import paginated, success, validation_error
from api.v1.products.serializers import ProductSerializer
from api.v1.storefront.serializers import BrowseQuerySerializer
from core.instrumentation import Status, StatusCode, get_tracer
from products.application.handlers.product_handlers import GetProductHandler
from products.application.handlers.storefront_handlers import BrowseProductsHandler
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

_product_repo = DjangoProductRepository()

tracer = get_tracer(__name__)


class StorefrontProductListView(APIView):
    """View for the storefront product grid."""

    @extend_schema(
        operation_id="browse_products",
        summary="Browse Products",
        description=(
            "Search, filter by category, brand and price range, sort and paginate "
            "the product catalog."
        ),
        tags=["Storefront"],
        parameters=[BrowseQuerySerializer],
        responses={200: ProductSerializer(many=True), 400: {"description": "Bad Request"}},
    )
    def get(self, request: Request) -> Response:
        """Browse products."""
        return async_to_sync(self._handle_browse)(request)

    async def _handle_browse(self, request: Request) -> Response:
        """Async handler for browse products."""
        with tracer.start_as_current_span("browse_products") as span:
            serializer = BrowseQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            query = serializer.to_query()
            span.set_attribute("storefront.sort", query.sort)

            page = await BrowseProductsHandler(product_repository=_product_repo).handle(query)

            span.set_attribute("products.total", page.total_items)
            span.set_status(Status(StatusCode.OK))
            return paginated(page, ProductSerializer(page.items, many=True).data)


class StorefrontProductDetailView(APIView):
    """View for a single storefront product page."""

    @extend_schema(
        operation_id="storefront_product",
        summary="Product Page",
        description="A product by UUID or slug.",
        tags=["Storefront"],
        responses={200: ProductSerializer, 404: {"description": "Product not found"}},
    )
    def get(self, request: Request, identifier: str) -> Response:
        """Get a product."""
        product = async_to_sync(GetProductHandler(_product_repo).handle)(identifier)
        return success(ProductSerializer(product).data)
