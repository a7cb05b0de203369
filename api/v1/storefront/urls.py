"""
Storefront URL configuration.
"""
from django.urls import path

from api.v1.storefront import views

app_name = "storefront"

urlpatterns = [
    path("products", views.StorefrontProductListView.as_view(), name="products"),
    path(
        "products/<slug:identifier>",
        views.StorefrontProductDetailView.as_view(),
        name="product-detail",
    ),
]
