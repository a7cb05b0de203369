"""
URL configuration for dashboard product endpoints.
"""

from django.urls import path

from api.v1.products import views

app_name = "products"

urlpatterns = [
    path("", views.ProductListView.as_view(), name="list"),
    path("overview", views.ProductOverviewView.as_view(), name="overview"),
    path("slug/<slug:slug>", views.ProductBySlugView.as_view(), name="by-slug"),
    path("<uuid:product_id>", views.ProductDetailView.as_view(), name="detail"),
    path("<slug:identifier>", views.ProductLookupView.as_view(), name="lookup"),
]
