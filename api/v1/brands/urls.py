"""
URL configuration for dashboard brand endpoints.
"""

from django.urls import path

from api.v1.brands import views

app_name = "brands"

urlpatterns = [
    path("", views.BrandListView.as_view(), name="list"),
    path("<uuid:brand_id>", views.BrandDetailView.as_view(), name="detail"),
]
