"""
URL configuration for dashboard category endpoints.
"""

from django.urls import path

from api.v1.categories import views

app_name = "categories"

urlpatterns = [
    path("", views.CategoryListView.as_view(), name="list"),
    path("<uuid:category_id>", views.CategoryDetailView.as_view(), name="detail"),
]
