"""
URL configuration for authentication endpoints.
"""

from django.urls import path

from api.v1.auth import views

app_name = "auth"

urlpatterns = [
    path("register", views.RegisterView.as_view(), name="register"),
    path("login", views.LoginView.as_view(), name="login"),
    path("logout", views.LogoutView.as_view(), name="logout"),
    path("session", views.SessionView.as_view(), name="session"),
]
