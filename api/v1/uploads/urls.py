"""
Upload URL configuration.
"""
from django.urls import path

from api.v1.uploads import views

app_name = "uploads"

urlpatterns = [
    path("", views.UploadView.as_view(), name="upload"),
    path("delete", views.DeleteFileView.as_view(), name="delete"),
    path(
        "uploadthing/delete",
        views.DeleteUploadThingFileView.as_view(),
        name="uploadthing-delete",
    ),
]
