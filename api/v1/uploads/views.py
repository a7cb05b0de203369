"""
Upload API views.

Image upload to the configured storage backend and deletion of stored
files by URL or UploadThing key.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.responses import success, validation_error
from api.v1.uploads.serializers import (
    DeleteFileRequestSerializer,
    DeleteUploadThingFileRequestSerializer,
    StoredFileSerializer,
    UploadRequestSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from uploads.application.upload_service import UploadService

tracer = get_tracer(__name__)


class UploadView(APIView):
    """View for image uploads."""

    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="upload_image",
        summary="Upload Image",
        description="Store an image (max 1MB) under items/<uuid>.<ext> and return its URL.",
        tags=["Uploads"],
        request={"multipart/form-data": UploadRequestSerializer},
        responses={
            200: StoredFileSerializer,
            400: {"description": "No file, not an image or too large"},
            500: {"description": "Storage provider error"},
        },
    )
    def post(self, request: Request) -> Response:
        """Upload an image."""
        with tracer.start_as_current_span("upload_image") as span:
            service = UploadService()
            stored = async_to_sync(service.upload_image)(request.FILES.get("file"))

            span.set_attribute("upload.size", stored.size)
            span.set_status(Status(StatusCode.OK))
            return success(StoredFileSerializer(stored).data)


class DeleteFileView(APIView):
    """View for deleting a stored file by its public URL."""

    @extend_schema(
        operation_id="delete_file",
        summary="Delete File",
        description="Delete a file from the provider that serves its URL.",
        tags=["Uploads"],
        request=DeleteFileRequestSerializer,
        responses={
            200: {"description": "File deleted, or it did not exist"},
            400: {"description": "Missing or unrecognised file URL"},
            500: {"description": "Storage provider error"},
        },
    )
    def post(self, request: Request) -> Response:
        """Delete a file by URL."""
        with tracer.start_as_current_span("delete_file") as span:
            serializer = DeleteFileRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            existed = async_to_sync(UploadService().delete_by_url)(
                serializer.validated_data.get("fileUrl")
            )

            span.set_attribute("upload.existed", existed)
            span.set_status(Status(StatusCode.OK))
            if existed:
                return success(message="File deleted successfully")
            return success(message="File did not exist or was already deleted")


class DeleteUploadThingFileView(APIView):
    """View for deleting an UploadThing file by key."""

    @extend_schema(
        operation_id="delete_uploadthing_file",
        summary="Delete UploadThing File",
        tags=["Uploads"],
        request=DeleteUploadThingFileRequestSerializer,
        responses={
            200: {"description": "File deleted"},
            400: {"description": "File key is required"},
            500: {"description": "Failed to delete file"},
        },
    )
    def post(self, request: Request) -> Response:
        """Delete an UploadThing file."""
        serializer = DeleteUploadThingFileRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer.errors)

        deleted = async_to_sync(UploadService().delete_uploadthing_file)(
            serializer.validated_data.get("fileKey")
        )
        return success({"deletedCount": deleted}, message="File deleted successfully")
