"""
Serializers for upload endpoints.

Request and response keys are camelCase to match the dashboard client.
"""
from rest_framework import serializers


class UploadRequestSerializer(serializers.Serializer):
    """Multipart upload form; the file itself is validated by the service."""

    file = serializers.FileField(required=False, allow_empty_file=True)


class DeleteFileRequestSerializer(serializers.Serializer):
    """Serializer for delete-by-URL requests."""

    fileUrl = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class DeleteUploadThingFileRequestSerializer(serializers.Serializer):
    """Serializer for UploadThing delete requests."""

    fileKey = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class StoredFileSerializer(serializers.Serializer):
    """Serializer for StoredFile."""

    url = serializers.CharField()
    fileName = serializers.CharField(source="file_name")
    size = serializers.IntegerField()
    type = serializers.CharField(source="content_type")
