"""
Serializers shared by the v1 endpoints.
"""

from rest_framework import serializers

from core.domain.listing import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS, ListingQuery


class ListingQuerySerializer(serializers.Serializer):
    """Query string of a dashboard table: search, date range and paging."""

    search = serializers.CharField(required=False, allow_blank=True, max_length=255)
    date_from = serializers.DateField(required=False, allow_null=True)
    date_to = serializers.DateField(required=False, allow_null=True)
    page = serializers.IntegerField(required=False, default=1, min_value=1)
    page_size = serializers.ChoiceField(
        choices=PAGE_SIZE_OPTIONS, required=False, default=DEFAULT_PAGE_SIZE
    )

    def to_query(self) -> ListingQuery:
        """Build the listing query from validated data."""
        data = self.validated_data
        return ListingQuery(
            search=data.get("search") or None,
            date_from=data.get("date_from"),
            date_to=data.get("date_to"),
            page=data["page"],
            page_size=int(data["page_size"]),
        )


class RefSerializer(serializers.Serializer):
    """Id and name of a related record."""

    id = serializers.UUIDField()
    name = serializers.CharField()
