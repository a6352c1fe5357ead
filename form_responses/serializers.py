"""Serializers for the form responses API."""

from rest_framework import serializers

from formsite_core.config import get_config
from uploads.models import File

from .enums import BulkAction, OrderDirection, ResponseFilter
from .models import Response
from .services.responses_service import API_FILE_FIELDS, ORDERABLE_FIELDS


class PaginationSerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, min_value=1)
    offset = serializers.IntegerField(required=False, min_value=0, default=0)

    def validate_limit(self, value):
        return min(value, get_config("LIST_LIMIT_MAX"))

    def validate(self, attrs):
        attrs.setdefault("limit", get_config("LIST_LIMIT_DEFAULT"))
        return attrs


class ResponseListQuerySerializer(PaginationSerializer):
    filter = serializers.ChoiceField(
        choices=ResponseFilter.choices, required=False, default=ResponseFilter.DEFAULT,
    )


class AccountResponseListQuerySerializer(PaginationSerializer):
    order_by = serializers.ChoiceField(
        choices=sorted(ORDERABLE_FIELDS), required=False, default="id",
    )
    order_dir = serializers.ChoiceField(
        choices=OrderDirection.choices, required=False, default=OrderDirection.DESC,
    )


class SubmitResponseSerializer(serializers.Serializer):
    """Payload of a public form submission."""

    data = serializers.DictField(required=False, allow_null=True)
    data_encrypted = serializers.CharField(required=False, allow_null=True)
    encryption_key_hash = serializers.CharField(
        required=False, allow_null=True, max_length=128,
    )
    context = serializers.DictField(required=False)
    identity_id = serializers.CharField(required=False, allow_null=True, max_length=64)

    def validate(self, attrs):
        if attrs.get("data") is None and not attrs.get("data_encrypted"):
            raise serializers.ValidationError("Either data or data_encrypted is required.")
        attrs["encrypted"] = bool(attrs.get("data_encrypted"))
        return attrs


class BulkActionSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=BulkAction.choices)
    ids = serializers.ListField(
        child=serializers.CharField(max_length=40), allow_empty=False, max_length=1000,
    )
    flag = serializers.BooleanField(required=False, allow_null=True, default=None)
    read = serializers.BooleanField(required=False, allow_null=True, default=None)
    spam = serializers.BooleanField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        if attrs["action"] == BulkAction.FLAG and all(
            attrs.get(name) is None for name in ("flag", "read", "spam")
        ):
            raise serializers.ValidationError(
                "One of flag, read or spam is required for the flag action.",
            )
        return attrs


class ResponseFileSerializer(serializers.ModelSerializer):
    class Meta:
        model = File
        fields = tuple(field for field in API_FILE_FIELDS if field != "response_id")


class ResponseSerializer(serializers.ModelSerializer):
    files = ResponseFileSerializer(many=True, read_only=True)

    class Meta:
        model = Response
        fields = (
            "id",
            "account_id",
            "form_id",
            "identity_id",
            "context",
            "data",
            "data_encrypted",
            "encrypted",
            "encryption_key_hash",
            "error",
            "read",
            "flag",
            "spam",
            "deleted",
            "labels",
            "logs",
            "files",
            "created_at",
            "updated_at",
            "deleted_at",
            "expires_at",
        )
        read_only_fields = fields


class ResponseUpdateSerializer(serializers.Serializer):
    data = serializers.DictField(required=False, allow_null=True)
    labels = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False,
    )

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Nothing to update.")
        return attrs
