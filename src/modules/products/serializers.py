"""Product DRF serializers for API output.

Input validation happens in ``validators`` (rule set) and ``dtos``
(typed payloads); the serializer only shapes responses.  Timestamps are
internal and never serialized.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability"]
        read_only_fields = fields


class ProductEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer()


class ProductListEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)


class DeletedEnvelopeSerializer(serializers.Serializer):
    data = serializers.CharField()


class NotFoundSerializer(serializers.Serializer):
    error = serializers.CharField()


class ViolationSerializer(serializers.Serializer):
    type = serializers.CharField()
    value = serializers.JSONField(required=False)
    msg = serializers.CharField()
    path = serializers.CharField()
    location = serializers.CharField()


class ValidationErrorsSerializer(serializers.Serializer):
    errors = ViolationSerializer(many=True)
