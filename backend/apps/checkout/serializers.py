from rest_framework import serializers

from apps.api.validation import MAX_DB_INT


class CheckoutRequestSerializer(serializers.Serializer):
    cartId = serializers.IntegerField(
        min_value=1, max_value=MAX_DB_INT, required=False
    )


class CheckoutResultSerializer(serializers.Serializer):
    ok = serializers.BooleanField()
    message = serializers.CharField()
    total = serializers.FloatField(required=False)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get("total") is None:
            data.pop("total", None)
        return data
