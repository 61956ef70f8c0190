from rest_framework import serializers

from apps.api.validation import MAX_DB_INT


class CartLineSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.FloatField()
    qty = serializers.IntegerField()
    image = serializers.CharField(allow_null=True)


class CartAddSerializer(serializers.Serializer):
    id_objeto = serializers.IntegerField(min_value=1, max_value=MAX_DB_INT)


class CartQuantitySerializer(serializers.Serializer):
    qty = serializers.IntegerField(min_value=0, max_value=MAX_DB_INT)
