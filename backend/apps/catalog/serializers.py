from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(allow_blank=True)
    price = serializers.FloatField()
    stock = serializers.IntegerField()
    image = serializers.CharField(allow_null=True)
    estado = serializers.CharField(allow_null=True)


class ProductDetailSerializer(ProductReadSerializer):
    descripcion = serializers.CharField(allow_blank=True)
