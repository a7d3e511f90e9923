from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):

    class Meta:
        model = Product
        fields = ["id", "name", "sku", "quantity", "created_at"]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    """Valida forma y tipos; las reglas de negocio viven en InventoryService."""
    name = serializers.CharField(max_length=255)
    sku = serializers.CharField(max_length=60)
    quantity = serializers.IntegerField()


class LowStockCheckSerializer(serializers.Serializer):
    threshold = serializers.IntegerField(required=False, allow_null=True)
