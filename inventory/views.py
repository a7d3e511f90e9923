from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from .serializers import (
    LowStockCheckSerializer,
    ProductCreateSerializer,
    ProductSerializer,
)
from .services import InventoryService


class InventoryProductViewSet(viewsets.ViewSet):
    """Alta, baja y chequeo de stock bajo de productos por SKU."""
    permission_classes = [IsAdminUser]
    lookup_field = 'sku'
    # Los SKU pueden contener puntos (p. ej. CAB-1.5M)
    lookup_value_regex = '[^/]+'

    def get_service(self):
        return InventoryService()

    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = self.get_service().add_product(**serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, sku=None):
        result = self.get_service().remove_product(sku)
        return Response({"message": result.message}, status=status.HTTP_200_OK)

    @action(detail=True, methods=['post'], url_path='check-low-stock')
    def check_low_stock(self, request, sku=None):
        serializer = LowStockCheckSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().check_low_stock(
            sku, threshold=serializer.validated_data.get('threshold')
        )
        return Response({"alert_sent": result.alert_sent}, status=status.HTTP_200_OK)
