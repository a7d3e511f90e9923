from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import InventoryProductViewSet

router = DefaultRouter()

# Endpoints administrativos de inventario
router.register(r'products', InventoryProductViewSet, basename='inventory-product')

urlpatterns = [
    path('', include(router.urls)),
]
