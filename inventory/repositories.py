"""
Acceso a persistencia de productos.

``ProductStore`` es el contrato que consume ``InventoryService``; la
implementación de producción delega en el ORM de Django y deja la unicidad del
SKU al índice único de la base de datos.
"""
from abc import ABC, abstractmethod
from typing import Optional

from .models import Product


class ProductStore(ABC):

    @abstractmethod
    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Retorna el producto con ese SKU o ``None``."""

    @abstractmethod
    def insert(self, *, name: str, sku: str, quantity: int) -> Product:
        """Persiste un producto nuevo; el store asigna ``id`` y ``created_at``."""

    @abstractmethod
    def delete_by_sku(self, sku: str) -> None:
        """Elimina el producto; falla si no existe."""


class DjangoProductStore(ProductStore):

    def find_by_sku(self, sku):
        return Product.objects.filter(sku=sku).first()

    def insert(self, *, name, sku, quantity):
        # Un insert concurrente con el mismo SKU termina en IntegrityError.
        return Product.objects.create(name=name, sku=sku, quantity=quantity)

    def delete_by_sku(self, sku):
        deleted, _ = Product.objects.filter(sku=sku).delete()
        if not deleted:
            raise Product.DoesNotExist(f"No existe producto con SKU {sku}")
