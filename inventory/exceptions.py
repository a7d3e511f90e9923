"""
Errores del dominio de inventario.

Todos heredan de ``BusinessLogicError`` para que la API los serialice con el
mismo formato ``{detail, code, meta}`` que el resto del proyecto.
"""
from rest_framework import status

from core.exceptions import BusinessLogicError

from .constants import (
    DUPLICATE_SKU_MESSAGE,
    NEGATIVE_QUANTITY_MESSAGE,
    PRODUCT_NOT_FOUND_MESSAGE,
)


class InventoryError(BusinessLogicError):
    default_detail = "Operación de inventario no permitida."
    default_code = "INVENTORY_ERROR"

    def __init__(self, detail=None, *, sku=None, extra=None):
        meta = dict(extra or {})
        if sku is not None:
            meta["sku"] = sku
        super().__init__(detail, internal_code=self.default_code, extra=meta or None)


class ValidationError(InventoryError):
    """La cantidad inicial de un producto es negativa."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = NEGATIVE_QUANTITY_MESSAGE
    default_code = "INVALID_QUANTITY"


class ConflictError(InventoryError):
    """Ya existe un producto con el SKU solicitado."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = DUPLICATE_SKU_MESSAGE
    default_code = "DUPLICATE_SKU"


class NotFoundError(InventoryError):
    """No existe un producto con el SKU solicitado."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = PRODUCT_NOT_FOUND_MESSAGE
    default_code = "PRODUCT_NOT_FOUND"
