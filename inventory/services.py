"""
Servicio de gestión de inventario.
"""
import logging
from dataclasses import dataclass

from django.conf import settings

from notifications.senders import get_notification_sender

from .constants import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    LOW_STOCK_ALERT_TEMPLATE,
    PRODUCT_REMOVED_MESSAGE,
)
from .exceptions import ConflictError, NotFoundError, ValidationError
from .repositories import DjangoProductStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    message: str


@dataclass(frozen=True)
class LowStockResult:
    alert_sent: bool


class InventoryService:
    """
    Alta, baja y alertas de stock bajo de productos.

    El store y el canal de notificaciones se inyectan en el constructor; si no
    se pasan se usan el ORM y el canal configurado en settings.
    """

    def __init__(self, store=None, notifier=None, low_stock_threshold=None):
        self.store = store if store is not None else DjangoProductStore()
        self.notifier = notifier if notifier is not None else get_notification_sender()
        if low_stock_threshold is None:
            low_stock_threshold = getattr(
                settings, "INVENTORY_LOW_STOCK_THRESHOLD", DEFAULT_LOW_STOCK_THRESHOLD
            )
        self.low_stock_threshold = low_stock_threshold

    def _get_existing(self, sku):
        product = self.store.find_by_sku(sku)
        if product is None:
            logger.warning("Producto no encontrado: sku=%s", sku)
            raise NotFoundError(sku=sku)
        return product

    def add_product(self, name, sku, quantity):
        """
        Registra un producto nuevo.

        Valida la cantidad antes de consultar el store y la unicidad del SKU
        antes de escribir, así que un error nunca deja escrituras parciales.
        """
        if quantity < 0:
            logger.warning("Cantidad negativa rechazada: sku=%s, quantity=%s", sku, quantity)
            raise ValidationError(sku=sku, extra={"quantity": quantity})

        if self.store.find_by_sku(sku) is not None:
            logger.warning("SKU duplicado rechazado: sku=%s", sku)
            raise ConflictError(sku=sku)

        product = self.store.insert(name=name, sku=sku, quantity=quantity)
        logger.info("Producto creado: sku=%s, quantity=%s", sku, quantity)
        return product

    def remove_product(self, sku):
        self._get_existing(sku)
        self.store.delete_by_sku(sku)
        logger.info("Producto eliminado: sku=%s", sku)
        return OperationResult(message=PRODUCT_REMOVED_MESSAGE)

    def check_low_stock(self, sku, threshold=None):
        """
        Envía una alerta si el stock está estrictamente por debajo del umbral.

        Como máximo se hace un envío por llamada y se espera a que termine antes
        de retornar.
        """
        if threshold is None:
            threshold = self.low_stock_threshold

        product = self._get_existing(sku)
        if product.quantity >= threshold:
            return LowStockResult(alert_sent=False)

        message = LOW_STOCK_ALERT_TEMPLATE.format(sku=product.sku, quantity=product.quantity)
        self.notifier.send_alert(message)
        logger.warning(
            "Alerta de stock bajo enviada: sku=%s, quantity=%s, threshold=%s",
            product.sku, product.quantity, threshold,
        )
        return LowStockResult(alert_sent=True)
