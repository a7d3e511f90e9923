"""
Canales de envío de alertas operativas.

El servicio de inventario solo conoce ``send_alert(message)``; el canal concreto
se elige en settings con ``NOTIFICATION_SENDER_CLASS``.
"""
import logging
from abc import ABC, abstractmethod

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.mail import send_mail
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class NotificationSender(ABC):
    """Contrato mínimo de un canal de alertas."""

    @abstractmethod
    def send_alert(self, message: str) -> None:
        """Entrega el mensaje ya formateado. Los errores del canal se propagan."""


class LoggingNotificationSender(NotificationSender):
    """Canal por defecto: deja la alerta en el log de la aplicación."""

    def send_alert(self, message: str) -> None:
        logger.warning("Alert sent: %s", message)


class EmailNotificationSender(NotificationSender):
    """
    Envía la alerta por email a ``INVENTORY_ALERT_RECIPIENTS``.

    Sin destinatarios no se puede construir. Usa ``fail_silently=False``: un
    fallo SMTP llega intacto a quien llamó.
    """

    def __init__(self, recipients=None, subject=None, from_email=None):
        self.recipients = list(
            recipients if recipients is not None
            else getattr(settings, "INVENTORY_ALERT_RECIPIENTS", [])
        )
        if not self.recipients:
            raise ImproperlyConfigured(
                "INVENTORY_ALERT_RECIPIENTS debe tener al menos un destinatario para usar EmailNotificationSender."
            )
        self.subject = subject or getattr(settings, "INVENTORY_ALERT_SUBJECT", "Alerta de inventario")
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL

    def send_alert(self, message: str) -> None:
        send_mail(
            subject=self.subject,
            message=message,
            from_email=self.from_email,
            recipient_list=self.recipients,
            fail_silently=False,
        )
        logger.info("Alerta enviada por email a %d destinatarios", len(self.recipients))


def get_notification_sender() -> NotificationSender:
    """Instancia el canal configurado en ``settings.NOTIFICATION_SENDER_CLASS``."""
    sender_class = import_string(
        getattr(
            settings,
            "NOTIFICATION_SENDER_CLASS",
            "notifications.senders.LoggingNotificationSender",
        )
    )
    return sender_class()
