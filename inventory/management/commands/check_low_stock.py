from django.core.management.base import BaseCommand, CommandError

from inventory.exceptions import NotFoundError
from inventory.services import InventoryService


class Command(BaseCommand):
    help = "Revisa el stock de un producto y envía alerta si está por debajo del umbral."

    def add_arguments(self, parser):
        parser.add_argument("sku", help="SKU del producto a revisar")
        parser.add_argument(
            "--threshold",
            type=int,
            default=None,
            help="Umbral de stock bajo (por defecto INVENTORY_LOW_STOCK_THRESHOLD).",
        )

    def handle(self, *args, **options):
        sku = options["sku"]
        try:
            result = InventoryService().check_low_stock(sku, threshold=options["threshold"])
        except NotFoundError as exc:
            raise CommandError(f"{exc.message}: {sku}") from exc

        if result.alert_sent:
            self.stdout.write(self.style.WARNING(f"Alerta de stock bajo enviada para {sku}."))
        else:
            self.stdout.write(self.style.SUCCESS(f"Stock de {sku} sobre el umbral, sin alerta."))
