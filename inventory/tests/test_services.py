from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from inventory.constants import PRODUCT_REMOVED_MESSAGE
from inventory.exceptions import ConflictError, NotFoundError, ValidationError
from inventory.services import InventoryService, LowStockResult, OperationResult


def make_product(sku="LAP-001", name="Laptop", quantity=10, pk=1):
    return SimpleNamespace(id=pk, name=name, sku=sku, quantity=quantity, created_at=datetime(2025, 10, 22))


@pytest.fixture
def store():
    store = MagicMock()
    store.find_by_sku.return_value = None
    return store


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def service(store, notifier):
    return InventoryService(store=store, notifier=notifier)


class TestAddProduct:
    def test_adds_product_when_data_is_valid(self, service, store):
        store.insert.return_value = make_product()

        result = service.add_product("Laptop", "LAP-001", 10)

        assert result.name == "Laptop"
        assert result.sku == "LAP-001"
        assert result.quantity == 10
        assert result.id == 1
        store.find_by_sku.assert_called_once_with("LAP-001")
        store.insert.assert_called_once_with(name="Laptop", sku="LAP-001", quantity=10)

    def test_accepts_zero_quantity(self, service, store):
        store.insert.return_value = make_product(quantity=0)

        result = service.add_product("Laptop", "LAP-001", 0)

        assert result.quantity == 0
        store.insert.assert_called_once()

    def test_duplicate_sku_raises_conflict_without_write(self, service, store):
        store.find_by_sku.return_value = make_product()

        with pytest.raises(ConflictError) as excinfo:
            service.add_product("Desktop", "LAP-001", 5)

        assert excinfo.value.message == "Product with this SKU already exists"
        assert excinfo.value.detail["meta"]["sku"] == "LAP-001"
        store.insert.assert_not_called()

    @pytest.mark.parametrize("quantity", [-1, -5, -1000])
    def test_negative_quantity_raises_validation_error_without_store_access(self, service, store, quantity):
        with pytest.raises(ValidationError) as excinfo:
            service.add_product("Laptop", "LAP-002", quantity)

        assert excinfo.value.message == "Quantity cannot be negative"
        store.find_by_sku.assert_not_called()
        store.insert.assert_not_called()

    def test_store_errors_propagate_unchanged(self, service, store):
        store.insert.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError, match="db down"):
            service.add_product("Laptop", "LAP-001", 10)


class TestRemoveProduct:
    def test_removes_existing_product(self, service, store):
        store.find_by_sku.return_value = make_product()

        result = service.remove_product("LAP-001")

        assert result == OperationResult(message=PRODUCT_REMOVED_MESSAGE)
        assert result.message == "Product removed successfully"
        store.find_by_sku.assert_called_once_with("LAP-001")
        store.delete_by_sku.assert_called_once_with("LAP-001")

    def test_missing_product_raises_not_found_without_delete(self, service, store):
        with pytest.raises(NotFoundError) as excinfo:
            service.remove_product("NON-EXISTENT")

        assert excinfo.value.message == "Product not found"
        store.delete_by_sku.assert_not_called()


class TestCheckLowStock:
    def test_sends_alert_when_quantity_below_threshold(self, service, store, notifier):
        store.find_by_sku.return_value = make_product(quantity=3)

        result = service.check_low_stock("LAP-001")

        assert result == LowStockResult(alert_sent=True)
        notifier.send_alert.assert_called_once_with(
            "Low stock alert: Product LAP-001 has only 3 units left"
        )

    def test_alert_message_mentions_sku_and_quantity(self, service, store, notifier):
        store.find_by_sku.return_value = make_product(sku="LAP-009", quantity=0)

        service.check_low_stock("LAP-009")

        (message,), _ = notifier.send_alert.call_args
        assert "LAP-009" in message
        assert "0" in message

    @pytest.mark.parametrize("quantity", [5, 6, 100])
    def test_no_alert_when_quantity_at_or_above_threshold(self, service, store, notifier, quantity):
        store.find_by_sku.return_value = make_product(quantity=quantity)

        result = service.check_low_stock("LAP-001")

        assert result.alert_sent is False
        notifier.send_alert.assert_not_called()

    def test_custom_threshold_is_respected(self, service, store, notifier):
        store.find_by_sku.return_value = make_product(quantity=8)

        assert service.check_low_stock("LAP-001", threshold=10).alert_sent is True
        assert service.check_low_stock("LAP-001", threshold=8).alert_sent is False
        assert notifier.send_alert.call_count == 1

    def test_missing_product_raises_not_found_without_alert(self, service, notifier):
        with pytest.raises(NotFoundError):
            service.check_low_stock("NON-EXISTENT")

        notifier.send_alert.assert_not_called()

    def test_notifier_errors_propagate(self, service, store, notifier):
        store.find_by_sku.return_value = make_product(quantity=1)
        notifier.send_alert.side_effect = ConnectionError("smtp unreachable")

        with pytest.raises(ConnectionError):
            service.check_low_stock("LAP-001")

    def test_service_threshold_comes_from_constructor(self, store, notifier):
        service = InventoryService(store=store, notifier=notifier, low_stock_threshold=2)
        store.find_by_sku.return_value = make_product(quantity=3)

        assert service.check_low_stock("LAP-001").alert_sent is False
        notifier.send_alert.assert_not_called()


class TestDefaults:
    def test_threshold_defaults_to_settings(self, store, notifier, settings):
        settings.INVENTORY_LOW_STOCK_THRESHOLD = 12

        service = InventoryService(store=store, notifier=notifier)

        assert service.low_stock_threshold == 12

    def test_default_collaborators_are_built_from_settings(self, settings):
        from inventory.repositories import DjangoProductStore
        from notifications.senders import LoggingNotificationSender

        settings.NOTIFICATION_SENDER_CLASS = "notifications.senders.LoggingNotificationSender"

        service = InventoryService()

        assert isinstance(service.store, DjangoProductStore)
        assert isinstance(service.notifier, LoggingNotificationSender)
        assert service.low_stock_threshold == 5
