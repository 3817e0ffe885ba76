import logging
from unittest.mock import Mock

import pytest

from models.enums import InventoryEventType
from models.events import InventoryEvent, ProductAdded, QuantityUpdated
from utils.event_bus import EventBus


# Helper to create an event for testing
def create_test_event(product_name: str = "Apple") -> InventoryEvent:
    return ProductAdded(store_name="Test Store", product_name=product_name)


# Test Initialization
def test_event_bus_initialization():
    """Test that the EventBus initializes with an empty subscribers dict."""
    bus = EventBus()
    assert bus.subscribers == {}


# Test Subscription Logic
def test_subscribe_multiple_callbacks_same_event():
    """Test subscribing multiple different callbacks to the same event."""
    bus = EventBus()
    callback1 = Mock()
    callback2 = Mock()

    bus.subscribe("PRODUCT_ADDED", callback1)
    bus.subscribe("PRODUCT_ADDED", callback2)

    assert bus.subscribers["PRODUCT_ADDED"] == [callback1, callback2]


def test_subscribe_duplicate_callback(caplog):
    """Test that subscribing the exact same callback twice is ignored."""
    bus = EventBus()

    def on_added(event):
        pass

    with caplog.at_level(logging.WARNING):
        bus.subscribe("PRODUCT_ADDED", on_added)
        bus.subscribe("PRODUCT_ADDED", on_added)  # Attempt duplicate subscription

    assert len(bus.subscribers["PRODUCT_ADDED"]) == 1  # Should only be one
    assert "Callback on_added already subscribed" in caplog.text


def test_subscribe_non_callable():
    """Test that subscribing a non-callable raises TypeError."""
    bus = EventBus()

    with pytest.raises(TypeError, match="Callback must be callable."):
        bus.subscribe("PRODUCT_ADDED", "not a function")  # type: ignore [arg-type]

    assert "PRODUCT_ADDED" not in bus.subscribers  # Ensure nothing was added


# Test Unsubscription Logic
def test_unsubscribe_last_callback():
    """Test unsubscribing the last callback removes the event type."""
    bus = EventBus()
    callback = Mock()

    bus.subscribe("PRODUCT_ADDED", callback)
    bus.unsubscribe("PRODUCT_ADDED", callback)

    assert "PRODUCT_ADDED" not in bus.subscribers


def test_unsubscribe_nonexistent_callback(caplog):
    """Test unsubscribing a callback not subscribed to the event logs warning."""
    bus = EventBus()

    def subscribed(event):
        pass

    def never_subscribed(event):
        pass

    bus.subscribe("PRODUCT_ADDED", subscribed)

    with caplog.at_level(logging.WARNING):
        bus.unsubscribe("PRODUCT_ADDED", never_subscribed)

    assert bus.subscribers["PRODUCT_ADDED"] == [subscribed]
    assert "Callback never_subscribed not found" in caplog.text


def test_unsubscribe_from_nonexistent_event_type():
    """Test unsubscribing from an event type with no subscribers."""
    bus = EventBus()
    bus.unsubscribe("QUANTITY_UPDATED", Mock())  # No error should be raised
    assert "QUANTITY_UPDATED" not in bus.subscribers


# Test Publishing Logic
def test_publish_calls_correct_subscribers_in_order():
    """Test that publish calls all and only the correct subscribers, in subscription order."""
    bus = EventBus()
    calls = []
    bus.subscribe(InventoryEventType.PRODUCT_ADDED, lambda e: calls.append(("first", e)))
    bus.subscribe(InventoryEventType.PRODUCT_ADDED, lambda e: calls.append(("second", e)))
    other = Mock()
    bus.subscribe(InventoryEventType.QUANTITY_UPDATED, other)

    event = create_test_event()
    bus.publish(event)

    assert calls == [("first", event), ("second", event)]
    other.assert_not_called()


def test_publish_no_subscribers():
    """Test publishing an event with no subscribers."""
    bus = EventBus()
    bus.publish(QuantityUpdated(store_name="S", product_name="Milk", new_quantity=1, affected_count=1))


def test_publish_with_callback_exception(caplog):
    """Test that a failing callback is logged and does not stop later callbacks."""
    bus = EventBus()

    def failing_callback(event):
        raise ValueError("Callback failed!")

    ok_callback = Mock()
    bus.subscribe("PRODUCT_ADDED", failing_callback)
    bus.subscribe("PRODUCT_ADDED", ok_callback)

    event = create_test_event()
    with caplog.at_level(logging.ERROR):
        bus.publish(event)

    ok_callback.assert_called_once_with(event)
    assert "Error in subscriber callback 'failing_callback'" in caplog.text
    assert "Callback failed!" in caplog.text


def test_callback_may_unsubscribe_itself():
    bus = EventBus()
    seen = []

    def once(event):
        seen.append(event.product_name)
        bus.unsubscribe("PRODUCT_ADDED", once)

    bus.subscribe("PRODUCT_ADDED", once)
    bus.publish(create_test_event("Apple"))
    bus.publish(create_test_event("Bread"))

    assert seen == ["Apple"]


def test_publish_invalid_event_object(caplog):
    """Test publishing an object that is not an InventoryEvent."""
    bus = EventBus()
    callback = Mock()
    bus.subscribe("PRODUCT_ADDED", callback)

    invalid_event = {"event_type": "PRODUCT_ADDED", "payload": {}}  # A dict, not InventoryEvent

    with caplog.at_level(logging.ERROR):
        bus.publish(invalid_event)  # type: ignore [arg-type]

    assert f"Attempted to publish invalid event type: {type(invalid_event)}" in caplog.text
    callback.assert_not_called()
