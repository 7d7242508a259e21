"""EventMapper class unit tests."""

import re

import pytest

from cartsource.domain import events
from cartsource.interfaces.eventstore import EventEnvelope
from cartsource.service_layer.repositories.event_mapper import EventMapper

EVENT_ID = f"{1:026d}"


def test_to_envelope():
    """A domain event becomes an envelope with its fields as payload."""
    envelope = EventMapper.to_envelope(
        stream_id="cart-1",
        stream_type="Cart",
        version=1,
        event_id=EVENT_ID,
        event=events.ProductAddedToCart(cart_id="cart-1", product_id="P", price=10),
    )

    assert envelope == EventEnvelope(
        stream_id="cart-1",
        stream_type="Cart",
        version=1,
        event_id=EVENT_ID,
        event_type="ProductAddedToCart",
        payload={"cart_id": "cart-1", "product_id": "P", "price": 10},
    )


def test_payloadless_event_has_empty_payload():
    """TotalPriceCalculated carries no fields."""
    envelope = EventMapper.to_envelope(
        "cart-1", "Cart", 2, EVENT_ID, events.TotalPriceCalculated()
    )
    assert envelope.payload == {}
    assert envelope.event_type == "TotalPriceCalculated"


def test_to_domain_event():
    """An envelope maps back to the registered event class."""
    envelope = EventEnvelope(
        stream_id="cart-1",
        stream_type="Cart",
        version=1,
        event_id=EVENT_ID,
        event_type="AmountOfProductChanged",
        payload={"product_id": "P", "amount": 4},
    )
    assert EventMapper().to_domain_event(envelope) == events.AmountOfProductChanged(
        product_id="P", amount=4
    )


def test_raises_on_unknown_event_type():
    """Unknown event types raise ValueError."""
    envelope = EventEnvelope(
        stream_id="cart-1",
        stream_type="Cart",
        version=1,
        event_id=EVENT_ID,
        event_type="UnknownEventType",
        payload={},
    )
    with pytest.raises(
        ValueError, match=re.escape("Unknown event type: UnknownEventType")
    ):
        EventMapper().to_domain_event(envelope)


class TestFromRecord:
    """Tests for building events from plain records."""

    @staticmethod
    def test_builds_event():
        """A well-formed record yields its event."""
        record = {"event_type": "ProductRemovedFromCart", "payload": {"product_id": "P"}}
        assert EventMapper().from_record(record) == events.ProductRemovedFromCart("P")

    @staticmethod
    def test_payload_is_optional():
        """Events without fields may omit the payload."""
        record = {"event_type": "TotalPriceCalculated"}
        assert EventMapper().from_record(record) == events.TotalPriceCalculated()

    @staticmethod
    @pytest.mark.parametrize(
        "record",
        [
            {},
            ["ProductRemovedFromCart"],
            {"event_type": "ProductRemovedFromCart", "payload": ["P"]},
            {"event_type": "ProductRemovedFromCart", "payload": {"sku": "P"}},
        ],
        ids=["no-type", "not-a-mapping", "payload-not-mapping", "wrong-fields"],
    )
    def test_rejects_malformed_records(record):
        """Malformed records raise ValueError."""
        with pytest.raises(ValueError):
            EventMapper().from_record(record)

    @staticmethod
    @pytest.mark.parametrize(
        "event_type, payload, field",
        [
            ("AmountOfProductChanged", {"product_id": "P", "amount": "5"}, "amount"),
            ("AmountOfProductChanged", {"product_id": "P", "amount": 2.5}, "amount"),
            ("AmountOfProductChanged", {"product_id": "P", "amount": True}, "amount"),
            (
                "ProductAddedToCart",
                {"cart_id": "c", "product_id": 7, "price": 1},
                "product_id",
            ),
        ],
        ids=["str-amount", "float-amount", "bool-amount", "int-product-id"],
    )
    def test_rejects_mistyped_fields(event_type, payload, field):
        """Field values must have the type the event declares."""
        record = {"event_type": event_type, "payload": payload}
        expected = f"Invalid payload for {event_type}: {field}"
        with pytest.raises(ValueError, match=expected):
            EventMapper().from_record(record)

    @staticmethod
    def test_rejects_non_string_event_type():
        """An event type that is not a string is a malformed record."""
        with pytest.raises(ValueError, match="Malformed event record"):
            EventMapper().from_record({"event_type": ["ProductRemovedFromCart"]})
