"""Unit tests for the event-sourced cart repository."""

import pytest

from cartsource.adapters.eventstore import InMemoryEventStore
from cartsource.adapters.id_generators import SimpleIdGenerator
from cartsource.domain import events
from cartsource.domain.aggregates import Cart
from cartsource.service_layer.repositories import CartRepository
from cartsource.service_layer.repositories.errors import AggregateNotFoundError

# pylint: disable=redefined-outer-name


@pytest.fixture
def store():
    """An empty in-memory event store."""
    return InMemoryEventStore()


@pytest.fixture
def repo(store):
    """A cart repository over the store."""
    return CartRepository(store, SimpleIdGenerator())


def test_load_missing_cart_raises(repo):
    """Loading a cart without events raises AggregateNotFoundError."""
    with pytest.raises(AggregateNotFoundError) as e:
        repo.load("cart-1")
    assert e.value.aggregate_type_name == "Cart"
    assert e.value.aggregate_id == "cart-1"
    assert str(e.value) == "Cart with ID cart-1 not found."


def test_get_or_create_returns_empty_cart(repo):
    """A missing cart is started empty."""
    cart = repo.get_or_create("cart-1")
    assert isinstance(cart, Cart)
    assert cart.items == {}
    assert cart.version == 0


def test_append_applies_and_stores_events(repo, store):
    """Appended events are applied to the cart and written to its stream."""
    cart = repo.get_or_create("cart-1")
    repo.append(
        cart,
        [
            events.ProductAddedToCart(cart_id="cart-1", product_id="P", price=10),
            events.TotalPriceCalculated(),
        ],
    )

    assert cart.total_price == 10
    stored = list(store.read_stream("cart-1"))
    assert [e.version for e in stored] == [1, 2]
    assert [e.event_type for e in stored] == [
        "ProductAddedToCart",
        "TotalPriceCalculated",
    ]
    assert {e.stream_type for e in stored} == {"Cart"}


def test_load_rehydrates_cart(repo):
    """A stored cart is rebuilt from its stream."""
    cart = repo.get_or_create("cart-1")
    repo.append(
        cart, [events.ProductAddedToCart(cart_id="cart-1", product_id="P", price=10)]
    )
    repo.append(
        cart,
        [
            events.AmountOfProductChanged(product_id="P", amount=3),
            events.TotalPriceCalculated(),
        ],
    )

    loaded = repo.load("cart-1")
    assert loaded.version == 3
    assert loaded.items["P"].quantity == 3
    assert loaded.total_price == 30


def test_append_keeps_stream_when_event_reassigns_id(repo, store):
    """Events land in the stream the cart was loaded from."""
    cart = repo.get_or_create("cart-1")
    repo.append(
        cart, [events.ProductAddedToCart(cart_id="other", product_id="P", price=1)]
    )
    assert cart.aggregate_id == "other"
    assert len(list(store.read_stream("cart-1"))) == 1
    assert not list(store.read_stream("other"))
