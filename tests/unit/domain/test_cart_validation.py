"""Unit tests for Cart command validation."""

from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cartsource.domain import commands, errors
from cartsource.domain.aggregates import Cart
from cartsource.domain.results import Invalid, Valid

# pylint: disable=magic-value-comparison


def add(price: int) -> commands.AddProductToCart:
    """Build an AddProductToCart command for product P."""
    return commands.AddProductToCart(cart_id="cart-1", product_id="P", price=price)


def change(amount: int) -> commands.ChangeAmountOfProduct:
    """Build a ChangeAmountOfProduct command for product P."""
    return commands.ChangeAmountOfProduct(
        cart_id="cart-1", product_id="P", amount=amount
    )


class TestAddProductToCart:
    """Validation of AddProductToCart."""

    @staticmethod
    @pytest.mark.parametrize("price", [0, -1, -100])
    def test_rejects_non_positive_price(empty_cart, price):
        """A price <= 0 yields AmountMustBePositive carrying the price."""
        result = empty_cart.handle(add(price))
        assert isinstance(result, Invalid)
        assert isinstance(result.error, errors.AmountMustBePositiveError)
        assert result.error.value == price
        assert str(result.error) == "Price must be greater than 0!!"

    @staticmethod
    def test_accepts_positive_price(empty_cart):
        """A positive price yields the aggregate ID."""
        assert empty_cart.handle(add(1)) == Valid("cart-1")


class TestChangeAmountOfProduct:
    """Validation of ChangeAmountOfProduct."""

    @staticmethod
    @pytest.mark.parametrize("amount", [0, -1])
    def test_rejects_non_positive_amount(empty_cart, amount):
        """An amount <= 0 yields AmountMustBePositive carrying the amount."""
        result = empty_cart.handle(change(amount))
        assert isinstance(result, Invalid)
        assert result.error.value == amount
        assert str(result.error) == "Amount must be greater than 0!!"

    @staticmethod
    def test_accepts_positive_amount_even_for_absent_product(empty_cart):
        """Core validation only checks the amount, not product presence."""
        assert empty_cart.handle(change(5)) == Valid("cart-1")


class TestRemoveProductFromCart:
    """Validation of RemoveProductFromCart."""

    @staticmethod
    def test_rejects_absent_product(empty_cart):
        """Removing a product the cart does not hold is rejected."""
        cmd = commands.RemoveProductFromCart(cart_id="cart-1", product_id="P")
        result = empty_cart.handle(cmd)
        assert isinstance(result, Invalid)
        assert isinstance(result.error, errors.ProductNotInCartError)
        assert result.error.product_id == "P"

    @staticmethod
    def test_accepts_present_product(cart_with_two_items):
        """Removing a held product is accepted."""
        cmd = commands.RemoveProductFromCart(cart_id="cart-1", product_id="A")
        assert cart_with_two_items.handle(cmd) == Valid("cart-1")


def test_validation_does_not_mutate(cart_with_two_items):
    """Validation never changes the cart."""
    before = (dict(cart_with_two_items.items), cart_with_two_items.version)
    cart_with_two_items.handle(add(5))
    cart_with_two_items.handle(change(-1))
    assert (dict(cart_with_two_items.items), cart_with_two_items.version) == before


def test_unknown_command_raises(empty_cart):
    """Commands outside the closed set are rejected loudly."""

    @dataclass(frozen=True)
    class Checkout(commands.Command):
        """A command the cart does not know."""

    with pytest.raises(errors.UnknownCommandTypeError):
        empty_cart.handle(Checkout())


@given(value=st.integers(min_value=-(10**9), max_value=10**9))
def test_validation_boundary(value):
    """Any value <= 0 is rejected with that value; any value > 0 is accepted."""
    cart = Cart("cart-x")
    for cmd in (add(value), change(value)):
        result = cart.handle(cmd)
        if value > 0:
            assert result == Valid("cart-x")
        else:
            assert isinstance(result, Invalid)
            assert result.error.value == value
