"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AddProductToCart(Command):
    """Command to add one unit of a product to a cart at a given unit price."""

    cart_id: str
    product_id: str
    price: int


@dataclass(frozen=True)
class ChangeAmountOfProduct(Command):
    """Command to set the quantity of a product already in a cart."""

    cart_id: str
    product_id: str
    amount: int


@dataclass(frozen=True)
class RemoveProductFromCart(Command):
    """Command to remove a product from a cart."""

    cart_id: str
    product_id: str
