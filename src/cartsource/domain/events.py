"""Events"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Events are immutable facts; applying one must never fail validation.
    """


@dataclass(frozen=True, slots=True)
class ProductAddedToCart(DomainEvent):
    """Event indicating that one unit of a product has been added to a cart."""

    cart_id: str
    product_id: str
    price: int


@dataclass(frozen=True, slots=True)
class ProductRemovedFromCart(DomainEvent):
    """Event indicating that a product has been removed from a cart."""

    product_id: str


@dataclass(frozen=True, slots=True)
class AmountOfProductChanged(DomainEvent):
    """Event indicating that the quantity of a product has been set."""

    product_id: str
    amount: int


@dataclass(frozen=True, slots=True)
class TotalPriceCalculated(DomainEvent):
    """Event triggering a recalculation of the cart's cached total price."""


# Registry of domain event types for deserialization
DOMAIN_EVENT_REGISTRY: dict[str, type[DomainEvent]] = {
    "ProductAddedToCart": ProductAddedToCart,
    "ProductRemovedFromCart": ProductRemovedFromCart,
    "AmountOfProductChanged": AmountOfProductChanged,
    "TotalPriceCalculated": TotalPriceCalculated,
}
