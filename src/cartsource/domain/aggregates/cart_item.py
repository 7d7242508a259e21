"""Cart line entity."""

from dataclasses import dataclass

from cartsource.domain.value_objects import Price


@dataclass
class CartItem:
    """A product held in a cart, with its quantity and unit price.

    Owned exclusively by its `Cart`; the unit price is fixed at first insertion.
    """

    product_id: str
    quantity: int
    unit_price: Price

    def add(self, count: int = 1) -> "CartItem":
        """Increase the quantity by `count`."""
        self.quantity += count
        return self

    def change_amount(self, amount: int) -> "CartItem":
        """Set the quantity to an absolute value."""
        self.quantity = amount
        return self

    def line_total(self) -> Price:
        """Quantity times unit price."""
        return self.unit_price * self.quantity
