"""Cart Aggregate"""

import logging
from typing import ClassVar

from cartsource.domain import commands, errors, events
from cartsource.domain.results import CommandResult, Invalid, Valid
from cartsource.domain.value_objects import Price

from .base import Aggregate
from .cart_item import CartItem

logger = logging.getLogger(__name__)

PRICE_MUST_BE_POSITIVE = "Price must be greater than 0!!"
AMOUNT_MUST_BE_POSITIVE = "Amount must be greater than 0!!"


class Cart(Aggregate):
    """Aggregate root representing a shopping cart.

    `total_price` is a cached projection: it is only recomputed when a
    `TotalPriceCalculated` event is applied and may be stale in between.
    """

    STREAM_TYPE: ClassVar[str] = "Cart"

    def __init__(self, aggregate_id: str) -> None:
        super().__init__(aggregate_id)
        self.items: dict[str, CartItem] = {}
        self.total_price: int = 0

    # --- Command Validation ---

    def handle(self, command: commands.Command) -> CommandResult:
        """Validate a command against the current state.

        Nothing is mutated; on success the aggregate ID is returned so the
        caller can record the resulting event.

        Args:
            command: The command to validate.

        Returns:
            `Valid(aggregate_id)` when accepted; otherwise `Invalid` carrying an
            `AmountMustBePositiveError` (with the offending value) or, for removals,
            a `ProductNotInCartError`.

        Raises:
            UnknownCommandTypeError: If the command is not one the cart handles.
        """
        match command:
            case commands.AddProductToCart(price=price):
                return self._require_positive(price, PRICE_MUST_BE_POSITIVE)
            case commands.ChangeAmountOfProduct(amount=amount):
                return self._require_positive(amount, AMOUNT_MUST_BE_POSITIVE)
            case commands.RemoveProductFromCart(product_id=product_id):
                if self.find_item(product_id) is None:
                    return Invalid(errors.ProductNotInCartError(product_id))
                return Valid(self.aggregate_id)
            case _:
                raise errors.UnknownCommandTypeError(
                    type(self).__name__, type(command).__name__
                )

    def _require_positive(self, value: int, message: str) -> CommandResult:
        if value <= 0:
            return Invalid(errors.AmountMustBePositiveError(value, message))
        return Valid(self.aggregate_id)

    # --- Event Application ---

    def _apply(self, event: events.DomainEvent) -> None:
        match event:
            case events.ProductAddedToCart():
                self._apply_product_added(event)
            case events.AmountOfProductChanged():
                self._apply_amount_changed(event)
            case events.ProductRemovedFromCart():
                self._apply_product_removed(event)
            case events.TotalPriceCalculated():
                self.total_price = self.calculate_total().amount
            case _:
                raise errors.UnknownEventTypeError(
                    type(self).__name__, type(event).__name__
                )

    def _apply_product_added(self, event: events.ProductAddedToCart) -> None:
        # TODO: stop reassigning the id once all streams are known to carry the owning cart id
        self.aggregate_id = event.cart_id
        if (item := self.find_item(event.product_id)) is not None:
            item.add(1)
        else:
            self.items[event.product_id] = CartItem(
                product_id=event.product_id, quantity=1, unit_price=Price(event.price)
            )

    def _apply_amount_changed(self, event: events.AmountOfProductChanged) -> None:
        if (item := self.find_item(event.product_id)) is None:
            logger.debug(
                "Cart %s: amount change for absent product %s ignored",
                self.aggregate_id,
                event.product_id,
            )
            return
        if event.amount <= 0:
            # no item may be held at quantity zero
            del self.items[item.product_id]
            return
        item.change_amount(event.amount)

    def _apply_product_removed(self, event: events.ProductRemovedFromCart) -> None:
        if (item := self.find_item(event.product_id)) is None:
            logger.debug(
                "Cart %s: removal of absent product %s ignored",
                self.aggregate_id,
                event.product_id,
            )
            return
        del self.items[item.product_id]

    # --- Queries ---

    def find_item(self, product_id: str) -> CartItem | None:
        """Return the item for `product_id`, or None if the cart does not hold it."""
        return self.items.get(product_id)

    def require_item(self, product_id: str) -> CartItem:
        """Return the item for `product_id`.

        Raises:
            ProductNotInCartError: If the cart does not hold the product.
        """
        if (item := self.find_item(product_id)) is None:
            raise errors.ProductNotInCartError(product_id)
        return item

    def calculate_total(self) -> Price:
        """Sum of all line totals, computed from the current items."""
        return sum((item.line_total() for item in self.items.values()), Price(0))
