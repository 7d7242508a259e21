"""Service layer handlers for cart commands."""

import logging
from collections.abc import Callable

from cartsource.domain import commands, events
from cartsource.domain.aggregates import Cart
from cartsource.domain.errors import ProductNotInCartError
from cartsource.domain.results import CommandResult, Invalid
from cartsource.interfaces.id_generator import IdGenerator
from cartsource.interfaces.unit_of_work import AbstractUnitOfWork

from .repositories import CartRepository

logger = logging.getLogger(__name__)


def add_product_to_cart(
    cmd: commands.AddProductToCart,
    uow: AbstractUnitOfWork,
    event_id_generator: IdGenerator,
) -> CommandResult:
    """Add one unit of a product to the cart and recalculate its total."""

    with uow:
        repo = CartRepository(uow.eventstore, event_id_generator)
        cart = repo.get_or_create(cmd.cart_id)
        if not (result := cart.handle(cmd)).is_valid:
            _log_rejection(cmd, result)
            return result

        added = events.ProductAddedToCart(
            cart_id=cmd.cart_id, product_id=cmd.product_id, price=cmd.price
        )
        _record(repo, cart, added)
        uow.commit()
    return result


def change_amount_of_product(
    cmd: commands.ChangeAmountOfProduct,
    uow: AbstractUnitOfWork,
    event_id_generator: IdGenerator,
) -> CommandResult:
    """Set the quantity of a product held in the cart and recalculate its total."""

    with uow:
        repo = CartRepository(uow.eventstore, event_id_generator)
        cart = repo.get_or_create(cmd.cart_id)
        if not (result := cart.handle(cmd)).is_valid:
            _log_rejection(cmd, result)
            return result

        try:
            cart.require_item(cmd.product_id)
        except ProductNotInCartError as e:
            rejected = Invalid(e)
            _log_rejection(cmd, rejected)
            return rejected

        changed = events.AmountOfProductChanged(
            product_id=cmd.product_id, amount=cmd.amount
        )
        _record(repo, cart, changed)
        uow.commit()
    return result


def remove_product_from_cart(
    cmd: commands.RemoveProductFromCart,
    uow: AbstractUnitOfWork,
    event_id_generator: IdGenerator,
) -> CommandResult:
    """Remove a product from the cart and recalculate its total."""

    with uow:
        repo = CartRepository(uow.eventstore, event_id_generator)
        cart = repo.get_or_create(cmd.cart_id)
        if not (result := cart.handle(cmd)).is_valid:
            _log_rejection(cmd, result)
            return result

        _record(repo, cart, events.ProductRemovedFromCart(product_id=cmd.product_id))
        uow.commit()
    return result


# ============================================================================
#                               Helpers
# ============================================================================


def _record(repo: CartRepository, cart: Cart, event: events.DomainEvent) -> None:
    """Append the event followed by a total recalculation in one batch."""
    repo.append(cart, [event, events.TotalPriceCalculated()])
    logger.debug(
        "Cart %s: recorded %s; total is now %d",
        cart.aggregate_id,
        type(event).__name__,
        cart.total_price,
    )


def _log_rejection(cmd: commands.Command, result: CommandResult) -> None:
    logger.info("Rejected %s: %s", type(cmd).__name__, result)


# ============================================================================
#                       Handler Registry
# ============================================================================


COMMAND_HANDLERS: dict[type, Callable[..., CommandResult]] = {
    commands.AddProductToCart: add_product_to_cart,
    commands.ChangeAmountOfProduct: change_amount_of_product,
    commands.RemoveProductFromCart: remove_product_from_cart,
}
