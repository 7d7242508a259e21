"""``cartsource replay``: rebuild a cart from a recorded event stream."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table

from cartsource.domain.aggregates import Cart
from cartsource.service_layer.repositories.event_mapper import EventMapper

from .helpers.messages import error, success, warn

if TYPE_CHECKING:
    from cartsource.domain.events import DomainEvent

logger = logging.getLogger(__name__)


def load_events(path: Path, mapper: EventMapper | None = None) -> list[DomainEvent]:
    """Read a JSON array of event records and map them to domain events.

    Raises:
        ValueError: If the file is not a JSON array of valid event records.
    """
    mapper = mapper or EventMapper()
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON array of events")
    return [mapper.from_record(record) for record in records]


def render_cart(cart: Cart) -> Table:
    """Build a Rich table with one row per item and the cached total."""
    table = Table(title=f"Cart {cart.aggregate_id}", show_footer=True)
    table.add_column("Product", footer="Total")
    table.add_column("Quantity", justify="right")
    table.add_column("Unit price", justify="right")
    table.add_column("Line total", justify="right", footer=str(cart.total_price))
    for item in cart.items.values():
        table.add_row(
            item.product_id,
            str(item.quantity),
            str(item.unit_price.amount),
            str(item.line_total().amount),
        )
    return table


def cart_as_dict(cart: Cart) -> dict[str, Any]:
    """Plain-data view of the cart for ``--json`` output."""
    return {
        "cart_id": cart.aggregate_id,
        "version": cart.version,
        "items": [
            {
                "product_id": item.product_id,
                "quantity": item.quantity,
                "unit_price": item.unit_price.amount,
            }
            for item in cart.items.values()
        ],
        "total_price": cart.total_price,
    }


@click.command()
@click.argument(
    "events_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--cart-id",
    default="",
    help="ID to start the cart with (replaced by the cart id of any add event).",
)
@click.option(
    "--json", "as_json", is_flag=True, help="Print the cart as JSON on stdout."
)
@click.pass_context
def replay(ctx: click.Context, events_file: Path, cart_id: str, as_json: bool) -> None:
    """Replay EVENTS_FILE and show the resulting cart.

    EVENTS_FILE is a JSON array of {"event_type": ..., "payload": {...}} records.
    """
    try:
        events = load_events(events_file)
    except ValueError as e:
        logger.warning("Replay of %s aborted", events_file)
        error(str(e))
        ctx.exit(1)

    if not events:
        warn(f"{events_file} holds no events; the cart is empty.")

    cart = Cart.rehydrate(cart_id, events)
    logger.info("Replayed %d event(s) into cart %s", cart.version, cart.aggregate_id)

    if as_json:
        click.echo(json.dumps(cart_as_dict(cart)))
        return
    Console().print(render_cart(cart))
    success(f"Replayed {cart.version} event(s).")
