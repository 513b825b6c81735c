"""Order ledger transitions: buy-now and checkout both append exactly one order."""

from collections.abc import Sequence
from datetime import datetime

from src.av_cart.domain.models import CartLine
from src.av_catalog.domain.models import Listing
from src.av_common.errors import EmptyCartError
from src.av_common.id_generator import next_sequential_id
from src.av_order.domain.models import Order, OrderLedger, OrderLine


def snapshot_line(listing: Listing, quantity: int) -> OrderLine:
    return OrderLine(
        listing_id=listing.id,
        name=listing.name,
        unit_price_cents=listing.price_cents,
        image_ref=listing.image_ref,
        artist_name=listing.artist_name,
        quantity=quantity,
    )


def _append(ledger: OrderLedger, lines: tuple[OrderLine, ...], now: datetime) -> tuple[OrderLedger, Order]:
    order = Order(
        id=next_sequential_id(o.id for o in ledger.orders),
        lines=lines,
        created_at=now,
    )
    return OrderLedger(orders=(*ledger.orders, order)), order


def place_single_item(ledger: OrderLedger, listing: Listing, now: datetime) -> tuple[OrderLedger, Order]:
    """Buy now: one line, quantity 1, at the listing's current price."""
    return _append(ledger, (snapshot_line(listing, 1),), now)


def checkout(
    ledger: OrderLedger, cart_lines: Sequence[CartLine], now: datetime
) -> tuple[OrderLedger, Order]:
    """Snapshot every cart line into one order. Raises EmptyCartError on no lines.

    Clearing the cart is the caller's half of the step; the engine applies both
    halves in a single state replacement.
    """
    if not cart_lines:
        raise EmptyCartError()
    lines = tuple(snapshot_line(cl.listing, cl.quantity) for cl in cart_lines)
    return _append(ledger, lines, now)


def history(ledger: OrderLedger) -> tuple[Order, ...]:
    return ledger.orders
