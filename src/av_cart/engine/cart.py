"""Cart ledger transitions. Every function returns a new Cart; none mutates."""

from dataclasses import replace

from src.av_cart.domain.models import Cart, CartLine
from src.av_catalog.domain.models import Listing


def add_item(cart: Cart, listing: Listing) -> Cart:
    """+1 on the existing line for listing.id, or append a new line at quantity 1."""
    for i, line in enumerate(cart.lines):
        if line.listing.id == listing.id:
            bumped = replace(line, quantity=line.quantity + 1)
            return Cart(lines=(*cart.lines[:i], bumped, *cart.lines[i + 1 :]))
    return Cart(lines=(*cart.lines, CartLine(listing=listing, quantity=1)))


def adjust_quantity(cart: Cart, listing_id: int, delta: int) -> Cart:
    """Set quantity to max(0, quantity + delta); a line at 0 is dropped.

    Unknown listing_id is a no-op.
    """
    lines: list[CartLine] = []
    for line in cart.lines:
        if line.listing.id != listing_id:
            lines.append(line)
            continue
        new_quantity = max(0, line.quantity + delta)
        if new_quantity > 0:
            lines.append(replace(line, quantity=new_quantity))
    return Cart(lines=tuple(lines))


def cart_total(cart: Cart) -> int:
    return sum(line.line_total_cents for line in cart.lines)


def clear_cart(cart: Cart) -> Cart:
    return Cart()


def line_count(cart: Cart) -> int:
    """Distinct listings in the cart."""
    return len(cart.lines)


def item_count(cart: Cart) -> int:
    """Total pieces across all lines."""
    return sum(line.quantity for line in cart.lines)
