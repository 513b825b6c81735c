"""Pydantic schemas for av_cart API requests/responses."""

from pydantic import BaseModel

from src.av_cart.domain.models import Cart, CartLine
from src.av_cart.engine.cart import cart_total, item_count, line_count
from src.av_catalog.application.schemas import ListingResponse
from src.av_common.cents import cents_to_display


class AddToCartRequest(BaseModel):
    listing_id: int


class AdjustQuantityRequest(BaseModel):
    delta: int


class CartLineResponse(BaseModel):
    listing: ListingResponse
    quantity: int
    line_total_cents: int

    @classmethod
    def from_domain(cls, line: CartLine) -> "CartLineResponse":
        return cls(
            listing=ListingResponse.from_domain(line.listing),
            quantity=line.quantity,
            line_total_cents=line.line_total_cents,
        )


class CartResponse(BaseModel):
    lines: list[CartLineResponse]
    line_count: int
    item_count: int
    total_cents: int
    total_display: str

    @classmethod
    def from_domain(cls, cart: Cart) -> "CartResponse":
        total = cart_total(cart)
        return cls(
            lines=[CartLineResponse.from_domain(ln) for ln in cart.lines],
            line_count=line_count(cart),
            item_count=item_count(cart),
            total_cents=total,
            total_display=cents_to_display(total),
        )
