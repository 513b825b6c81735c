"""Pydantic schemas for av_order API requests/responses."""

from datetime import datetime

from pydantic import BaseModel

from src.av_common.cents import cents_to_display
from src.av_common.datetime_utils import date_display
from src.av_order.domain.models import Order, OrderLine


class BuyNowRequest(BaseModel):
    listing_id: int


class OrderLineResponse(BaseModel):
    listing_id: int
    name: str
    artist_name: str
    image_ref: str
    unit_price_cents: int
    quantity: int
    line_total_cents: int

    @classmethod
    def from_domain(cls, line: OrderLine) -> "OrderLineResponse":
        return cls(
            listing_id=line.listing_id,
            name=line.name,
            artist_name=line.artist_name,
            image_ref=line.image_ref,
            unit_price_cents=line.unit_price_cents,
            quantity=line.quantity,
            line_total_cents=line.line_total_cents,
        )


class OrderResponse(BaseModel):
    id: int
    lines: list[OrderLineResponse]
    total_cents: int
    total_display: str
    created_at: datetime
    date_display: str

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            lines=[OrderLineResponse.from_domain(ln) for ln in order.lines],
            total_cents=order.total_cents,
            total_display=cents_to_display(order.total_cents),
            created_at=order.created_at,
            date_display=date_display(order.created_at),
        )


class OrderListResponse(BaseModel):
    items: list[OrderResponse]
