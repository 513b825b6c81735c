"""Build reference-schema rows from engine values.

Engine ids are per-session integers; the relational shape uses UUIDs, so the
caller supplies the UUIDs to use (seller, buyer, and one per listing source).
"""

import uuid
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal

from src.av_auction.domain.models import AuctionState
from src.av_catalog.domain.models import Listing
from src.av_common.enums import AuctionStatus, OrderSourceType, OrderStatus, SellStatus
from src.av_order.domain.models import Order
from src.av_reference.db_models import AuctionModel, OrderModel, SellModel


def cents_to_decimal(cents: int) -> Decimal:
    return Decimal(cents) / 100


def sell_row_from_listing(listing: Listing, seller_id: uuid.UUID, source_id: uuid.UUID) -> SellModel:
    return SellModel(
        id=source_id,
        seller_id=seller_id,
        title=listing.name,
        description=listing.description,
        price=cents_to_decimal(listing.price_cents),
        currency="USD",
        stock=1,
        status=SellStatus.ACTIVE.value,
    )


def auction_row_from_state(
    auction: AuctionState, seller_id: uuid.UUID, ends_at: datetime
) -> AuctionModel:
    return AuctionModel(
        seller_id=seller_id,
        title=auction.listing.name,
        description=auction.listing.description,
        starting_price=cents_to_decimal(auction.starting_price_cents),
        current_price=cents_to_decimal(auction.current_price_cents),
        currency="USD",
        ends_at=ends_at,
        status=AuctionStatus.ACTIVE.value,
    )


def order_rows_from_order(
    order: Order,
    buyer_id: uuid.UUID,
    seller_id: uuid.UUID,
    source_ids: Mapping[int, uuid.UUID],
) -> list[OrderModel]:
    """One row per order line; the relational shape has no multi-line orders.

    Raises KeyError when a line's listing has no entry in source_ids.
    """
    return [
        OrderModel(
            buyer_id=buyer_id,
            seller_id=seller_id,
            source_type=OrderSourceType.SELL.value,
            source_id=source_ids[line.listing_id],
            quantity=line.quantity,
            amount=cents_to_decimal(line.line_total_cents),
            currency="USD",
            status=OrderStatus.CREATED.value,
            created_at=order.created_at,
            updated_at=order.created_at,
        )
        for line in order.lines
    ]
