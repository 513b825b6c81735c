"""Auction state machine. Only bid placement moves the price, and only upward."""

from dataclasses import replace
from decimal import Decimal

from src.av_auction.domain.models import AuctionState
from src.av_catalog.domain.models import Listing
from src.av_common.cents import SubCentAmountError, cents_to_display, parse_amount_to_cents
from src.av_common.errors import InvalidBidError


def open_auction(listing: Listing) -> AuctionState:
    return AuctionState(listing=listing, current_price_cents=listing.price_cents)


def stage_bid(auction: AuctionState, raw: str) -> AuctionState:
    return replace(auction, pending_bid=raw)


def place_bid(
    auction: AuctionState,
    amount: str | int | Decimal | None = None,
    bidder_label: str = "You",
) -> AuctionState:
    """Accept the bid iff it is exact to the cent and strictly above the current price.

    ``amount=None`` places the pending bid. On success the pending input is
    cleared; on failure InvalidBidError is raised and nothing changes.
    """
    raw = auction.pending_bid if amount is None else amount
    minimum = cents_to_display(auction.current_price_cents)
    try:
        bid_cents = parse_amount_to_cents(raw)
    except SubCentAmountError:
        raise InvalidBidError(minimum, "Bid must have at most 2 decimal places") from None
    except (TypeError, ValueError):
        raise InvalidBidError(minimum) from None
    if bid_cents <= auction.current_price_cents:
        raise InvalidBidError(minimum)
    return replace(
        auction,
        current_price_cents=bid_cents,
        leading_bidder_label=bidder_label,
        pending_bid="",
    )


def suggested_minimum_cents(auction: AuctionState, increment_cents: int) -> int:
    """Placeholder hint for the next bid; only strict increase is enforced."""
    return auction.current_price_cents + increment_cents
