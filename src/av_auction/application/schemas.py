"""Pydantic schemas for av_auction API requests/responses."""

from pydantic import BaseModel

from src.av_auction.domain.models import AuctionState
from src.av_auction.engine.bidding import suggested_minimum_cents
from src.av_catalog.application.schemas import ListingResponse
from src.av_common.cents import cents_to_display


class StageBidRequest(BaseModel):
    # Kept as text: the auction engine owns numeric parsing and its error
    amount: str


class PlaceBidRequest(BaseModel):
    # None places the staged draft
    amount: str | None = None


class AuctionResponse(BaseModel):
    listing: ListingResponse
    starting_price_cents: int
    current_price_cents: int
    current_price_display: str
    leading_bidder_label: str
    suggested_minimum_cents: int
    pending_bid: str

    @classmethod
    def from_domain(cls, auction: AuctionState, increment_cents: int) -> "AuctionResponse":
        return cls(
            listing=ListingResponse.from_domain(auction.listing),
            starting_price_cents=auction.starting_price_cents,
            current_price_cents=auction.current_price_cents,
            current_price_display=cents_to_display(auction.current_price_cents),
            leading_bidder_label=auction.leading_bidder_label,
            suggested_minimum_cents=suggested_minimum_cents(auction, increment_cents),
            pending_bid=auction.pending_bid,
        )
