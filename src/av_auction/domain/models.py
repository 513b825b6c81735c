"""Auction domain model: single live auction, Open state only."""

from dataclasses import dataclass

from src.av_catalog.domain.models import Listing

RESERVE_BIDDER_LABEL = "Current Reserve"  # no real bidder yet


@dataclass(frozen=True)
class AuctionState:
    listing: Listing
    current_price_cents: int  # non-decreasing; strictly increased by each accepted bid
    leading_bidder_label: str = RESERVE_BIDDER_LABEL
    pending_bid: str = ""  # bid input typed but not yet placed

    @property
    def starting_price_cents(self) -> int:
        return self.listing.price_cents

    @property
    def has_bids(self) -> bool:
        return self.leading_bidder_label != RESERVE_BIDDER_LABEL
