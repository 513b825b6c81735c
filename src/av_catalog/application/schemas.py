"""Pydantic schemas for av_catalog API requests/responses.

Draft fields are accepted as plain strings (empty allowed) so that the
catalog engine, not request parsing, decides what is missing.
"""

from pydantic import BaseModel

from src.av_catalog.domain.models import Listing, ListingDraft
from src.av_common.cents import cents_to_display


class AddListingRequest(BaseModel):
    name: str = ""
    price: str = ""
    description: str = ""
    artist_name: str = ""
    image_ref: str | None = None

    def to_draft(self) -> ListingDraft:
        return ListingDraft(
            name=self.name,
            price=self.price,
            description=self.description,
            artist_name=self.artist_name,
            image_ref=self.image_ref,
        )


class ListingResponse(BaseModel):
    id: int
    name: str
    price_cents: int
    price_display: str
    description: str
    image_ref: str
    artist_name: str

    @classmethod
    def from_domain(cls, listing: Listing) -> "ListingResponse":
        return cls(
            id=listing.id,
            name=listing.name,
            price_cents=listing.price_cents,
            price_display=cents_to_display(listing.price_cents),
            description=listing.description,
            image_ref=listing.image_ref,
            artist_name=listing.artist_name,
        )


class CatalogResponse(BaseModel):
    items: list[ListingResponse]
