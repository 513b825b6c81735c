"""Catalog domain models: pure dataclasses, no framework dependency."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Listing:
    id: int
    name: str
    price_cents: int
    description: str
    image_ref: str
    artist_name: str


@dataclass(frozen=True)
class ListingDraft:
    """Seller input for a new listing, exactly as typed (price is unparsed)."""

    name: str = ""
    price: str | int | Decimal = ""
    description: str = ""
    artist_name: str = ""
    image_ref: str | None = None


@dataclass(frozen=True)
class Catalog:
    """Ordered, grow-only set of listings."""

    listings: tuple[Listing, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.listings)
