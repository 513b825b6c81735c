"""Cart domain models: pure dataclasses, no framework dependency."""

from dataclasses import dataclass, field

from src.av_catalog.domain.models import Listing


@dataclass(frozen=True)
class CartLine:
    listing: Listing  # live reference, not a snapshot
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"CartLine quantity must be >= 1, got {self.quantity}")

    @property
    def line_total_cents(self) -> int:
        return self.listing.price_cents * self.quantity


@dataclass(frozen=True)
class Cart:
    """At most one line per listing id, in the order listings were first added."""

    lines: tuple[CartLine, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.lines
