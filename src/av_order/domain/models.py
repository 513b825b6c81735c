"""Order domain models: pure dataclasses, no framework dependency.

Order lines are snapshots taken at purchase time; later catalog changes never
reach them.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class OrderLine:
    listing_id: int
    name: str
    unit_price_cents: int
    image_ref: str
    artist_name: str
    quantity: int

    @property
    def line_total_cents(self) -> int:
        return self.unit_price_cents * self.quantity


@dataclass(frozen=True)
class Order:
    id: int
    lines: tuple[OrderLine, ...]
    created_at: datetime
    total_cents: int = field(init=False)

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("Order must have at least one line")
        object.__setattr__(self, "total_cents", sum(ln.line_total_cents for ln in self.lines))


@dataclass(frozen=True)
class OrderLedger:
    """Append-only, oldest first."""

    orders: tuple[Order, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.orders)
