"""Global enums. Status values match the CHECK constraints of the reference schema."""

from enum import Enum


class Role(str, Enum):
    BUYER = "buyer"
    SELLER = "seller"


class SellStatus(str, Enum):
    ACTIVE = "active"
    SOLD_OUT = "sold_out"
    ARCHIVED = "archived"


class AuctionStatus(str, Enum):
    ACTIVE = "active"
    ENDED = "ended"
    CANCELLED = "cancelled"


class OrderSourceType(str, Enum):
    SELL = "sell"
    AUCTION = "auction"


class OrderStatus(str, Enum):
    CREATED = "created"
    PAID = "paid"
    SHIPPED = "shipped"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
