"""MarketplaceState: the whole session as one immutable value."""

import random
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from config.settings import Settings
from src.av_auction.domain.models import AuctionState
from src.av_auction.engine.bidding import open_auction
from src.av_cart.domain.models import Cart
from src.av_catalog.domain.models import Catalog
from src.av_catalog.domain.seed import build_auction_listing, build_seed_catalog
from src.av_order.domain.models import OrderLedger
from src.av_session.domain.models import SessionState

T = TypeVar("T")


@dataclass(frozen=True)
class MarketplaceState:
    catalog: Catalog
    auction: AuctionState
    cart: Cart = field(default_factory=Cart)
    ledger: OrderLedger = field(default_factory=OrderLedger)
    session: SessionState = field(default_factory=SessionState)


@dataclass(frozen=True)
class Transition(Generic[T]):
    """Result of one accepted operation: the next state, its product, a user-facing message."""

    state: MarketplaceState
    value: T
    message: str = ""


def initial_state(settings: Settings, rng: random.Random | None = None) -> MarketplaceState:
    """Seeded catalog, opened auction, empty cart and ledger, logged-out session."""
    if rng is None:
        rng = random.Random(settings.SEED_RANDOM_SEED)
    catalog = build_seed_catalog(
        rng,
        min_dollars=settings.SEED_PRICE_MIN_DOLLARS,
        max_dollars=settings.SEED_PRICE_MAX_DOLLARS,
    )
    return MarketplaceState(catalog=catalog, auction=open_auction(build_auction_listing()))
