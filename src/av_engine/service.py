"""MarketplaceService: holds the one in-process session and applies transitions.

The held state is replaced only when a transition returns; a raised AppError
leaves it exactly as it was.
"""

import logging
import random
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from config.settings import Settings
from config.settings import settings as default_settings
from src.av_auction.domain.models import AuctionState
from src.av_cart.domain.models import Cart
from src.av_catalog.domain.models import Listing, ListingDraft
from src.av_common.enums import Role
from src.av_common.errors import AppError
from src.av_engine import transitions
from src.av_engine.state import MarketplaceState, Transition, initial_state
from src.av_order.domain.models import Order
from src.av_session.domain.models import SessionState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MarketplaceService:
    def __init__(
        self,
        settings: Settings | None = None,
        state: MarketplaceState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._state = state or initial_state(self._settings, rng)
        self.last_message = ""

    @property
    def state(self) -> MarketplaceState:
        return self._state

    @property
    def settings(self) -> Settings:
        return self._settings

    def _apply(self, action: str, step: Callable[[MarketplaceState], Transition[T]]) -> T:
        try:
            result = step(self._state)
        except AppError as exc:
            logger.info("Rejected %s: code=%d %s", action, exc.code, exc.message)
            raise
        self._state = result.state
        self.last_message = result.message
        if result.message:
            logger.info("Accepted %s: %s", action, result.message)
        return result.value

    # --- Session ---

    def login(self, email: str, password: str, role: Role | str | None) -> SessionState:
        return self._apply("login", lambda s: transitions.login(s, email, password, role))

    def logout(self) -> SessionState:
        return self._apply("logout", transitions.logout)

    # --- Catalog ---

    def list_catalog(self) -> tuple[Listing, ...]:
        return self._apply("list_catalog", transitions.list_catalog)

    def get_listing(self, listing_id: int) -> Listing:
        return self._apply("get_listing", lambda s: transitions.get_listing(s, listing_id))

    def add_listing(self, draft: ListingDraft) -> Listing:
        placeholder = self._settings.PLACEHOLDER_IMAGE_URL
        return self._apply("add_listing", lambda s: transitions.add_listing(s, draft, placeholder))

    # --- Cart ---

    def view_cart(self) -> Cart:
        return self._apply("view_cart", transitions.view_cart)

    def add_to_cart(self, listing_id: int) -> Cart:
        return self._apply("add_to_cart", lambda s: transitions.add_to_cart(s, listing_id))

    def adjust_cart_quantity(self, listing_id: int, delta: int) -> Cart:
        return self._apply(
            "adjust_cart_quantity",
            lambda s: transitions.adjust_cart_quantity(s, listing_id, delta),
        )

    # --- Orders ---

    def checkout(self, now: datetime | None = None) -> Order:
        return self._apply("checkout", lambda s: transitions.checkout(s, now))

    def buy_now(self, listing_id: int, now: datetime | None = None) -> Order:
        return self._apply("buy_now", lambda s: transitions.buy_now(s, listing_id, now))

    def order_history(self) -> tuple[Order, ...]:
        return self._apply("order_history", transitions.order_history)

    # --- Auction ---

    def view_auction(self) -> AuctionState:
        return self._apply("view_auction", transitions.view_auction)

    def stage_bid(self, raw: str) -> AuctionState:
        return self._apply("stage_bid", lambda s: transitions.stage_bid(s, raw))

    def place_bid(self, amount: str | None = None) -> AuctionState:
        label = self._settings.SELF_BIDDER_LABEL
        return self._apply("place_bid", lambda s: transitions.place_bid(s, amount, label))
