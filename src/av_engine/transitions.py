"""Pure marketplace transitions.

Each function takes the current MarketplaceState and returns a Transition with
a new state. Failures raise an AppError subclass before any new state exists,
so the caller's state can never be half-updated. Role checks run first.
"""

from dataclasses import replace
from datetime import datetime

from src.av_auction.domain.models import AuctionState
from src.av_auction.engine import bidding
from src.av_cart.domain.models import Cart
from src.av_cart.engine import cart as cart_ops
from src.av_catalog.domain.models import Listing, ListingDraft
from src.av_catalog.engine import catalog as catalog_ops
from src.av_common.datetime_utils import utc_now
from src.av_common.enums import Role
from src.av_engine.state import MarketplaceState, Transition
from src.av_order.domain.models import Order
from src.av_order.engine import ledger as ledger_ops
from src.av_session.domain.models import SessionState
from src.av_session.engine import gate

# --- Session ---


def login(
    state: MarketplaceState, email: str, password: str, role: Role | str | None
) -> Transition[SessionState]:
    session = gate.login(state.session, email, password, role)
    return Transition(
        state=replace(state, session=session),
        value=session,
        message=f"Welcome to ArtVault, {session.email}!",
    )


def logout(state: MarketplaceState) -> Transition[SessionState]:
    """Ends the session and drops the cart; catalog, orders and auction stay."""
    session = gate.logout(state.session)
    return Transition(
        state=replace(state, session=session, cart=cart_ops.clear_cart(state.cart)),
        value=session,
        message="Logged out successfully",
    )


# --- Catalog ---


def list_catalog(state: MarketplaceState) -> Transition[tuple[Listing, ...]]:
    gate.require_logged_in(state.session)
    return Transition(state=state, value=catalog_ops.list_listings(state.catalog))


def get_listing(state: MarketplaceState, listing_id: int) -> Transition[Listing]:
    gate.require_logged_in(state.session)
    return Transition(state=state, value=catalog_ops.get_listing(state.catalog, listing_id))


def add_listing(
    state: MarketplaceState, draft: ListingDraft, placeholder_image: str
) -> Transition[Listing]:
    gate.require_role(state.session, Role.SELLER)
    catalog, listing = catalog_ops.add_listing(state.catalog, draft, placeholder_image)
    return Transition(
        state=replace(state, catalog=catalog),
        value=listing,
        message="Art piece added successfully!",
    )


# --- Cart ---


def view_cart(state: MarketplaceState) -> Transition[Cart]:
    gate.require_role(state.session, Role.BUYER)
    return Transition(state=state, value=state.cart)


def add_to_cart(state: MarketplaceState, listing_id: int) -> Transition[Cart]:
    gate.require_role(state.session, Role.BUYER)
    listing = catalog_ops.get_listing(state.catalog, listing_id)
    cart = cart_ops.add_item(state.cart, listing)
    return Transition(state=replace(state, cart=cart), value=cart, message="Added to cart!")


def adjust_cart_quantity(state: MarketplaceState, listing_id: int, delta: int) -> Transition[Cart]:
    gate.require_role(state.session, Role.BUYER)
    cart = cart_ops.adjust_quantity(state.cart, listing_id, delta)
    return Transition(state=replace(state, cart=cart), value=cart)


# --- Orders ---


def checkout(state: MarketplaceState, now: datetime | None = None) -> Transition[Order]:
    """Validate, snapshot, append and clear the cart as one state replacement."""
    gate.require_role(state.session, Role.BUYER)
    ledger, order = ledger_ops.checkout(state.ledger, state.cart.lines, now or utc_now())
    return Transition(
        state=replace(state, ledger=ledger, cart=cart_ops.clear_cart(state.cart)),
        value=order,
        message="Order placed successfully!",
    )


def buy_now(state: MarketplaceState, listing_id: int, now: datetime | None = None) -> Transition[Order]:
    """Single-item purchase; the cart is left as it is."""
    gate.require_role(state.session, Role.BUYER)
    listing = catalog_ops.get_listing(state.catalog, listing_id)
    ledger, order = ledger_ops.place_single_item(state.ledger, listing, now or utc_now())
    return Transition(
        state=replace(state, ledger=ledger),
        value=order,
        message="Purchase completed!",
    )


def order_history(state: MarketplaceState) -> Transition[tuple[Order, ...]]:
    gate.require_role(state.session, Role.BUYER)
    return Transition(state=state, value=ledger_ops.history(state.ledger))


# --- Auction ---


def view_auction(state: MarketplaceState) -> Transition[AuctionState]:
    gate.require_logged_in(state.session)
    return Transition(state=state, value=state.auction)


def stage_bid(state: MarketplaceState, raw: str) -> Transition[AuctionState]:
    gate.require_role(state.session, Role.BUYER)
    auction = bidding.stage_bid(state.auction, raw)
    return Transition(state=replace(state, auction=auction), value=auction)


def place_bid(
    state: MarketplaceState, amount: str | None = None, bidder_label: str = "You"
) -> Transition[AuctionState]:
    gate.require_role(state.session, Role.BUYER)
    auction = bidding.place_bid(state.auction, amount, bidder_label=bidder_label)
    return Transition(
        state=replace(state, auction=auction),
        value=auction,
        message="Bid placed successfully!",
    )
