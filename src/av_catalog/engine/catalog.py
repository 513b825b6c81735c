"""Catalog store transitions. Every function returns a new Catalog; none mutates."""

from src.av_catalog.domain.models import Catalog, Listing, ListingDraft
from src.av_common.cents import SubCentAmountError, parse_amount_to_cents
from src.av_common.errors import ListingNotFoundError, ListingValidationError
from src.av_common.id_generator import next_sequential_id

_REQUIRED_TEXT_FIELDS = ("name", "description", "artist_name")


def list_listings(catalog: Catalog) -> tuple[Listing, ...]:
    """Current catalog in insertion order."""
    return catalog.listings


def get_listing(catalog: Catalog, listing_id: int) -> Listing:
    for listing in catalog.listings:
        if listing.id == listing_id:
            return listing
    raise ListingNotFoundError(listing_id)


def _validate_price(raw: object) -> tuple[int | None, str | None]:
    """Return (price_cents, None) or (None, reason)."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None, "required"
    try:
        cents = parse_amount_to_cents(raw)  # type: ignore[arg-type]
    except SubCentAmountError:
        return None, "at most 2 decimal places"
    except (TypeError, ValueError):
        return None, "must be a number"
    if cents <= 0:
        return None, "must be greater than zero"
    return cents, None


def add_listing(
    catalog: Catalog,
    draft: ListingDraft,
    placeholder_image: str,
) -> tuple[Catalog, Listing]:
    """Validate the draft and append it with id = max(existing) + 1.

    Raises ListingValidationError listing every bad field; the catalog is
    never touched on failure.
    """
    errors: dict[str, str] = {}
    for field_name in _REQUIRED_TEXT_FIELDS:
        value = getattr(draft, field_name)
        if not isinstance(value, str) or not value.strip():
            errors[field_name] = "required"

    price_cents, price_error = _validate_price(draft.price)
    if price_error is not None:
        errors["price"] = price_error

    if errors or price_cents is None:
        raise ListingValidationError(errors)

    image_ref = (draft.image_ref or "").strip() or placeholder_image
    listing = Listing(
        id=next_sequential_id(item.id for item in catalog.listings),
        name=draft.name.strip(),
        price_cents=price_cents,
        description=draft.description.strip(),
        image_ref=image_ref,
        artist_name=draft.artist_name.strip(),
    )
    return Catalog(listings=(*catalog.listings, listing)), listing
