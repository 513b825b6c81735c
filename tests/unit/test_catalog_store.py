"""Unit tests for the catalog store transitions."""

import pytest

from src.av_catalog.domain.models import Catalog, Listing, ListingDraft
from src.av_catalog.engine.catalog import add_listing, get_listing, list_listings
from src.av_common.errors import ListingNotFoundError, ListingValidationError

PLACEHOLDER = "https://example.com/placeholder.jpg"


def _listing(listing_id: int, price_cents: int = 100_000) -> Listing:
    return Listing(
        id=listing_id,
        name=f"Piece {listing_id}",
        price_cents=price_cents,
        description="desc",
        image_ref="img",
        artist_name="Artist",
    )


def _draft(**kwargs: str | None) -> ListingDraft:
    defaults: dict[str, str | None] = {
        "name": "Night Garden",
        "price": "2500",
        "description": "Oil on canvas",
        "artist_name": "Mira Holt",
        "image_ref": None,
    }
    defaults.update(kwargs)
    return ListingDraft(**defaults)  # type: ignore[arg-type]


class TestListListings:
    def test_preserves_insertion_order(self) -> None:
        catalog = Catalog(listings=(_listing(3), _listing(1), _listing(2)))
        assert [li.id for li in list_listings(catalog)] == [3, 1, 2]

    def test_empty(self) -> None:
        assert list_listings(Catalog()) == ()


class TestGetListing:
    def test_found(self) -> None:
        catalog = Catalog(listings=(_listing(1), _listing(2)))
        assert get_listing(catalog, 2).id == 2

    def test_missing_raises(self) -> None:
        with pytest.raises(ListingNotFoundError):
            get_listing(Catalog(listings=(_listing(1),)), 99)


class TestAddListing:
    def test_first_listing_gets_id_one(self) -> None:
        catalog, listing = add_listing(Catalog(), _draft(), PLACEHOLDER)
        assert listing.id == 1
        assert catalog.listings == (listing,)

    def test_id_is_max_plus_one(self) -> None:
        catalog = Catalog(listings=(_listing(1), _listing(7), _listing(3)))
        new_catalog, listing = add_listing(catalog, _draft(), PLACEHOLDER)
        assert listing.id == 8
        assert new_catalog.listings[-1] is listing

    def test_parses_price_to_cents(self) -> None:
        _, listing = add_listing(Catalog(), _draft(price="2500.50"), PLACEHOLDER)
        assert listing.price_cents == 250_050

    def test_placeholder_image_when_omitted(self) -> None:
        _, listing = add_listing(Catalog(), _draft(image_ref=None), PLACEHOLDER)
        assert listing.image_ref == PLACEHOLDER

    def test_placeholder_image_when_blank(self) -> None:
        _, listing = add_listing(Catalog(), _draft(image_ref="  "), PLACEHOLDER)
        assert listing.image_ref == PLACEHOLDER

    def test_keeps_given_image(self) -> None:
        _, listing = add_listing(Catalog(), _draft(image_ref="https://x/y.png"), PLACEHOLDER)
        assert listing.image_ref == "https://x/y.png"

    def test_strips_text_fields(self) -> None:
        _, listing = add_listing(Catalog(), _draft(name="  Dune  "), PLACEHOLDER)
        assert listing.name == "Dune"

    def test_original_catalog_untouched(self) -> None:
        catalog = Catalog(listings=(_listing(1),))
        add_listing(catalog, _draft(), PLACEHOLDER)
        assert len(catalog) == 1

    def test_empty_name_rejected_and_catalog_unchanged(self) -> None:
        catalog = Catalog(listings=(_listing(1),))
        with pytest.raises(ListingValidationError) as exc_info:
            add_listing(catalog, _draft(name="", price="10"), PLACEHOLDER)
        assert exc_info.value.fields == {"name": "required"}
        assert len(catalog) == 1

    @pytest.mark.parametrize("field", ["name", "description", "artist_name", "price"])
    def test_each_required_field(self, field: str) -> None:
        with pytest.raises(ListingValidationError) as exc_info:
            add_listing(Catalog(), _draft(**{field: ""}), PLACEHOLDER)
        assert exc_info.value.fields[field] == "required"

    def test_whitespace_only_counts_as_missing(self) -> None:
        with pytest.raises(ListingValidationError):
            add_listing(Catalog(), _draft(artist_name="   "), PLACEHOLDER)

    @pytest.mark.parametrize("price", ["abc", "nan", "inf", "1e"])
    def test_non_numeric_price(self, price: str) -> None:
        with pytest.raises(ListingValidationError) as exc_info:
            add_listing(Catalog(), _draft(price=price), PLACEHOLDER)
        assert exc_info.value.fields["price"] == "must be a number"

    @pytest.mark.parametrize("price", ["0", "-5", "0.00", "-0.01"])
    def test_non_positive_price(self, price: str) -> None:
        with pytest.raises(ListingValidationError) as exc_info:
            add_listing(Catalog(), _draft(price=price), PLACEHOLDER)
        assert exc_info.value.fields["price"] == "must be greater than zero"

    @pytest.mark.parametrize("price", ["0.001", "12.345", "2500.005"])
    def test_sub_cent_price_rejected(self, price: str) -> None:
        with pytest.raises(ListingValidationError) as exc_info:
            add_listing(Catalog(), _draft(price=price), PLACEHOLDER)
        assert exc_info.value.fields["price"] == "at most 2 decimal places"

    @pytest.mark.parametrize("price", ["1e999999", "1e20"])
    def test_out_of_range_price_rejected(self, price: str) -> None:
        with pytest.raises(ListingValidationError) as exc_info:
            add_listing(Catalog(), _draft(price=price), PLACEHOLDER)
        assert exc_info.value.fields["price"] == "must be a number"

    def test_reports_every_bad_field(self) -> None:
        with pytest.raises(ListingValidationError) as exc_info:
            add_listing(Catalog(), ListingDraft(), PLACEHOLDER)
        assert set(exc_info.value.fields) == {"name", "price", "description", "artist_name"}
