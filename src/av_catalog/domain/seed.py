"""Seed inventory for a fresh session.

Gallery prices are drawn per session as whole dollars; the auction piece has a
fixed starting price and lives outside the catalog.
"""

import random

from src.av_catalog.domain.models import Catalog, Listing
from src.av_common.cents import dollars_to_cents

AUCTION_LISTING_ID = 999

# (name, description, image_ref, artist_name)
_GALLERY: tuple[tuple[str, str, str, str], ...] = (
    (
        "Celestial Dreams",
        "An ethereal abstract piece exploring the cosmos through vibrant purples and golds. "
        "This masterpiece captures the infinite beauty of space.",
        "https://images.unsplash.com/photo-1561214115-f2f134cc4912?w=800&h=600&fit=crop",
        "Luna Martinez",
    ),
    (
        "Urban Symphony",
        "A contemporary cityscape that blends architectural precision with artistic expression. "
        "The interplay of light and shadow creates a mesmerizing rhythm.",
        "https://images.unsplash.com/photo-1547826039-bfc35e0f1ea8?w=800&h=600&fit=crop",
        "Marcus Chen",
    ),
    (
        "Ocean Reverie",
        "Fluid acrylic waves in deep teals and aquamarines that seem to move before your eyes. "
        "A tribute to the ocean's eternal dance.",
        "https://images.unsplash.com/photo-1579783902614-a3fb3927b6a5?w=800&h=600&fit=crop",
        "Sofia Ramirez",
    ),
    (
        "Golden Hour",
        "Warm amber and gold tones capture that magical moment when day transitions to night. "
        "A celebration of light and transformation.",
        "https://images.unsplash.com/photo-1549887534-1541e9326642?w=800&h=600&fit=crop",
        "David Park",
    ),
    (
        "Violet Cascade",
        "Layers of rich purples and violets create a waterfall of color. "
        "This piece invites deep contemplation and inner peace.",
        "https://images.unsplash.com/photo-1541961017774-22349e4a1262?w=800&h=600&fit=crop",
        "Isabella Torres",
    ),
    (
        "Crimson Passion",
        "Bold strokes of red and orange that pulse with energy and emotion. "
        "A powerful statement piece for any collection.",
        "https://images.unsplash.com/photo-1578301978018-3005759f48f7?w=800&h=600&fit=crop",
        "Rafael Santos",
    ),
)


def build_seed_catalog(
    rng: random.Random,
    min_dollars: int = 1000,
    max_dollars: int = 5000,
) -> Catalog:
    """Six gallery listings, ids 1..6, prices uniform in [min_dollars, max_dollars]."""
    if not (0 < min_dollars <= max_dollars):
        raise ValueError(
            f"Seed price range must satisfy 0 < min <= max, got [{min_dollars}, {max_dollars}]"
        )
    listings = tuple(
        Listing(
            id=i,
            name=name,
            price_cents=dollars_to_cents(rng.randint(min_dollars, max_dollars)),
            description=description,
            image_ref=image_ref,
            artist_name=artist_name,
        )
        for i, (name, description, image_ref, artist_name) in enumerate(_GALLERY, start=1)
    )
    return Catalog(listings=listings)


def build_auction_listing() -> Listing:
    return Listing(
        id=AUCTION_LISTING_ID,
        name="The Masterpiece Collection",
        price_cents=dollars_to_cents(15_000),
        description=(
            "An exclusive limited edition piece from our most celebrated artist. "
            "This rare work combines traditional techniques with modern innovation, "
            "creating a timeless masterpiece that will only increase in value. "
            "Only one available."
        ),
        image_ref="https://images.unsplash.com/photo-1536924940846-227afb31e2a5?w=800&h=600&fit=crop",
        artist_name="Alessandro Fontana",
    )
