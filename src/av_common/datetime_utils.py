"""UTC timestamps for order creation and their short display form."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def date_display(moment: datetime) -> str:
    """Calendar date shown on order history cards: 2026-10-16 -> 'Oct 16, 2026'."""
    return f"{moment:%b} {moment.day}, {moment.year}"
