"""Sequential integer ids for single-session stores.

``max(existing) + 1`` is only collision-free while one process owns the store.
A shared or persisted store needs random unique tokens instead.
"""

from collections.abc import Iterable


def next_sequential_id(existing_ids: Iterable[int]) -> int:
    """Return max(existing_ids) + 1, or 1 when there are none."""
    return max(existing_ids, default=0) + 1
