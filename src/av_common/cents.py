"""Integer arithmetic utilities for cents-based prices.

All prices, totals and bids inside the engine are int cents. Textual amounts
coming from the caller are converted once, at the boundary, and only when they
are exact to the cent: nothing is rounded, so a stored price always equals the
amount the caller typed.
"""

from decimal import Decimal, DecimalException

# Amounts of 10**13 dollars or more are out of range
MAX_AMOUNT_DIGITS = 13


class SubCentAmountError(ValueError):
    """The amount has a non-zero digit beyond the second decimal place."""


def parse_amount_to_cents(raw: str | int | Decimal) -> int:
    """Parse a dollar amount into cents: '1500' -> 150000, '12.34' -> 1234.

    Raises SubCentAmountError for amounts such as '12.345', and ValueError for
    empty, non-numeric, NaN, infinite or out-of-range input. The sign is
    preserved; callers decide whether zero/negative is allowed.
    """
    if isinstance(raw, bool):
        raise ValueError(f"Not a numeric amount: {raw!r}")
    try:
        if isinstance(raw, str):
            text = raw.strip()
            if not text:
                raise ValueError("Amount is empty")
            value = Decimal(text)
        else:
            value = Decimal(raw)
    except DecimalException:
        raise ValueError(f"Not a numeric amount: {raw!r}") from None
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {raw!r}")
    if not value:
        return 0
    if value.adjusted() >= MAX_AMOUNT_DIGITS:
        raise ValueError(f"Amount out of range: {raw!r}")

    # Shift the digit tuple two places left using ints only; no context rounding
    sign, digits, exponent = value.as_tuple()
    shift = int(exponent) + 2
    if shift < 0:
        if any(digits[shift:]):
            raise SubCentAmountError(f"Amount has more than 2 decimal places: {raw!r}")
        digits = digits[:shift]
        shift = 0
    cents = int("".join(map(str, digits)) or "0") * 10**shift
    return -cents if sign else cents


def dollars_to_cents(dollars: int) -> int:
    return dollars * 100


def cents_to_display(cents: int) -> str:
    """Convert cents to display string: 6500 -> '$65.00', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"${cents // 100:,}.{cents % 100:02d}"
