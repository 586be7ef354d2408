"""Field limits and helpers shared by the schemas."""

from datetime import datetime, timezone

# Input precision. With these bounds every derived amount has at most
# 12 decimals and is stored exactly.
QUANTITY_DIGITS, QUANTITY_PLACES = 10, 4
PRICE_DIGITS, PRICE_PLACES = 12, 4
VAT_RATE_DIGITS, VAT_RATE_PLACES = 5, 2
AMOUNT_DIGITS, AMOUNT_PLACES = 38, 12


def ensure_utc(value: datetime | None) -> datetime | None:
    """Express ``value`` in UTC; naive values are taken to be UTC already.

    SQLite drops the offset of stored datetimes, so dates are converted to
    UTC before they are written and labelled UTC again when read back.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
