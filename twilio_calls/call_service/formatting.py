"""
Projection of call records into display rows.
"""

from decimal import Decimal, ROUND_HALF_UP

from moneyed import Money
from moneyed.l10n import format_money

from ..shared.config import DEFAULT_LOCALE
from ..shared.models import CallRecord, DisplayRow
from ..shared.utils import capitalize_first, format_timestamp

MINOR_UNITS_PER_MAJOR = 100

TABLE_HEADERS = (
    'Call ID',
    'Created On',
    'Recipient',
    'Status',
    'Started At',
    'Ended At',
    'Price',
    'Price Unit'
)


def to_minor_units(amount: Decimal) -> int:
    """Absolute value of ``amount`` in minor units, e.g. cents."""
    scaled = abs(Decimal(amount)) * MINOR_UNITS_PER_MAJOR
    return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))


def format_call_price(call: CallRecord, locale: str = DEFAULT_LOCALE) -> str:
    """
    Render the price of a call for display, e.g. ``$12.50``.

    Twilio reports charges as negative amounts; the sign is dropped. The
    currency symbol, grouping and decimal separator follow ``locale`` and the
    ISO currency of the call.

    Raises:
        moneyed.classes.CurrencyDoesNotExist: If the price unit is not an ISO currency.
    """
    if call.price is None or not call.price_unit:
        return ""

    minor_units = to_minor_units(call.price)
    money = Money(Decimal(minor_units) / MINOR_UNITS_PER_MAJOR, call.price_unit)
    return format_money(money, locale=locale)


def to_display_row(call: CallRecord, short_date: bool = False,
                   locale: str = DEFAULT_LOCALE) -> DisplayRow:
    return DisplayRow(
        call_id=call.sid,
        created_on=format_timestamp(call.date_created, short_date),
        recipient=call.to,
        status=capitalize_first(call.status),
        started_at=format_timestamp(call.start_time, short_date),
        ended_at=format_timestamp(call.end_time, short_date),
        price=format_call_price(call, locale),
        price_unit=call.price_unit or ""
    )
