"""
bankroll/math_engine.py - ProBet Tracker
========================================
All wager arithmetic lives here. No storage, no charts, no file I/O.

Responsibilities:
- Potential profit for a stake at American odds (rounded to the cent)
- Unit profit (profit on a notional 1-unit stake, unrounded)
- Currency and event-date display formatting

Rounding rule: profits are rounded half-up at the cent boundary using
Decimal, so 0.005 always rounds away from zero regardless of float noise.

Zero odds are a degenerate input. They yield zero profit and never raise.

DO NOT add storage or plotly calls to this file.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENT = Decimal("0.01")

DateLike = Union[str, date]


# ---------------------------------------------------------------------------
# Profit arithmetic
# ---------------------------------------------------------------------------

def unit_profit(american_odds: int) -> float:
    """
    Profit (excluding returned stake) on a winning 1-unit stake.

    Positive odds: odds / 100. Negative odds: 100 / |odds|. Zero: 0.0.

    >>> unit_profit(200)
    2.0
    >>> round(unit_profit(-110), 4)
    0.9091
    >>> unit_profit(0)
    0.0
    """
    if american_odds == 0:
        return 0.0
    if american_odds > 0:
        return american_odds / 100
    return 100 / abs(american_odds)


def round_cents(amount: float) -> float:
    """
    Round a currency amount to 2 decimals, half away from zero.

    >>> round_cents(2.675)
    2.68
    >>> round_cents(-2.675)
    -2.68
    """
    return float(Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP))


def calculate_potential_profit(wager: float, american_odds: int) -> float:
    """
    Profit if the bet wins, excluding the returned stake.

    >>> calculate_potential_profit(100, -110)
    90.91
    >>> calculate_potential_profit(50, 200)
    100.0
    >>> calculate_potential_profit(100, 0)
    0.0
    """
    if american_odds == 0:
        return 0.0
    if american_odds > 0:
        profit = wager * (american_odds / 100)
    else:
        profit = wager * (100 / abs(american_odds))
    return round_cents(profit)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_currency(amount: float) -> str:
    """
    USD display string.

    >>> format_currency(1234.5)
    '$1,234.50'
    >>> format_currency(-20)
    '-$20.00'
    """
    rounded = round_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def parse_event_date(value: DateLike) -> date:
    """
    Parse a YYYY-MM-DD event date. Dates are calendar dates in local time,
    never shifted through UTC.

    Raises ValueError for anything that is not a YYYY-MM-DD string or a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Not an event date: {value!r}")
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def format_event_date(value: DateLike, with_year: bool = True) -> str:
    """
    Display form of an event date. Returns "" for empty or unparseable input.

    >>> format_event_date("2023-11-22")
    'Nov 22, 2023'
    >>> format_event_date("2023-11-02", with_year=False)
    'Nov 2'
    >>> format_event_date("")
    ''
    """
    if not value:
        return ""
    try:
        d = parse_event_date(value)
    except ValueError:
        return ""
    short = f"{d.strftime('%b')} {d.day}"
    return f"{short}, {d.year}" if with_year else short
