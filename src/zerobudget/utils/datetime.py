# File: src/zerobudget/utils/datetime.py
"""Datetime, month and money helpers shared by budgets, incomes and expenses."""

import calendar
from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union


def now_utc() -> datetime:
    """Get current UTC datetime as NAIVE for database storage."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_month_string(value: date) -> str:
    """Format a date as a YYYY-MM month key."""
    return f"{value.year:04d}-{value.month:02d}"


def get_current_month() -> str:
    """Current month as YYYY-MM (UTC)."""
    return get_month_string(now_utc())


def parse_month_string(month: str) -> date:
    """
    Parse a YYYY-MM month key into the first day of that month.

    Raises:
        ValueError: If the string is not a valid YYYY-MM month
    """
    try:
        year_str, month_str = month.split("-")
        year, month_number = int(year_str), int(month_str)
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Invalid month format (expected YYYY-MM): {month!r}") from e

    if len(year_str) != 4 or not 1 <= month_number <= 12:
        raise ValueError(f"Invalid month format (expected YYYY-MM): {month!r}")

    return date(year, month_number, 1)


def get_month_date_range(month: str) -> tuple[datetime, datetime]:
    """First and last instant of a YYYY-MM month."""
    first_day = parse_month_string(month)
    last_day_number = calendar.monthrange(first_day.year, first_day.month)[1]
    start = datetime.combine(first_day, time.min)
    end = datetime.combine(first_day.replace(day=last_day_number), time.max)
    return start, end


def format_currency(amount: Union[Decimal, float, int]) -> str:
    """Format an amount as US dollars, e.g. 1234.5 -> $1,234.50."""
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def numeric_to_number(value: Optional[Union[str, Decimal]]) -> float:
    """Convert a NUMERIC column value to float, treating NULL/empty as 0."""
    if value is None or value == "":
        return 0.0
    return float(value)
