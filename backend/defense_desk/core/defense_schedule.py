"""Defense Schedule: expected defense date derived from a session's start date.

Invariants:
    - Result is the second Saturday of the month three calendar months after start
    - Pure function of the explicit input date (never reads "today")
    - Total over all valid dates, including year boundaries and leap years

Design Decisions:
    - Weekday computed in a Sunday-first week (Sunday=0 ... Saturday=6) to keep the
      (6 - weekday + 7) % 7 rule readable; date.weekday() is Monday-first
    - A datetime input is reduced to its date part: the expected date is a calendar day
"""

import calendar
from datetime import date, datetime, timedelta

MONTHS_UNTIL_DEFENSE = 3
SATURDAY = 6  # Sunday-first index


def add_months(value: date, months: int) -> date:
    """Shift by whole calendar months, clamping the day to the target month's end."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def sunday_first_weekday(value: date) -> int:
    return (value.weekday() + 1) % 7


def compute_expected_date(start_date: date) -> date:
    """Second Saturday of the month three months after start_date."""
    if isinstance(start_date, datetime):
        start_date = start_date.date()
    target_month = add_months(start_date, MONTHS_UNTIL_DEFENSE)
    first_of_month = target_month.replace(day=1)
    weekday = sunday_first_weekday(first_of_month)
    days_until_first_saturday = (SATURDAY - weekday + 7) % 7
    first_saturday = first_of_month + timedelta(days=days_until_first_saturday)
    return first_saturday + timedelta(days=7)
