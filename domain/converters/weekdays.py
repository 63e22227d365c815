"""
Weekday <-> persisted day number conversion.

This is the only place a weekday key is turned into a day number or back.

Two conventions exist in stored programs:

- MONDAY_FIRST (canonical): Mon=1 ... Sun=7, ISO-8601 weekday numbering.
- SUNDAY_FIRST (compatibility): Sun=1 ... Sat=7, for programs written by
  editors that numbered days by their position in a Sunday-first list.

Examples:
    >>> day_number(Weekday.MON)
    1
    >>> day_number(Weekday.SUN)
    7
    >>> day_number(Weekday.SUN, DayNumbering.SUNDAY_FIRST)
    1
    >>> weekday_for(3)
    <Weekday.WED: 'wed'>
"""

from enum import Enum
from typing import Dict, List

from domain.models import WEEKDAYS, Weekday


class DayNumbering(str, Enum):
    """Day-number convention of the persisted format."""

    MONDAY_FIRST = "monday_first"
    SUNDAY_FIRST = "sunday_first"


_MONDAY_FIRST_ORDER = (
    Weekday.MON,
    Weekday.TUE,
    Weekday.WED,
    Weekday.THU,
    Weekday.FRI,
    Weekday.SAT,
    Weekday.SUN,
)

_ORDERS = {
    DayNumbering.MONDAY_FIRST: _MONDAY_FIRST_ORDER,
    DayNumbering.SUNDAY_FIRST: WEEKDAYS,
}

_NUMBERS: Dict[DayNumbering, Dict[Weekday, int]] = {
    numbering: {weekday: index + 1 for index, weekday in enumerate(order)}
    for numbering, order in _ORDERS.items()
}


def day_number(weekday: Weekday, numbering: DayNumbering = DayNumbering.MONDAY_FIRST) -> int:
    """Return the 1..7 day number of ``weekday``."""
    return _NUMBERS[DayNumbering(numbering)][weekday]


def weekday_for(number: int, numbering: DayNumbering = DayNumbering.MONDAY_FIRST) -> Weekday:
    """
    Return the weekday for a 1..7 day number.

    Raises:
        ValueError: If ``number`` is outside 1..7.
    """
    if not 1 <= number <= 7:
        raise ValueError(f"Day number must be between 1 and 7, got {number}")
    return _ORDERS[DayNumbering(numbering)][number - 1]


def weekdays_in_day_order(numbering: DayNumbering = DayNumbering.MONDAY_FIRST) -> List[Weekday]:
    """Weekdays sorted by ascending day number."""
    return list(_ORDERS[DayNumbering(numbering)])
