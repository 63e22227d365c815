"""
Domain converters between the editable document and its stored form.

- normalize_program: ProgramDocument -> WireProgram (save time)
- hydrate_program: WireProgram / dict -> ProgramDocument (load, re-hydrate)
- day_number / weekday_for: the single weekday <-> day number mapping

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import hydrate_program, normalize_program
    >>> wire = normalize_program(doc)
    >>> payload = wire.to_payload()
    >>> doc = hydrate_program(payload)
"""

from domain.converters.hydrate_program import hydrate_program
from domain.converters.normalize_program import (
    REST_DAY_DESCRIPTION,
    REST_DAY_TITLE,
    item_to_drill,
    normalize_day,
    normalize_program,
    normalize_week,
    rest_drill,
)
from domain.converters.weekdays import (
    DayNumbering,
    day_number,
    weekday_for,
    weekdays_in_day_order,
)

__all__ = [
    "normalize_program",
    "normalize_week",
    "normalize_day",
    "item_to_drill",
    "rest_drill",
    "hydrate_program",
    "DayNumbering",
    "day_number",
    "weekday_for",
    "weekdays_in_day_order",
    "REST_DAY_TITLE",
    "REST_DAY_DESCRIPTION",
]
