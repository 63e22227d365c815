"""
Scalar-field validation for program documents.

Structural invariants are enforced by the models themselves. The checks
here cover fields that may legitimately be incomplete while a program is
being authored and must be filled before moving past the details step or
saving.
"""

from typing import List

from domain.models import ProgramDocument

TITLE_REQUIRED = "Program title is required"
FOCUS_AREA_REQUIRED = "Focus area is required"
DURATION_REQUIRED = "Duration must be at least 1 week"


def validate_details(doc: ProgramDocument) -> List[str]:
    """
    Return validation messages for the document's scalar fields.

    An empty list means the document may be saved.

    Examples:
        >>> validate_details(doc.with_title(""))
        ['Program title is required']
    """
    errors = []
    if not doc.title.strip():
        errors.append(TITLE_REQUIRED)
    if doc.focus_area is None:
        errors.append(FOCUS_AREA_REQUIRED)
    if doc.duration < 1 or not doc.weeks:
        errors.append(DURATION_REQUIRED)
    return errors
