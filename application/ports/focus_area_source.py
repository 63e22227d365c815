"""
Focus Area Source Interface (Port).
"""
from typing import List, Protocol

from domain.models import FocusAreaTag


class FocusAreaSource(Protocol):
    """Read-mostly list of focus-area tags in use."""

    async def list_focus_areas(self) -> List[FocusAreaTag]:
        """Return known focus-area tags with their usage counts."""
        ...
