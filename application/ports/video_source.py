"""
Video Source Interface (Port).
"""
from typing import List, Protocol

from domain.models import VideoDescriptor


class VideoSource(Protocol):
    """Searchable video library."""

    async def search(self, query: str) -> List[VideoDescriptor]:
        """
        Search or browse the library.

        Args:
            query: Free-text query. An empty query browses all videos.

        Returns:
            Matching descriptors, best match first.
        """
        ...
