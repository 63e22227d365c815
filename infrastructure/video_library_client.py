"""
HTTP client for the video library.

Implements the VideoSource port.
"""

from typing import Any, List

from application.exceptions import CollaboratorError
from domain.models import VideoDescriptor
from infrastructure.api_client import JsonApiClient


class VideoLibraryUnavailable(CollaboratorError):
    """Raised when the video library is unavailable."""

    pass


class VideoLibraryAPIError(CollaboratorError):
    """Raised when the video library returns an error."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)


class VideoLibraryClient(JsonApiClient):
    """HTTP client for video search."""

    service_name = "Video-Library"
    unavailable_error = VideoLibraryUnavailable
    api_error = VideoLibraryAPIError

    async def search(self, query: str) -> List[VideoDescriptor]:
        """
        Search the library.

        The response is either a list of videos or an object with a
        ``videos`` list.
        """
        response = await self._send("get", "/videos/search", params={"q": query})
        return self._parse(response, _videos)


def _videos(data: Any) -> List[VideoDescriptor]:
    if isinstance(data, dict):
        data = data.get("videos", [])
    return [VideoDescriptor.model_validate(video) for video in data]
