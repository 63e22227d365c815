"""
Infrastructure Layer for the program editor.

This package contains concrete implementations of the collaborator ports,
all built on httpx:
- ProgramAPIClient: ProgramRepository and FocusAreaSource
- RoutineCatalogClient: RoutineCatalog
- VideoLibraryClient: VideoSource
"""

from infrastructure.program_api_client import (
    ProgramAPIClient,
    ProgramAPIError,
    ProgramAPIUnavailable,
)
from infrastructure.routine_catalog_client import (
    RoutineCatalogAPIError,
    RoutineCatalogClient,
    RoutineCatalogUnavailable,
)
from infrastructure.video_library_client import (
    VideoLibraryAPIError,
    VideoLibraryClient,
    VideoLibraryUnavailable,
)

__all__ = [
    "ProgramAPIClient",
    "ProgramAPIError",
    "ProgramAPIUnavailable",
    "RoutineCatalogClient",
    "RoutineCatalogAPIError",
    "RoutineCatalogUnavailable",
    "VideoLibraryClient",
    "VideoLibraryAPIError",
    "VideoLibraryUnavailable",
]
