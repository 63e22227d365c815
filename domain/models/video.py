"""
Video descriptor returned by the video library.
"""

from typing import Optional

from pydantic import BaseModel, Field


class VideoDescriptor(BaseModel):
    """
    A video as described by the video library at query time.

    The editor copies these fields into a VideoItem when the video is
    inserted; later changes in the library are not reflected.
    """

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    duration: Optional[str] = None
    url: Optional[str] = None
    thumbnail: Optional[str] = None

    model_config = {"frozen": True}
