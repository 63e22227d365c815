"""
Collaborator Interfaces (Ports) for the program editor.

This package defines abstract interfaces that decouple the editor from
the remote services it talks to. Implementations are provided in the
infrastructure layer; in-memory fakes live in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the editor needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ProgramRepository

    class ProgramService:
        def __init__(self, program_repo: ProgramRepository):
            self.program_repo = program_repo

        async def save(self, wire):
            return await self.program_repo.save(wire)
"""

# Program persistence
from application.ports.program_repository import ProgramRepository

# Routine catalog
from application.ports.routine_catalog import RoutineCatalog

# Video library
from application.ports.video_source import VideoSource

# Focus-area tags
from application.ports.focus_area_source import FocusAreaSource

__all__ = [
    "ProgramRepository",
    "RoutineCatalog",
    "VideoSource",
    "FocusAreaSource",
]
