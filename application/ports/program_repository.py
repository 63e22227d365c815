"""
Program Repository Interface (Port).

Defines the persistence boundary for programs. The store accepts the flat
wire format produced by the normalization pass and answers with its
canonical copy. A save is all-or-nothing.
"""
from typing import Optional, Protocol

from domain.models import WireProgram


class ProgramRepository(Protocol):
    """
    Abstract interface for program persistence.

    Implementations raise ``application.exceptions.PersistenceFailure``
    (or a subclass) when a request cannot be completed.
    """

    async def save(self, program: WireProgram) -> WireProgram:
        """
        Create or update a program.

        A program without an id is created; otherwise the stored program
        with that id is replaced.

        Args:
            program: Normalized program

        Returns:
            The stored program as the server now holds it (with its id).
        """
        ...

    async def get(self, program_id: str) -> Optional[WireProgram]:
        """
        Get a program by id.

        Returns:
            The stored program, or None if it does not exist.
        """
        ...
