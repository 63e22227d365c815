"""
LoadProgram Use Case.

Fetches a stored program and hydrates it into an editable document.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import PersistenceFailure
from application.ports import ProgramRepository
from domain.converters import DayNumbering, hydrate_program
from domain.ids import IdGenerator, default_id_generator
from domain.models import ProgramDocument

logger = logging.getLogger(__name__)


@dataclass
class LoadProgramResult:
    """Result of the LoadProgram use case execution."""

    success: bool
    document: Optional[ProgramDocument] = None
    error: Optional[str] = None
    not_found: bool = False
    retryable: bool = False


class LoadProgramUseCase:
    """
    Use case for opening a stored program for editing.

    Usage:
        >>> use_case = LoadProgramUseCase(program_repo=program_repo)
        >>> result = await use_case.execute("program-123")
        >>> if result.success:
        ...     print(result.document.title)
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        numbering: DayNumbering = DayNumbering.MONDAY_FIRST,
        ids: Optional[IdGenerator] = None,
    ) -> None:
        self._program_repo = program_repo
        self._numbering = numbering
        self._ids = ids or default_id_generator()

    async def execute(self, program_id: str) -> LoadProgramResult:
        try:
            wire = await self._program_repo.get(program_id)
            if wire is None:
                logger.warning(f"Program not found: {program_id}")
                return LoadProgramResult(
                    success=False,
                    error=f"Program {program_id} not found",
                    not_found=True,
                )

            document = hydrate_program(wire, self._numbering, self._ids)
            logger.info(f"Loaded program {program_id}: {document}")
            return LoadProgramResult(success=True, document=document)

        except PersistenceFailure as e:
            logger.error(f"Program load failed: {e}")
            return LoadProgramResult(success=False, error=e.message, retryable=True)

        except Exception as e:
            logger.exception(f"LoadProgram use case failed: {e}")
            return LoadProgramResult(success=False, error=str(e))
