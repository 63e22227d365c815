"""
SaveProgram Use Case.

Orchestrates program persistence: validation, normalization to the wire
format, the save itself, and re-hydration of the server's canonical copy.
Handles both create (new program) and update (existing program).

The document passed in is never modified. On any failure the caller keeps
editing the same document and may retry.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.exceptions import PersistenceFailure, ProgramValidationError
from application.ports import ProgramRepository
from domain.converters import DayNumbering, hydrate_program, normalize_program
from domain.ids import IdGenerator, default_id_generator
from domain.models import ProgramDocument
from domain.validation import validate_details

logger = logging.getLogger(__name__)


@dataclass
class SaveProgramResult:
    """Result of the SaveProgram use case execution."""

    success: bool
    document: Optional[ProgramDocument] = None
    program_id: Optional[str] = None
    is_update: bool = False
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    retryable: bool = False


class SaveProgramUseCase:
    """
    Use case for saving programs.

    Orchestrates the following workflow:
    1. Validate scalar fields (title, focus area, duration)
    2. Determine create vs update based on program ID
    3. Normalize the document to the wire format
    4. Persist via repository
    5. Re-hydrate the stored copy into a fresh document

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = SaveProgramUseCase(program_repo=program_repo)
        >>> result = await use_case.execute(document)
        >>> if result.success:
        ...     print(f"Saved program: {result.program_id}")
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        numbering: DayNumbering = DayNumbering.MONDAY_FIRST,
        ids: Optional[IdGenerator] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            program_repo: Repository for persisting programs
            numbering: Day-number convention of the program store
            ids: Generator for ids the stored copy is missing
        """
        self._program_repo = program_repo
        self._numbering = numbering
        self._ids = ids or default_id_generator()

    async def execute(self, document: ProgramDocument) -> SaveProgramResult:
        """
        Execute the save program workflow.

        Args:
            document: The document being edited

        Returns:
            SaveProgramResult with the re-hydrated document on success
        """
        is_update = not document.is_new
        try:
            # Step 1: Validate
            validation_errors = validate_details(document)
            if validation_errors:
                raise ProgramValidationError("Program validation failed", validation_errors)

            # Step 2: Determine create vs update
            operation = "update" if is_update else "create"
            logger.info(f"Saving program ({operation}): {document.title}")

            # Step 3: Normalize
            wire = normalize_program(document, self._numbering)

            # Step 4: Persist via repository
            saved = await self._program_repo.save(wire)

            # Step 5: Re-hydrate the canonical copy
            saved_document = hydrate_program(saved, self._numbering, self._ids)
            if saved_document.id is None:
                logger.error("Program store returned a program without an id")
                return SaveProgramResult(
                    success=False,
                    error="Program store did not return an id",
                    is_update=is_update,
                    retryable=True,
                )

            logger.info(f"Program saved successfully: {saved_document.id}")
            return SaveProgramResult(
                success=True,
                document=saved_document,
                program_id=saved_document.id,
                is_update=is_update,
            )

        except ProgramValidationError as e:
            logger.warning(f"Program validation failed: {e.errors}")
            return SaveProgramResult(
                success=False,
                error=e.message,
                validation_errors=e.errors,
                is_update=is_update,
            )

        except PersistenceFailure as e:
            logger.error(f"Program save failed: {e}")
            return SaveProgramResult(
                success=False,
                error=e.message,
                is_update=is_update,
                retryable=True,
            )

        except Exception as e:
            logger.exception(f"SaveProgram use case failed: {e}")
            return SaveProgramResult(
                success=False,
                error=str(e),
                is_update=is_update,
            )
