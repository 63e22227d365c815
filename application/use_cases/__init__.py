"""
Application Use Cases for the program editor.

This package contains the workflows that cross the collaborator boundary.
Pure document edits live in ``domain.mutations``; use cases add the
async calls to the program store and the routine catalog around them.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, never raise for expected failures

Usage:
    from application.use_cases import SaveProgramUseCase, LoadProgramUseCase

    save_use_case = SaveProgramUseCase(program_repo=program_repo)
    result = await save_use_case.execute(document)

    load_use_case = LoadProgramUseCase(program_repo=program_repo)
    result = await load_use_case.execute("program-123")
"""

from application.use_cases.add_routine import AddRoutineResult, AddRoutineUseCase
from application.use_cases.load_program import LoadProgramResult, LoadProgramUseCase
from application.use_cases.save_program import SaveProgramResult, SaveProgramUseCase

__all__ = [
    # SaveProgram
    "SaveProgramUseCase",
    "SaveProgramResult",
    # LoadProgram
    "LoadProgramUseCase",
    "LoadProgramResult",
    # AddRoutine
    "AddRoutineUseCase",
    "AddRoutineResult",
]
