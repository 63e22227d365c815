"""
Application error taxonomy.

Mutation failures are not exceptions: they are returned as
``domain.mutations.MutationResult``. The exceptions here cover the
boundaries where the editor talks to the outside world.
"""

from typing import List, Optional


class ProgramValidationError(Exception):
    """Raised when a program's scalar fields block a save or step transition."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class PersistenceFailure(Exception):
    """
    Raised when the program store rejects or cannot complete a save or load.

    Persistence failures are retryable by re-issuing the request. The
    in-memory document is never modified by a failed save.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CollaboratorError(Exception):
    """Raised when the routine catalog, video library or focus-area list fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
