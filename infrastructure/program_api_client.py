"""
HTTP client for the program API.

Implements the ProgramRepository and FocusAreaSource ports. Programs are
exchanged in the flat wire format; the API assigns ids on create and
recomputes rest-day flags on every write.
"""

import logging
from typing import List, Optional

from application.exceptions import PersistenceFailure
from domain.models import FocusAreaTag, WireProgram
from infrastructure.api_client import JsonApiClient

logger = logging.getLogger(__name__)


class ProgramAPIUnavailable(PersistenceFailure):
    """Raised when the program API is unavailable."""

    pass


class ProgramAPIError(PersistenceFailure):
    """Raised when the program API returns an error."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)


class ProgramAPIClient(JsonApiClient):
    """
    HTTP client for program persistence.

    Endpoints:
        POST /programs               create
        PUT  /programs/{id}          replace
        GET  /programs/{id}          fetch
        GET  /programs/categories    focus-area tags with counts
    """

    service_name = "Program-API"
    unavailable_error = ProgramAPIUnavailable
    api_error = ProgramAPIError

    async def save(self, program: WireProgram) -> WireProgram:
        """
        Create or replace a program.

        Raises:
            ProgramAPIUnavailable: If the program API is not reachable
            ProgramAPIError: If the program API rejects the program
        """
        payload = program.to_payload()
        if program.id is None:
            response = await self._send("post", "/programs", expected=(200, 201), json=payload)
        else:
            response = await self._send("put", f"/programs/{program.id}", json=payload)

        saved = self._parse(response, WireProgram.model_validate)
        logger.info(f"Program-API stored program {saved.id} ({saved.duration} weeks)")
        return saved

    async def get(self, program_id: str) -> Optional[WireProgram]:
        """
        Fetch a program.

        Returns:
            The stored program, or None on 404.
        """
        response = await self._send("get", f"/programs/{program_id}", allow=(404,))
        if response.status_code == 404:
            return None
        return self._parse(response, WireProgram.model_validate)

    async def list_focus_areas(self) -> List[FocusAreaTag]:
        response = await self._send("get", "/programs/categories")
        return self._parse(
            response, lambda data: [FocusAreaTag.model_validate(tag) for tag in data]
        )
