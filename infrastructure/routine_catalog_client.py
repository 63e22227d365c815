"""
HTTP client for the routine catalog.

Implements the RoutineCatalog port against the /routines endpoints.
"""

import logging
from typing import Any, Dict, List

from application.exceptions import CollaboratorError
from domain.models import Routine, RoutineExercise
from infrastructure.api_client import JsonApiClient

logger = logging.getLogger(__name__)


class RoutineCatalogUnavailable(CollaboratorError):
    """Raised when the routine catalog is unavailable."""

    pass


class RoutineCatalogAPIError(CollaboratorError):
    """Raised when the routine catalog returns an error."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)


class RoutineCatalogClient(JsonApiClient):
    """HTTP client for routine listing, creation, update and deletion."""

    service_name = "Routine-Catalog"
    unavailable_error = RoutineCatalogUnavailable
    api_error = RoutineCatalogAPIError

    async def list(self) -> List[Routine]:
        response = await self._send("get", "/routines")
        return self._parse(
            response, lambda data: [Routine.model_validate(routine) for routine in data]
        )

    async def create(
        self,
        name: str,
        description: str,
        exercises: List[RoutineExercise],
    ) -> Routine:
        """
        Create a routine.

        Raises:
            RoutineCatalogUnavailable: If the catalog is not reachable
            RoutineCatalogAPIError: If the catalog rejects the routine
        """
        payload = {
            "name": name,
            "description": description,
            "exercises": [
                exercise.model_dump(by_alias=True, exclude_none=True) for exercise in exercises
            ],
        }
        response = await self._send("post", "/routines", expected=(200, 201), json=payload)
        routine = self._parse(response, Routine.model_validate)
        logger.info(f"Routine-Catalog created routine {routine.id}")
        return routine

    async def update(self, routine_id: str, patch: Dict[str, Any]) -> Routine:
        response = await self._send("patch", f"/routines/{routine_id}", json=patch)
        return self._parse(response, Routine.model_validate)

    async def delete(self, routine_id: str) -> None:
        await self._send("delete", f"/routines/{routine_id}", expected=(200, 204))
        logger.info(f"Routine-Catalog deleted routine {routine_id}")
