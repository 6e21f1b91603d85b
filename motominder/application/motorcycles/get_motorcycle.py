"""
Use case: Retrieve one motorcycle by ID.

Input: GetMotorcycleRequest (id)
Output: GetMotorcycleResponse
Side effects: None (read-only query).
Failure cases (returned): NotAuthenticatedError, NotAuthorizedError,
    MotorcycleNotFoundError.
"""

import logging

from motominder.application.motorcycles.authorization import (
    ensure_authorized,
    require_collaborators,
)
from motominder.application.motorcycles.dtos import (
    GetMotorcycleRequest,
    GetMotorcycleResponse,
    MotorcycleItem,
)
from motominder.domain.motorcycles.entities import AuthorizationRole
from motominder.domain.motorcycles.errors import (
    MotorcycleDomainError,
    MotorcycleNotFoundError,
)
from motominder.domain.motorcycles.ports import AuthService, MotorcycleRepository

logger = logging.getLogger(__name__)

ACTION = "get"


class GetMotorcycleInteractor:
    """Orchestrates looking up a single motorcycle."""

    def __init__(
        self,
        repository: MotorcycleRepository,
        auth_service: AuthService,
        required_role: AuthorizationRole = AuthorizationRole.USER,
    ) -> None:
        require_collaborators(repository, auth_service)
        self._repository = repository
        self._auth_service = auth_service
        self._required_role = required_role

    def handle(self, request: GetMotorcycleRequest) -> GetMotorcycleResponse:
        logger.info("Getting motorcycle id=%d", request.id)

        try:
            ensure_authorized(self._auth_service, self._required_role, ACTION)
            motorcycle = self._repository.find_by_id(request.id)
            if motorcycle is None:
                raise MotorcycleNotFoundError(request.id, action=ACTION)
        except MotorcycleDomainError as exc:
            logger.warning("Get rejected: %s", exc.message)
            return GetMotorcycleResponse(error=exc)

        return GetMotorcycleResponse(motorcycle=MotorcycleItem.from_entity(motorcycle))
