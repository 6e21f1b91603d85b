"""
Use case: Remove a motorcycle from the repository.

Input: DeleteMotorcycleRequest (id)
Output: DeleteMotorcycleResponse
Side effects: One motorcycle removed; repository saved.
Failure cases (returned): NotAuthenticatedError, NotAuthorizedError,
    MotorcycleNotFoundError.
"""

import logging

from motominder.application.motorcycles.authorization import (
    ensure_authorized,
    require_collaborators,
)
from motominder.application.motorcycles.dtos import (
    DeleteMotorcycleRequest,
    DeleteMotorcycleResponse,
)
from motominder.domain.motorcycles.entities import AuthorizationRole
from motominder.domain.motorcycles.errors import (
    MotorcycleDomainError,
    MotorcycleNotFoundError,
)
from motominder.domain.motorcycles.ports import AuthService, MotorcycleRepository

logger = logging.getLogger(__name__)

ACTION = "delete"


class DeleteMotorcycleInteractor:
    """Orchestrates removing a single motorcycle."""

    def __init__(
        self,
        repository: MotorcycleRepository,
        auth_service: AuthService,
        required_role: AuthorizationRole = AuthorizationRole.ADMIN,
    ) -> None:
        require_collaborators(repository, auth_service)
        self._repository = repository
        self._auth_service = auth_service
        self._required_role = required_role

    def handle(self, request: DeleteMotorcycleRequest) -> DeleteMotorcycleResponse:
        logger.info("Deleting motorcycle id=%d", request.id)

        try:
            ensure_authorized(self._auth_service, self._required_role, ACTION)

            motorcycle = self._repository.find_by_id(request.id)
            if motorcycle is None:
                raise MotorcycleNotFoundError(request.id, action=ACTION)

            self._repository.delete(motorcycle)
            self._repository.save()
        except MotorcycleDomainError as exc:
            logger.warning("Delete rejected: %s", exc.message)
            return DeleteMotorcycleResponse.failure(exc)

        logger.info("Deleted motorcycle id=%d", request.id)
        return DeleteMotorcycleResponse.success(request.id)
