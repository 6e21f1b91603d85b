"""
Use case: List every stored motorcycle.

Input: ListMotorcyclesRequest
Output: ListMotorcyclesResponse
Side effects: None (read-only query).
Failure cases (returned): NotAuthenticatedError, NotAuthorizedError.
"""

import logging

from motominder.application.motorcycles.authorization import (
    ensure_authorized,
    require_collaborators,
)
from motominder.application.motorcycles.dtos import (
    ListMotorcyclesRequest,
    ListMotorcyclesResponse,
    MotorcycleItem,
)
from motominder.domain.motorcycles.entities import AuthorizationRole
from motominder.domain.motorcycles.errors import MotorcycleDomainError
from motominder.domain.motorcycles.ports import AuthService, MotorcycleRepository

logger = logging.getLogger(__name__)

ACTION = "list"


class ListMotorcyclesInteractor:
    """Orchestrates reading the whole motorcycle collection."""

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

    def handle(self, request: ListMotorcyclesRequest) -> ListMotorcyclesResponse:
        """Run the list use case.

        Returns:
            Every stored motorcycle, or an error and no motorcycles.
        """
        logger.info("Listing motorcycles")

        try:
            ensure_authorized(self._auth_service, self._required_role, ACTION)
            motorcycles = self._repository.list()
        except MotorcycleDomainError as exc:
            logger.warning("List rejected: %s", exc.message)
            return ListMotorcyclesResponse(error=exc)

        return ListMotorcyclesResponse(
            motorcycles=[MotorcycleItem.from_entity(m) for m in motorcycles]
        )
