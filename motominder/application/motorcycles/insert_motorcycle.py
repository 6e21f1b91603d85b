"""
Use case: Insert a new motorcycle into the repository.

Input: InsertMotorcycleRequest (make, model, year, vin)
Output: InsertMotorcycleResponse (new ID, or INVALID_ENTITY_ID plus error)
Side effects: One motorcycle stored; repository saved.
Failure cases (returned, never raised): NotAuthenticatedError,
    NotAuthorizedError, DuplicateVinError, InvalidMotorcycleError,
    DuplicateMotorcycleIdError.

Primary actor: a logged-in user holding the write role.
Preconditions: no motorcycle with the same VIN is stored.
"""

import logging

from motominder.application.motorcycles.authorization import (
    ensure_authorized,
    require_collaborators,
)
from motominder.application.motorcycles.dtos import (
    InsertMotorcycleRequest,
    InsertMotorcycleResponse,
)
from motominder.domain.motorcycles.entities import AuthorizationRole, Motorcycle
from motominder.domain.motorcycles.errors import (
    DuplicateVinError,
    MotorcycleDomainError,
)
from motominder.domain.motorcycles.ports import AuthService, MotorcycleRepository

logger = logging.getLogger(__name__)

ACTION = "insert"


class InsertMotorcycleInteractor:
    """Orchestrates adding a motorcycle.

    Runs a sequential gate that stops at the first failure:
    authentication, authorization, VIN uniqueness, entity validation,
    insert, save. Every failure is returned inside the response.
    """

    def __init__(
        self,
        repository: MotorcycleRepository,
        auth_service: AuthService,
        required_role: AuthorizationRole = AuthorizationRole.ADMIN,
    ) -> None:
        """Initialize the interactor.

        Args:
            repository: Where motorcycles are stored.
            auth_service: Answers whether the caller may insert.
            required_role: Role the caller must hold.

        Raises:
            ValueError: If a collaborator is missing.
        """
        require_collaborators(repository, auth_service)
        self._repository = repository
        self._auth_service = auth_service
        self._required_role = required_role

    def handle(self, request: InsertMotorcycleRequest) -> InsertMotorcycleResponse:
        """Run the insert use case.

        Args:
            request: Validated motorcycle attributes.

        Returns:
            A response carrying the new ID on success, otherwise
            INVALID_ENTITY_ID and the error.
        """
        logger.info(
            "Inserting motorcycle: make=%s, model=%s, year=%d, vin=%s",
            request.make,
            request.model,
            request.year,
            request.vin,
        )

        try:
            ensure_authorized(self._auth_service, self._required_role, ACTION)

            if self._repository.find_by_vin(request.vin) is not None:
                raise DuplicateVinError(request.vin, action=ACTION)

            motorcycle = Motorcycle.create(
                make=request.make,
                model=request.model,
                year=request.year,
                vin=request.vin,
            )
            motorcycle = self._repository.insert(motorcycle)
            self._repository.save()
        except MotorcycleDomainError as exc:
            logger.warning("Insert rejected: %s", exc.message)
            return InsertMotorcycleResponse.failure(exc)

        logger.info("Inserted motorcycle id=%d", motorcycle.id)
        return InsertMotorcycleResponse.success(motorcycle.id)
