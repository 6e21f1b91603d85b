"""
Use case: Change the attributes of an existing motorcycle.

Input: UpdateMotorcycleRequest (id, make, model, year, vin)
Output: UpdateMotorcycleResponse
Side effects: One motorcycle replaced; repository saved.
Failure cases (returned): NotAuthenticatedError, NotAuthorizedError,
    MotorcycleNotFoundError, DuplicateVinError, InvalidMotorcycleError.
"""

import logging

from motominder.application.motorcycles.authorization import (
    ensure_authorized,
    require_collaborators,
)
from motominder.application.motorcycles.dtos import (
    UpdateMotorcycleRequest,
    UpdateMotorcycleResponse,
)
from motominder.domain.motorcycles.entities import AuthorizationRole, normalize_vin
from motominder.domain.motorcycles.errors import (
    DuplicateVinError,
    MotorcycleDomainError,
    MotorcycleNotFoundError,
)
from motominder.domain.motorcycles.ports import AuthService, MotorcycleRepository

logger = logging.getLogger(__name__)

ACTION = "update"


class UpdateMotorcycleInteractor:
    """Orchestrates replacing a motorcycle's make, model, year and VIN.

    The VIN may change, but not to one already carried by a
    different motorcycle.
    """

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

    def handle(self, request: UpdateMotorcycleRequest) -> UpdateMotorcycleResponse:
        logger.info("Updating motorcycle id=%d", request.id)

        try:
            ensure_authorized(self._auth_service, self._required_role, ACTION)

            motorcycle = self._repository.find_by_id(request.id)
            if motorcycle is None:
                raise MotorcycleNotFoundError(request.id, action=ACTION)

            holder = self._repository.find_by_vin(request.vin)
            if holder is not None and holder.id != motorcycle.id:
                raise DuplicateVinError(request.vin, action=ACTION)

            motorcycle.make = request.make
            motorcycle.model = request.model
            motorcycle.year = request.year
            motorcycle.vin = normalize_vin(request.vin)

            self._repository.update(motorcycle)
            self._repository.save()
        except MotorcycleDomainError as exc:
            logger.warning("Update rejected: %s", exc.message)
            return UpdateMotorcycleResponse.failure(exc)

        logger.info("Updated motorcycle id=%d", motorcycle.id)
        return UpdateMotorcycleResponse.success(motorcycle.id)
