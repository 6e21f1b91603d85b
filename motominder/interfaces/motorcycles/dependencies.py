"""
Dependency wiring for the motorcycles bounded context.

Builds interactors from infrastructure adapters via constructor
injection, applying the role requirements from settings.
This is the composition root for the motorcycles context.
"""

from typing import Optional

from motominder.application.motorcycles.delete_motorcycle import (
    DeleteMotorcycleInteractor,
)
from motominder.application.motorcycles.get_motorcycle import GetMotorcycleInteractor
from motominder.application.motorcycles.insert_motorcycle import (
    InsertMotorcycleInteractor,
)
from motominder.application.motorcycles.list_motorcycles import (
    ListMotorcyclesInteractor,
)
from motominder.application.motorcycles.update_motorcycle import (
    UpdateMotorcycleInteractor,
)
from motominder.core.config import Settings, settings
from motominder.domain.motorcycles.ports import AuthService, MotorcycleRepository
from motominder.infrastructure.motorcycles.motorcycle_repository import (
    InMemoryMotorcycleRepositoryAdapter,
)


def get_motorcycle_repository() -> MotorcycleRepository:
    """Build a fresh, empty repository."""
    return InMemoryMotorcycleRepositoryAdapter()


def _settings(override: Optional[Settings]) -> Settings:
    return override if override is not None else settings


def get_insert_motorcycle_interactor(
    repository: MotorcycleRepository,
    auth_service: AuthService,
    config: Optional[Settings] = None,
) -> InsertMotorcycleInteractor:
    """Build InsertMotorcycleInteractor requiring the configured write role."""
    return InsertMotorcycleInteractor(
        repository=repository,
        auth_service=auth_service,
        required_role=_settings(config).write_role,
    )


def get_update_motorcycle_interactor(
    repository: MotorcycleRepository,
    auth_service: AuthService,
    config: Optional[Settings] = None,
) -> UpdateMotorcycleInteractor:
    """Build UpdateMotorcycleInteractor requiring the configured write role."""
    return UpdateMotorcycleInteractor(
        repository=repository,
        auth_service=auth_service,
        required_role=_settings(config).write_role,
    )


def get_delete_motorcycle_interactor(
    repository: MotorcycleRepository,
    auth_service: AuthService,
    config: Optional[Settings] = None,
) -> DeleteMotorcycleInteractor:
    """Build DeleteMotorcycleInteractor requiring the configured write role."""
    return DeleteMotorcycleInteractor(
        repository=repository,
        auth_service=auth_service,
        required_role=_settings(config).write_role,
    )


def get_list_motorcycles_interactor(
    repository: MotorcycleRepository,
    auth_service: AuthService,
    config: Optional[Settings] = None,
) -> ListMotorcyclesInteractor:
    """Build ListMotorcyclesInteractor requiring the configured read role."""
    return ListMotorcyclesInteractor(
        repository=repository,
        auth_service=auth_service,
        required_role=_settings(config).read_role,
    )


def get_get_motorcycle_interactor(
    repository: MotorcycleRepository,
    auth_service: AuthService,
    config: Optional[Settings] = None,
) -> GetMotorcycleInteractor:
    """Build GetMotorcycleInteractor requiring the configured read role."""
    return GetMotorcycleInteractor(
        repository=repository,
        auth_service=auth_service,
        required_role=_settings(config).read_role,
    )
