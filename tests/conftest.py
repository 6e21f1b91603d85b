"""Shared fixtures for the motorcycles test suite."""

import pytest

from motominder.domain.motorcycles.entities import AuthorizationRole
from motominder.infrastructure.motorcycles.auth_service import StaticAuthServiceAdapter
from motominder.infrastructure.motorcycles.motorcycle_repository import (
    InMemoryMotorcycleRepositoryAdapter,
)


@pytest.fixture
def repository() -> InMemoryMotorcycleRepositoryAdapter:
    return InMemoryMotorcycleRepositoryAdapter()


@pytest.fixture
def admin() -> StaticAuthServiceAdapter:
    return StaticAuthServiceAdapter.with_roles(AuthorizationRole.ADMIN)


@pytest.fixture
def user() -> StaticAuthServiceAdapter:
    return StaticAuthServiceAdapter.with_roles(AuthorizationRole.USER)


@pytest.fixture
def anonymous() -> StaticAuthServiceAdapter:
    return StaticAuthServiceAdapter.anonymous()
