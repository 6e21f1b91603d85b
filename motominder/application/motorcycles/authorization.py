"""
Authentication and authorization gate shared by every interactor.
"""

from motominder.domain.motorcycles.entities import AuthorizationRole
from motominder.domain.motorcycles.errors import (
    NotAuthenticatedError,
    NotAuthorizedError,
)
from motominder.domain.motorcycles.ports import AuthService


def ensure_authorized(
    auth_service: AuthService, role: AuthorizationRole, action: str
) -> None:
    """Check the caller is authenticated, then that it holds the role.

    Args:
        auth_service: Source of truth for the current caller.
        role: Role the operation requires.
        action: Operation name used in error messages ("insert", "list", ...).

    Raises:
        NotAuthenticatedError: If the caller is not authenticated.
        NotAuthorizedError: If the caller lacks the role.
    """
    if not auth_service.is_authenticated():
        raise NotAuthenticatedError(action)
    if not auth_service.is_authorized(role):
        raise NotAuthorizedError(action, role.value)


def require_collaborators(repository: object, auth_service: object) -> None:
    """Reject interactor construction with a missing collaborator."""
    if repository is None:
        raise ValueError("a motorcycle repository is required")
    if auth_service is None:
        raise ValueError("an auth service is required")
