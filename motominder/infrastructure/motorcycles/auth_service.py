"""
Adapter: Fixed-identity authentication and authorization.

Implements AuthService port from a pre-established identity.
Suitable for tests, scripts and the command-line caller, where
authentication happened (or did not) before the use case runs.
"""

from typing import Iterable

from motominder.domain.motorcycles.entities import AuthorizationRole
from motominder.domain.motorcycles.ports import AuthService


class StaticAuthServiceAdapter(AuthService):
    """Answers auth questions from a fixed flag and role set.

    An unauthenticated caller is never authorized, whatever roles
    it was given. ADMIN implies every other role.
    """

    def __init__(
        self,
        authenticated: bool = False,
        roles: Iterable[AuthorizationRole] = (),
    ) -> None:
        self._authenticated = authenticated
        self._roles = frozenset(roles)

    @classmethod
    def anonymous(cls) -> "StaticAuthServiceAdapter":
        return cls(authenticated=False)

    @classmethod
    def with_roles(cls, *roles: AuthorizationRole) -> "StaticAuthServiceAdapter":
        """Build an authenticated identity holding the given roles."""
        return cls(authenticated=True, roles=roles)

    @property
    def roles(self) -> frozenset[AuthorizationRole]:
        return self._roles

    def is_authenticated(self) -> bool:
        return self._authenticated

    def is_authorized(self, role: AuthorizationRole) -> bool:
        if not self._authenticated:
            return False
        return role in self._roles or AuthorizationRole.ADMIN in self._roles
