"""
Port interfaces (ABCs) for the motorcycles bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from motominder.domain.motorcycles.entities import AuthorizationRole, Motorcycle


class MotorcycleRepository(ABC):
    """Port for CRUD access to stored motorcycles."""

    @abstractmethod
    def list(self) -> list[Motorcycle]:
        """Return every stored motorcycle. Ordering is not guaranteed."""
        raise NotImplementedError

    @abstractmethod
    def insert(self, motorcycle: Motorcycle) -> Motorcycle:
        """Store a new motorcycle, assigning its ID and creation time.

        Raises:
            DuplicateMotorcycleIdError: If the motorcycle's ID is already stored.
            InvalidMotorcycleError: If the motorcycle breaks a business rule.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, motorcycle: Motorcycle) -> Motorcycle:
        """Replace a stored motorcycle, setting its modification time.

        Raises:
            MotorcycleNotFoundError: If no motorcycle has that ID.
            InvalidMotorcycleError: If the motorcycle breaks a business rule.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, motorcycle: Motorcycle) -> None:
        """Remove a stored motorcycle.

        Raises:
            MotorcycleNotFoundError: If no motorcycle has that ID.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, motorcycle_id: int) -> Optional[Motorcycle]:
        """Return the motorcycle with this ID, or None."""
        raise NotImplementedError

    @abstractmethod
    def find(self, motorcycle: Motorcycle) -> Optional[Motorcycle]:
        """Return a stored motorcycle with the same make, model and year, or None."""
        raise NotImplementedError

    @abstractmethod
    def find_by_vin(self, vin: str) -> Optional[Motorcycle]:
        """Return the motorcycle carrying this VIN, or None."""
        raise NotImplementedError

    @abstractmethod
    def save(self) -> None:
        """Commit pending changes (unit of work)."""
        raise NotImplementedError


class AuthService(ABC):
    """Port answering who the current caller is and what they may do."""

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Return True if the caller has been authenticated."""
        raise NotImplementedError

    @abstractmethod
    def is_authorized(self, role: AuthorizationRole) -> bool:
        """Return True if the caller holds the given role."""
        raise NotImplementedError
