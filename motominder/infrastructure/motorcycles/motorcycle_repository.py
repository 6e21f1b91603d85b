"""
Adapter: In-memory motorcycle persistence.

Implements MotorcycleRepository port.
Records are keyed by ID, so lookups do not depend on insertion order.
Nothing survives the process; save() is a unit-of-work placeholder.
"""

import itertools
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from motominder.domain.motorcycles.entities import (
    MIN_ENTITY_ID,
    Motorcycle,
    normalize_vin,
)
from motominder.domain.motorcycles.errors import (
    DuplicateMotorcycleIdError,
    MotorcycleNotFoundError,
)
from motominder.domain.motorcycles.ports import MotorcycleRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryMotorcycleRepositoryAdapter(MotorcycleRepository):
    """Concrete adapter storing motorcycles in a dict keyed by ID.

    The repository keeps its own copies of entities, so callers must go
    through update() for a change to be stored. IDs are never reused,
    even after a delete.
    """

    def __init__(self) -> None:
        self._motorcycles: dict[int, Motorcycle] = {}
        self._ids = itertools.count(MIN_ENTITY_ID)

    def __len__(self) -> int:
        return len(self._motorcycles)

    def list(self) -> list[Motorcycle]:
        """Return copies of every stored motorcycle, in insertion order."""
        return [replace(m) for m in self._motorcycles.values()]

    def insert(self, motorcycle: Motorcycle) -> Motorcycle:
        """Store a new motorcycle.

        Args:
            motorcycle: Entity to store. Its id, created_utc and
                modified_utc are overwritten.

        Returns:
            The same entity, now carrying its assigned ID.

        Raises:
            DuplicateMotorcycleIdError: If the entity's ID is already stored.
            InvalidMotorcycleError: If the entity breaks a business rule.
        """
        if motorcycle.id in self._motorcycles:
            raise DuplicateMotorcycleIdError(motorcycle.id)

        motorcycle.validate()

        motorcycle.id = next(self._ids)
        motorcycle.created_utc = _utc_now()
        motorcycle.modified_utc = None

        self._motorcycles[motorcycle.id] = replace(motorcycle)
        logger.debug("Inserted motorcycle id=%d vin=%s", motorcycle.id, motorcycle.vin)
        return motorcycle

    def update(self, motorcycle: Motorcycle) -> Motorcycle:
        """Replace a stored motorcycle with the given entity's fields.

        The stored creation time is kept; the modification time is set now.

        Raises:
            MotorcycleNotFoundError: If no motorcycle has that ID.
            InvalidMotorcycleError: If the entity breaks a business rule.
        """
        stored = self._motorcycles.get(motorcycle.id)
        if stored is None:
            raise MotorcycleNotFoundError(motorcycle.id, action="update")

        motorcycle.validate()

        motorcycle.created_utc = stored.created_utc
        motorcycle.modified_utc = _utc_now()

        self._motorcycles[motorcycle.id] = replace(motorcycle)
        logger.debug("Updated motorcycle id=%d", motorcycle.id)
        return motorcycle

    def delete(self, motorcycle: Motorcycle) -> None:
        """Remove exactly the motorcycle with the entity's ID.

        Raises:
            MotorcycleNotFoundError: If no motorcycle has that ID.
        """
        if self._motorcycles.pop(motorcycle.id, None) is None:
            raise MotorcycleNotFoundError(motorcycle.id, action="delete")
        logger.debug("Deleted motorcycle id=%d", motorcycle.id)

    def find_by_id(self, motorcycle_id: int) -> Optional[Motorcycle]:
        stored = self._motorcycles.get(motorcycle_id)
        return replace(stored) if stored is not None else None

    def find(self, motorcycle: Motorcycle) -> Optional[Motorcycle]:
        for stored in self._motorcycles.values():
            if (
                stored.make == motorcycle.make
                and stored.model == motorcycle.model
                and stored.year == motorcycle.year
            ):
                return replace(stored)
        return None

    def find_by_vin(self, vin: str) -> Optional[Motorcycle]:
        wanted = normalize_vin(vin)
        for stored in self._motorcycles.values():
            if stored.vin == wanted:
                return replace(stored)
        return None

    def save(self) -> None:
        """Nothing to flush; every change is already in memory."""
        logger.debug("Save requested for %d motorcycles", len(self._motorcycles))
