"""
Domain entities for the motorcycles bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from motominder.domain.motorcycles.errors import InvalidMotorcycleError

INVALID_ENTITY_ID = 0
MIN_ENTITY_ID = 1

MAX_NAME_LENGTH = 50
MIN_MODEL_YEAR = 1885
VIN_LENGTH = 17
VIN_PATTERN = re.compile(r"^[A-HJ-NPR-Z0-9]{17}$")


class AuthorizationRole(Enum):
    """Roles a caller may hold. ADMIN satisfies every role check."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


def max_model_year() -> int:
    """Return the newest acceptable model year: the current UTC year plus one."""
    return datetime.now(timezone.utc).year + 1


def normalize_vin(vin: str) -> str:
    """Return the canonical upper-case form of a VIN."""
    return vin.strip().upper()


@dataclass
class Motorcycle:
    """A motorcycle tracked by the repository.

    Attributes:
        make: Manufacturer name, e.g. "Honda".
        model: Model name, e.g. "Shadow".
        year: Model year.
        vin: Vehicle identification number (17 chars, no I/O/Q).
        id: Primary key. INVALID_ENTITY_ID until the repository assigns one.
        created_utc: When the repository stored this entity.
        modified_utc: When the repository last updated this entity.
    """

    make: str
    model: str
    year: int
    vin: str
    id: int = INVALID_ENTITY_ID
    created_utc: Optional[datetime] = None
    modified_utc: Optional[datetime] = None

    @classmethod
    def create(cls, make: str, model: str, year: int, vin: str) -> "Motorcycle":
        """Build a new, not yet persisted motorcycle.

        Raises:
            InvalidMotorcycleError: If any field breaks a business rule.
        """
        motorcycle = cls(
            make=make.strip(),
            model=model.strip(),
            year=year,
            vin=normalize_vin(vin),
        )
        motorcycle.validate()
        return motorcycle

    def validate(self) -> None:
        """Check every business rule, reporting all violations at once.

        Raises:
            InvalidMotorcycleError: If one or more rules are broken.
        """
        problems: list[str] = []

        if self.id < INVALID_ENTITY_ID:
            problems.append(f"id must not be negative, got {self.id}")
        if not self.make:
            problems.append("make is required")
        elif len(self.make) > MAX_NAME_LENGTH:
            problems.append(f"make must be at most {MAX_NAME_LENGTH} characters")
        if not self.model:
            problems.append("model is required")
        elif len(self.model) > MAX_NAME_LENGTH:
            problems.append(f"model must be at most {MAX_NAME_LENGTH} characters")

        newest = max_model_year()
        if not (MIN_MODEL_YEAR <= self.year <= newest):
            problems.append(
                f"year must be between {MIN_MODEL_YEAR} and {newest}, got {self.year}"
            )

        if not self.vin:
            problems.append("vin is required")
        elif not VIN_PATTERN.match(self.vin):
            problems.append(
                f"vin must be {VIN_LENGTH} letters or digits, excluding I, O and Q"
            )

        if problems:
            raise InvalidMotorcycleError(problems)

    @property
    def is_persisted(self) -> bool:
        """True once the repository has assigned an ID."""
        return self.id >= MIN_ENTITY_ID
