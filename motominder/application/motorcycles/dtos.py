"""
Data Transfer Objects for the motorcycles application layer.

DTOs carry data between callers and interactors. They are frozen
Pydantic models that validate themselves at construction: an invalid
DTO raises pydantic.ValidationError and is never half-built.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from motominder.domain.motorcycles.entities import (
    INVALID_ENTITY_ID,
    MAX_NAME_LENGTH,
    MIN_ENTITY_ID,
    MIN_MODEL_YEAR,
    VIN_LENGTH,
    Motorcycle,
)
from motominder.domain.motorcycles.errors import MotorcycleDomainError


class _RequestModel(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class _ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


# ── Requests ─────────────────────────────────────────────────────


class InsertMotorcycleRequest(_RequestModel):
    """Input DTO for adding a motorcycle.

    Attributes:
        make: Manufacturer name.
        model: Model name.
        year: Model year.
        vin: Vehicle identification number.
    """

    make: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    model: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    year: int = Field(..., ge=MIN_MODEL_YEAR)
    vin: str = Field(..., min_length=VIN_LENGTH, max_length=VIN_LENGTH)


class ListMotorcyclesRequest(_RequestModel):
    """Input DTO for listing every motorcycle. Carries no data."""


class GetMotorcycleRequest(_RequestModel):
    """Input DTO for retrieving one motorcycle by ID."""

    id: int = Field(..., ge=MIN_ENTITY_ID)


class UpdateMotorcycleRequest(_RequestModel):
    """Input DTO for replacing the attributes of an existing motorcycle.

    Attributes:
        id: ID of the motorcycle to change.
        make: New manufacturer name.
        model: New model name.
        year: New model year.
        vin: New vehicle identification number.
    """

    id: int = Field(..., ge=MIN_ENTITY_ID)
    make: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    model: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    year: int = Field(..., ge=MIN_MODEL_YEAR)
    vin: str = Field(..., min_length=VIN_LENGTH, max_length=VIN_LENGTH)


class DeleteMotorcycleRequest(_RequestModel):
    """Input DTO for removing one motorcycle by ID."""

    id: int = Field(..., ge=MIN_ENTITY_ID)


# ── Responses ────────────────────────────────────────────────────


class MotorcycleItem(_ResponseModel):
    """Output DTO describing a stored motorcycle."""

    id: int = Field(..., ge=MIN_ENTITY_ID)
    make: str
    model: str
    year: int
    vin: str
    created_utc: Optional[datetime] = None
    modified_utc: Optional[datetime] = None

    @classmethod
    def from_entity(cls, motorcycle: Motorcycle) -> "MotorcycleItem":
        return cls(
            id=motorcycle.id,
            make=motorcycle.make,
            model=motorcycle.model,
            year=motorcycle.year,
            vin=motorcycle.vin,
            created_utc=motorcycle.created_utc,
            modified_utc=motorcycle.modified_utc,
        )


class EntityIdResponse(_ResponseModel):
    """Outcome of a use case that acts on a single motorcycle.

    On success, id is the affected motorcycle's ID and error is None.
    On failure, id is INVALID_ENTITY_ID and error says what went wrong.
    """

    id: int
    error: Optional[MotorcycleDomainError] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "EntityIdResponse":
        if self.error is None and self.id < MIN_ENTITY_ID:
            raise ValueError(
                f"a successful response needs an id of at least {MIN_ENTITY_ID}"
            )
        if self.error is not None and self.id != INVALID_ENTITY_ID:
            raise ValueError(
                f"a failed response must carry id {INVALID_ENTITY_ID}"
            )
        return self

    @classmethod
    def success(cls, motorcycle_id: int) -> "EntityIdResponse":
        return cls(id=motorcycle_id)

    @classmethod
    def failure(cls, error: MotorcycleDomainError) -> "EntityIdResponse":
        return cls(id=INVALID_ENTITY_ID, error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None


class InsertMotorcycleResponse(EntityIdResponse):
    """Output DTO for the insert use case; id is the new motorcycle's ID."""


class UpdateMotorcycleResponse(EntityIdResponse):
    """Output DTO for the update use case."""


class DeleteMotorcycleResponse(EntityIdResponse):
    """Output DTO for the delete use case; id is the removed motorcycle's ID."""


class GetMotorcycleResponse(_ResponseModel):
    """Output DTO for the get use case: either a motorcycle or an error."""

    motorcycle: Optional[MotorcycleItem] = None
    error: Optional[MotorcycleDomainError] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "GetMotorcycleResponse":
        if (self.motorcycle is None) == (self.error is None):
            raise ValueError("exactly one of motorcycle or error must be set")
        return self

    @property
    def succeeded(self) -> bool:
        return self.error is None


class ListMotorcyclesResponse(_ResponseModel):
    """Output DTO for the list use case.

    A failed listing carries an error and no motorcycles.
    """

    motorcycles: list[MotorcycleItem] = Field(default_factory=list)
    error: Optional[MotorcycleDomainError] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "ListMotorcyclesResponse":
        if self.error is not None and self.motorcycles:
            raise ValueError("a failed response cannot carry motorcycles")
        return self

    @property
    def succeeded(self) -> bool:
        return self.error is None
