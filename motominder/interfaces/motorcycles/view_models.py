"""
View models for the motorcycles bounded context.

Translate response DTOs into presentation-ready structures.
Every view model validates itself at construction and can be
dumped to a JSON-ready dict. No business logic belongs here.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from motominder.application.motorcycles.dtos import (
    EntityIdResponse,
    GetMotorcycleResponse,
    ListMotorcyclesResponse,
    MotorcycleItem,
)
from motominder.domain.motorcycles.entities import INVALID_ENTITY_ID, MIN_ENTITY_ID


class _ViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = Field(..., min_length=1)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Return a JSON-ready representation."""
        return self.model_dump(mode="json")


class EntityIdViewModel(_ViewModel):
    """Presentation of a use case that acted on one motorcycle.

    Attributes:
        id: Affected motorcycle's ID, or INVALID_ENTITY_ID on failure.
        message: Confirmation text, or the error text on failure.
        error: Error text, or None on success.
    """

    success_message: ClassVar[str] = "Operation completed successfully."

    id: int

    @model_validator(mode="after")
    def _check_id(self) -> "EntityIdViewModel":
        if self.error is None and self.id < MIN_ENTITY_ID:
            raise ValueError(f"id must be at least {MIN_ENTITY_ID}")
        if self.error is not None and self.id != INVALID_ENTITY_ID:
            raise ValueError(f"a failed view model must carry id {INVALID_ENTITY_ID}")
        return self

    @classmethod
    def from_response(cls, response: EntityIdResponse) -> "EntityIdViewModel":
        """Build the view model for an insert, update or delete response."""
        if response.error is not None:
            return cls(
                id=INVALID_ENTITY_ID,
                message=response.error.message,
                error=response.error.message,
            )
        return cls(id=response.id, message=cls.success_message)


class InsertMotorcycleViewModel(EntityIdViewModel):
    success_message: ClassVar[str] = "Successfully inserted a new motorcycle."


class UpdateMotorcycleViewModel(EntityIdViewModel):
    success_message: ClassVar[str] = "Successfully updated the motorcycle."


class DeleteMotorcycleViewModel(EntityIdViewModel):
    success_message: ClassVar[str] = "Successfully deleted the motorcycle."


class GetMotorcycleViewModel(_ViewModel):
    """Presentation of a single motorcycle lookup."""

    motorcycle: Optional[MotorcycleItem] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "GetMotorcycleViewModel":
        if (self.motorcycle is None) == (self.error is None):
            raise ValueError("exactly one of motorcycle or error must be set")
        return self

    @classmethod
    def from_response(cls, response: GetMotorcycleResponse) -> "GetMotorcycleViewModel":
        if response.error is not None:
            return cls(message=response.error.message, error=response.error.message)
        return cls(
            motorcycle=response.motorcycle,
            message="Successfully retrieved the motorcycle.",
        )


class ListMotorcyclesViewModel(_ViewModel):
    """Presentation of the whole motorcycle collection."""

    motorcycles: list[MotorcycleItem] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_count(self) -> "ListMotorcyclesViewModel":
        if self.count != len(self.motorcycles):
            raise ValueError("count must match the number of motorcycles")
        return self

    @classmethod
    def from_response(
        cls, response: ListMotorcyclesResponse
    ) -> "ListMotorcyclesViewModel":
        if response.error is not None:
            return cls(message=response.error.message, error=response.error.message)
        count = len(response.motorcycles)
        return cls(
            motorcycles=response.motorcycles,
            count=count,
            message=f"Found {count} motorcycle{'s' if count != 1 else ''}.",
        )
