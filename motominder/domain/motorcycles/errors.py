"""
Domain-specific errors for the motorcycles bounded context.

All errors raised from the domain and repository layers are defined here.
Interactors translate them into failure responses.
No framework imports allowed.
"""


class MotorcycleDomainError(Exception):
    """Base error for all motorcycle domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidMotorcycleError(MotorcycleDomainError):
    """Raised when a motorcycle breaks one or more business rules."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__(f"Invalid motorcycle: {'; '.join(problems)}")
        self.problems = problems


class MotorcycleNotFoundError(MotorcycleDomainError):
    """Raised when no motorcycle has the requested ID."""

    def __init__(self, motorcycle_id: int, action: str = "find") -> None:
        super().__init__(
            f"Cannot {action} motorcycle {motorcycle_id} because it does not exist"
        )
        self.motorcycle_id = motorcycle_id
        self.action = action


class DuplicateMotorcycleIdError(MotorcycleDomainError):
    """Raised when inserting an entity whose ID is already stored."""

    def __init__(self, motorcycle_id: int) -> None:
        super().__init__(
            f"Cannot insert motorcycle {motorcycle_id} because the ID already exists"
        )
        self.motorcycle_id = motorcycle_id


class DuplicateVinError(MotorcycleDomainError):
    """Raised when another motorcycle already carries the VIN."""

    def __init__(self, vin: str, action: str = "insert") -> None:
        super().__init__(
            f"{action.capitalize()} operation failed due to a motorcycle with "
            f"the same VIN ({vin}) already existing in the repository"
        )
        self.vin = vin
        self.action = action


class NotAuthenticatedError(MotorcycleDomainError):
    """Raised when the caller has not been authenticated."""

    def __init__(self, action: str) -> None:
        super().__init__(
            f"{action.capitalize()} operation failed due to not being authenticated, "
            "so please contact your system administrator"
        )
        self.action = action


class NotAuthorizedError(MotorcycleDomainError):
    """Raised when the caller lacks the role an operation requires."""

    def __init__(self, action: str, role: str) -> None:
        super().__init__(
            f"{action.capitalize()} operation failed due to not having the required "
            f"user authorization role ({role}), so please contact your system "
            "administrator"
        )
        self.action = action
        self.role = role
