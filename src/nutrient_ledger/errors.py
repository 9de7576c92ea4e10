"""Error types raised by the nutrient ledger engine."""

from uuid import UUID


class NutrientLedgerError(Exception):
    """Base class for engine errors."""


class ValidationError(NutrientLedgerError):
    """Input data is incomplete for the requested computation."""


class MissingBiometricDataError(ValidationError):
    """Raised when a biometric profile lacks fields needed for calculations."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(
            "User is missing necessary information for calculations: "
            + ", ".join(missing_fields)
        )


class UnsupportedValueError(NutrientLedgerError, ValueError):
    """Raised when an enum-like field holds a value the formulas don't cover."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Unsupported {field}: {value!r}")


class NotFoundError(NutrientLedgerError):
    """A referenced entity does not exist."""


class UserNotFoundError(NotFoundError):
    """Raised when no profile exists for a user id."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(f"User not found with ID {user_id}")


class MealNotFoundError(NotFoundError):
    """Raised when a meal id is unknown."""

    def __init__(self, meal_id: UUID) -> None:
        self.meal_id = meal_id
        super().__init__(f"Meal not found with ID {meal_id}")


class LedgerNotFoundError(NotFoundError):
    """Raised when a user has no daily intake row for the requested day."""

    def __init__(self, user_id: UUID, day: object) -> None:
        self.user_id = user_id
        self.day = day
        super().__init__(
            f"Recommended daily intake for {day} not found for user with ID {user_id}"
        )


class PersistenceError(NutrientLedgerError):
    """The storage layer rejected a write."""


class LedgerUpdateError(PersistenceError):
    """Raised when an updated daily intake row cannot be saved."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(f"Failed to update daily intake for user with ID {user_id}")


class LedgerCreateError(PersistenceError):
    """Raised when a new daily intake row cannot be saved."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(f"Failed to create daily intake for user with ID {user_id}")
