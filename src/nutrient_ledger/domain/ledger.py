"""Domain models for the daily intake ledger."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class DailyLedgerRow:
    """Remaining recommended intake for one user on one calendar day."""

    id: UUID
    user_id: UUID
    day: date
    nutrients: dict[str, float | None]
    version: int = 0
