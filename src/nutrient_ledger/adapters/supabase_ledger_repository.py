"""Supabase repository for daily ledger rows."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrient_ledger.domain.ledger import DailyLedgerRow
from nutrient_ledger.services.intake import LedgerRepository

_COLUMNS = "id, user_id, day, nutrients, version"


@dataclass
class SupabaseLedgerRepository(LedgerRepository):
    """Supabase implementation for daily ledger rows."""

    client: Client
    table_name: str = "daily_intakes"

    def get_row(self, user_id: UUID, day: date) -> DailyLedgerRow | None:
        """Return the row for a user and day."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_row(
        self, user_id: UUID, day: date, nutrients: dict[str, float | None]
    ) -> DailyLedgerRow:
        """Insert a row for a user and day, keeping any row stored concurrently."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "user_id": str(user_id),
                    "day": day.isoformat(),
                    "nutrients": nutrients,
                    "version": 0,
                },
                on_conflict="user_id,day",
                ignore_duplicates=True,
            )
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        existing = self.get_row(user_id, day)
        if existing is None:
            raise RuntimeError("Failed to create daily intake")
        return existing

    def update_nutrients(
        self, row: DailyLedgerRow, nutrients: dict[str, float | None]
    ) -> DailyLedgerRow:
        """Write nutrients only if the stored version still matches the row."""
        response = (
            self.client.table(self.table_name)
            .update({"nutrients": nutrients, "version": row.version + 1})
            .eq("id", str(row.id))
            .eq("version", row.version)
            .execute()
        )
        if not response.data:
            raise RuntimeError(
                f"Daily intake {row.id} was modified concurrently or no longer exists"
            )
        return _parse_row(response.data[0])

    def list_rows(self, user_id: UUID, start: date, end: date) -> list[DailyLedgerRow]:
        """Return rows for a user between two days, inclusive."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("day", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> DailyLedgerRow:
    raw_nutrients = row.get("nutrients") or {}
    return DailyLedgerRow(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["day"])),
        nutrients={
            str(name): float(value) if value is not None else None
            for name, value in raw_nutrients.items()
        },
        version=int(row.get("version") or 0),
    )
