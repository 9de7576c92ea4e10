"""Week and month intake projections.

Days already lived contribute what their ledger rows hold (the baseline
minus whatever was consumed). Days still ahead contribute a full, freshly
computed baseline, so profile changes apply to the rest of the period.
"""

import calendar
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from nutrient_ledger.domain.ledger import DailyLedgerRow
from nutrient_ledger.services.intake import LedgerRepository, calculate_daily_intake
from nutrient_ledger.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


def week_window(today: date) -> tuple[date, date]:
    """Return the Monday and Sunday of today's week."""
    start = today - timedelta(days=today.weekday())
    return start, start + timedelta(days=6)


def month_window(today: date) -> tuple[date, date]:
    """Return the first and last day of today's month."""
    days_in_month = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=days_in_month)


def project_window(
    rows: list[DailyLedgerRow],
    baseline: dict[str, float | None],
    today: date,
    window_end: date,
) -> dict[str, float]:
    """Combine realized row values with the baseline for the remaining days."""
    realized: dict[str, float] = {}
    for row in rows:
        for name, value in row.nutrients.items():
            realized[name] = realized.get(name, 0.0) + (value or 0.0)

    remaining_days = (window_end - today).days
    return {
        name: realized.get(name, 0.0) + (daily or 0.0) * remaining_days
        for name, daily in baseline.items()
    }


@dataclass
class ProjectionService:
    """Computes adjusted cumulative intake for the current week or month."""

    profile_service: ProfileService
    repository: LedgerRepository
    clock: Callable[[], date] = date.today

    def adjusted_weekly(
        self, user_id: UUID, today: date | None = None
    ) -> dict[str, float]:
        """Return the adjusted intake for Monday through Sunday."""
        day = today or self.clock()
        start, end = week_window(day)
        return self._project(user_id, day, start, end)

    def adjusted_monthly(
        self, user_id: UUID, today: date | None = None
    ) -> dict[str, float]:
        """Return the adjusted intake for the calendar month."""
        day = today or self.clock()
        start, end = month_window(day)
        return self._project(user_id, day, start, end)

    def _project(
        self, user_id: UUID, today: date, start: date, end: date
    ) -> dict[str, float]:
        profile = self.profile_service.get_profile(user_id)
        baseline = calculate_daily_intake(profile)
        rows = [
            row
            for row in self.repository.list_rows(user_id, start, today)
            if start <= row.day <= today
        ]
        _logger.debug(
            "Projecting %s..%s for user %s from %s stored days",
            start,
            end,
            user_id,
            len(rows),
        )
        return project_window(rows, baseline, today, end)
