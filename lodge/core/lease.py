from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from lodge.config import settings


def lease_end(period_from: date, months: Optional[int] = None) -> date:
    """
    Compute the end of a lease term starting on period_from.

    The day of month is kept; when the target month is shorter the date is
    clamped to its last day (2024-03-31 + 11 months -> 2025-02-28).
    """
    if months is None:
        months = settings.LEASE_TERM_MONTHS
    return period_from + relativedelta(months=months)


def resolve_period(
    period_from: Optional[date], period_to: Optional[date]
) -> tuple[Optional[date], Optional[date]]:
    """
    Fill in a missing period_to from period_from.

    An explicit period_to is always kept as supplied.
    """
    if period_to is None and period_from is not None:
        period_to = lease_end(period_from)
    return period_from, period_to
