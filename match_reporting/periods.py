from __future__ import annotations

import math
from datetime import datetime, timedelta

from .types import GroupBy


def _js_weekday(dt: datetime) -> int:
    # Sunday = 0 ... Saturday = 6
    return (dt.weekday() + 1) % 7


def period_key(dt: datetime, group_by: str) -> str:
    """Bucket label for ``dt`` at the requested granularity.

    Weeks are Sunday-based and numbered within the month
    (``ceil((day + weekday) / 7)``), not ISO-8601 weeks. ``day`` and
    unknown values fall back to the month label.
    """
    group = group_by.value if isinstance(group_by, GroupBy) else str(group_by)

    if group == GroupBy.WEEK.value:
        dow = _js_weekday(dt)
        week_start = dt - timedelta(days=dow)
        week_number = math.ceil((dt.day + dow) / 7)
        return f"{week_start.year}-W{week_number:02d}"
    if group == GroupBy.QUARTER.value:
        return f"{dt.year}-Q{math.ceil(dt.month / 3)}"
    if group == GroupBy.YEAR.value:
        return f"{dt.year}"
    return f"{dt.year}-{dt.month:02d}"
