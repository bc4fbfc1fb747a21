"""Canonical bonus rule.

The percentage depends only on the number of approved leaves in the window
being judged; the amount is that percentage of a standard month's pay.
"""

from __future__ import annotations

from typing import Optional

from ..core.constants import BONUS_LADDER, MONTHLY_BONUS_HOURS


def bonus_percentage(approved_leaves: int) -> int:
    for max_leaves, percentage in BONUS_LADDER:
        if approved_leaves <= max_leaves:
            return percentage
    return 0


def is_eligible(approved_leaves: int) -> bool:
    return bonus_percentage(approved_leaves) > 0


def bonus_amount(hourly_rate: Optional[float], percentage: int) -> float:
    if not hourly_rate:
        return 0.0
    return round(float(hourly_rate) * MONTHLY_BONUS_HOURS * (percentage / 100), 2)
