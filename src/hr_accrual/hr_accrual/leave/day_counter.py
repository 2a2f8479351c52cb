"""Inclusive day counting for leave ranges."""

from __future__ import annotations

from datetime import date

from ..common.datetime_utils import to_local_date


def count_days(start: date, end: date) -> int:
    """Number of calendar days covered by ``start..end``, both ends included.

    Both values are normalized to their local calendar date first, so the
    time-of-day of a datetime never changes the result. A swapped range is
    counted by its absolute span (``count_days(d + 4, d) == 5``); callers that
    need to refuse it use ``require_date_order``.
    """
    span = to_local_date(end) - to_local_date(start)
    return abs(span.days) + 1
