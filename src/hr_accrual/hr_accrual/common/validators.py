from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError
from .datetime_utils import to_local_date


def require_date_order(start: date, end: date) -> None:
    """Pre-check for leave ranges: the end date may not precede the start date."""
    if to_local_date(end) < to_local_date(start):
        raise ValidationError("End date must be on or after the start date")
