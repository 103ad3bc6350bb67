"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: Rental period from fecha_inicio to fecha_fin
"""

from dataclasses import dataclass
from datetime import date

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a rental period. Unlike hotel stays, a same-day rental is
    valid: start_date may equal end_date, and it is billed as one day.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValueError(f"End date ({self.end_date}) must not be before start date ({self.start_date})")

