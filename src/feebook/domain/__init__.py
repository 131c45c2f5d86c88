"""Domain layer: Contact and its value objects. No dependencies on outer layers."""

from feebook.domain.entities import (
    MONTH_PATTERN,
    Contact,
    MonthPaid,
    Tag,
    as_months,
    invalid_month_message,
)

__all__ = ["MONTH_PATTERN", "Contact", "MonthPaid", "Tag", "as_months", "invalid_month_message"]
