"""Domain layer - Pure business entities and logic"""

from .models import (
    Priority,
    TimerStatus,
    Task,
    TimeLog,
    Transaction,
    Category,
    TimerState,
    FinanceSummary,
    MonthBucket,
    MonthlySeries,
    CategorySeries,
    UserPreferences,
)

__all__ = [
    "Priority",
    "TimerStatus",
    "Task",
    "TimeLog",
    "Transaction",
    "Category",
    "TimerState",
    "FinanceSummary",
    "MonthBucket",
    "MonthlySeries",
    "CategorySeries",
    "UserPreferences",
]
