"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Records are mirrored to a key-value store as JSON text. Pydantic validates them
on the way back in, so a malformed stored value is detected at load time instead
of surfacing later as a broken chart or summary.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class Priority(str, Enum):
    """Task priority as chosen in the task form"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimerStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class Task(BaseModel):
    """
    Represents a to-do item on the task list.

    The id is the creation timestamp in milliseconds and doubles as the
    default sort key (newest first).
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    title: str = Field(..., min_length=1)
    priority: Priority = Priority.MEDIUM
    done: bool = False
    created: datetime = Field(default_factory=datetime.now)


class TimeLog(BaseModel):
    """
    Represents one completed timer session.

    task_id is a weak reference: the task may have been deleted since,
    in which case lookups simply find nothing.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    duration_seconds: int = Field(..., ge=1)
    created: datetime = Field(default_factory=datetime.now)
    task_id: Optional[int] = None


class Transaction(BaseModel):
    """
    A ledger entry. Positive amounts are income, negative amounts are expenses.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    description: str = Field(..., min_length=1)
    amount: Decimal
    category: str = ""
    created: datetime = Field(default_factory=datetime.now)


class Category(BaseModel):
    """
    A budget bucket for the pie chart.

    The value is entered by hand and is independent of the transactions.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str = Field(..., min_length=1)
    value: Decimal


class TimerState(BaseModel):
    """Snapshot of the stopwatch. Never persisted."""
    status: TimerStatus = TimerStatus.IDLE
    seconds: int = Field(default=0, ge=0)
    task_id: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.status == TimerStatus.RUNNING


class FinanceSummary(BaseModel):
    """Dashboard figures; expense is reported as an absolute value"""
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    net: Decimal = Decimal("0")


class MonthBucket(BaseModel):
    """One calendar month of the rolling window"""
    key: str  # YYYY-MM
    label: str
    start: date


class MonthlySeries(BaseModel):
    """Income/expense totals per month, oldest month first"""
    keys: List[str] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)
    income: List[Decimal] = Field(default_factory=list)
    expense: List[Decimal] = Field(default_factory=list)


class CategorySeries(BaseModel):
    labels: List[str] = Field(default_factory=list)
    values: List[Decimal] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)


DEFAULT_PALETTE: List[str] = [
    "#00d0ff", "#008fb3", "#00b894", "#6c5ce7", "#fd79a8", "#e17055",
    "#00cec9", "#fab1a0", "#74b9ff", "#a29bfe", "#55efc4", "#ffeaa7",
]


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    This allows users to customize behavior without touching code.
    """
    model_config = ConfigDict(from_attributes=True)

    # Locale settings
    language: str = Field(default="auto", description="UI language: 'en', 'de', 'pt' or 'auto' (detect from system)")
    currency: str = Field(default="BRL", description="ISO currency code used when formatting money")

    # Dashboard settings
    month_window: int = Field(default=6, ge=1, le=24, description="Number of months shown in the bar chart")
    recent_task_limit: int = Field(default=5, ge=0, description="Tasks listed on the dashboard")
    rollover_check_seconds: int = Field(default=60, ge=1, description="How often to check for a new month")
    chart_palette: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PALETTE),
        min_length=1,
        description="Colours cycled over the pie chart slices"
    )
