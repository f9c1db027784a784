"""
Dashboard Store - the single owner of all dashboard state.

Architecture Decision: Explicit instance instead of a global singleton
The store is constructed with its repository and clock and handed to whoever
renders or aggregates. Tests build one over an in-memory store without any UI.

Every mutation follows the same steps:
1. change the in-memory collection
2. flush that collection through the repository
3. emit `changed(section)` so the presentation layer can re-render

Invalid input and unknown ids are silently ignored; the state stays as it was.
"""

import datetime
import logging
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from timemanager.domain.models import (
    Priority, Task, TimeLog, Transaction, Category, TimerState,
    FinanceSummary, MonthlySeries, CategorySeries, UserPreferences,
)
from timemanager.i18n import tr
from timemanager.infra.repository import StateRepository
from timemanager.services import aggregation
from timemanager.services.rollover_service import MonthRolloverWatcher
from timemanager.services.timer_service import WorkTimer
from timemanager.utils import parse_decimal

logger = logging.getLogger(__name__)

# Sections passed with the changed signal
TASKS = "tasks"
LOGS = "logs"
FINANCE = "finance"
MONTHLY = "monthly"
CATEGORIES = "categories"


class DashboardStore(QObject):
    """
    In-memory tasks, time logs, transactions, categories and balance,
    mirrored to a key-value store after every change.
    """

    changed = Signal(str)  # section name
    session_ended = Signal()

    def __init__(self, repository: StateRepository,
                 preferences: Optional[UserPreferences] = None,
                 clock: Callable[[], datetime.datetime] = datetime.datetime.now,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.repository = repository
        self.preferences = preferences or UserPreferences()
        self.clock = clock

        self._tasks: List[Task] = repository.load_tasks()
        self._logs: List[TimeLog] = repository.load_time_logs()
        self._transactions: List[Transaction] = repository.load_transactions()
        self._categories: List[Category] = repository.load_categories()
        self._balance: Decimal = repository.load_balance()

        # lowercased name -> position in _categories
        self._category_index: Dict[str, int] = {}
        self._rebuild_category_index()

        all_ids = [r.id for r in self._tasks] + [r.id for r in self._logs] + [r.id for r in self._transactions]
        self._last_id: int = max(all_ids, default=0)

        self.timer = WorkTimer(self)
        self.rollover = MonthRolloverWatcher(
            repository, clock=clock,
            interval_seconds=self.preferences.rollover_check_seconds,
            parent=self
        )
        self.rollover.month_changed.connect(lambda _key: self.changed.emit(MONTHLY))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _next_id(self) -> int:
        """Creation timestamp in ms, bumped if the clock has not moved on"""
        stamp = int(self.clock().timestamp() * 1000)
        self._last_id = max(stamp, self._last_id + 1)
        return self._last_id

    def _rebuild_category_index(self) -> None:
        self._category_index = {c.name.lower(): i for i, c in enumerate(self._categories)}

    def _today(self) -> datetime.date:
        return self.clock().date()

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def add_task(self, title: str, priority: Any = Priority.MEDIUM) -> None:
        title = (title or "").strip()
        if not title:
            logger.debug("Ignoring task with empty title")
            return
        try:
            priority = Priority(priority)
        except ValueError:
            logger.debug("Ignoring task with unknown priority %r", priority)
            return

        task = Task(id=self._next_id(), title=title, priority=priority, done=False, created=self.clock())
        self._tasks.insert(0, task)
        self.repository.save_tasks(self._tasks)
        self.changed.emit(TASKS)

    def toggle_task(self, task_id: int) -> None:
        position = next((i for i, t in enumerate(self._tasks) if t.id == task_id), None)
        if position is None:
            return
        task = self._tasks[position]
        self._tasks[position] = task.model_copy(update={"done": not task.done})
        self.repository.save_tasks(self._tasks)
        self.changed.emit(TASKS)

    def delete_task(self, task_id: int) -> None:
        """Remove a task. Time logs pointing at it keep their task_id."""
        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            return
        self._tasks = remaining
        if self.timer.task_id == task_id:
            self.timer.select_task(None)
        self.repository.save_tasks(self._tasks)
        self.changed.emit(TASKS)

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def select_timer_task(self, task_id: Optional[int]) -> None:
        self.timer.select_task(task_id)

    def start_timer(self) -> None:
        self.timer.start()

    def pause_timer(self) -> None:
        self.timer.pause()

    def stop_timer(self) -> None:
        """Stop the timer and log the session if at least one second elapsed"""
        seconds = self.timer.stop()
        if not seconds:
            return

        log = TimeLog(id=self._next_id(), duration_seconds=seconds,
                      created=self.clock(), task_id=self.timer.task_id)
        self._logs.insert(0, log)
        self.repository.save_time_logs(self._logs)
        self.changed.emit(LOGS)

    # ------------------------------------------------------------------
    # Finance
    # ------------------------------------------------------------------

    def add_transaction(self, description: str, amount: Any, category: str = "") -> None:
        description = (description or "").strip()
        value = parse_decimal(amount)
        if not description or value is None:
            logger.debug("Ignoring invalid transaction %r / %r", description, amount)
            return

        txn = Transaction(id=self._next_id(), description=description, amount=value,
                          category=category or "", created=self.clock())
        self._transactions.insert(0, txn)
        self.repository.save_transactions(self._transactions)
        self.changed.emit(FINANCE)
        self.changed.emit(MONTHLY)

    def set_balance(self, amount: Any) -> None:
        value = parse_decimal(amount)
        if value is None:
            logger.debug("Ignoring invalid balance %r", amount)
            return
        self._balance = value
        self.repository.save_balance(self._balance)
        self.changed.emit(FINANCE)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def add_or_update_category(self, name: str, value: Any) -> None:
        """
        Insert a category, or update the value of one with the same name
        (case-insensitive). An existing entry keeps its original casing.
        """
        name = (name or "").strip()
        amount = parse_decimal(value)
        if not name or amount is None:
            logger.debug("Ignoring invalid category %r / %r", name, value)
            return

        position = self._category_index.get(name.lower())
        if position is not None:
            category = self._categories[position]
            self._categories[position] = category.model_copy(update={"value": amount})
        else:
            self._categories.append(Category(name=name, value=amount))
            self._category_index[name.lower()] = len(self._categories) - 1
        self.repository.save_categories(self._categories)
        self.changed.emit(CATEGORIES)

    def delete_category(self, index: int) -> None:
        """Remove the category at a position of the current list"""
        if not 0 <= index < len(self._categories):
            return
        del self._categories[index]
        self._rebuild_category_index()
        self.repository.save_categories(self._categories)
        self.changed.emit(CATEGORIES)

    def clear_categories(self) -> None:
        self._categories = []
        self._rebuild_category_index()
        self.repository.save_categories(self._categories)
        self.changed.emit(CATEGORIES)

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def logout(self) -> None:
        """Stub logout: forget the session keys, leave the data alone"""
        self.repository.clear_session()
        self.session_ended.emit()

    # ------------------------------------------------------------------
    # Background checks
    # ------------------------------------------------------------------

    def start_rollover_checks(self) -> None:
        self.rollover.start()

    def stop_rollover_checks(self) -> None:
        self.rollover.stop()

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def time_logs(self) -> List[TimeLog]:
        return list(self._logs)

    @property
    def transactions(self) -> List[Transaction]:
        return list(self._transactions)

    @property
    def categories(self) -> List[Category]:
        return list(self._categories)

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def timer_state(self) -> TimerState:
        return self.timer.state()

    def find_task(self, task_id: Optional[int]) -> Optional[Task]:
        """Task with this id, or None"""
        if task_id is None:
            return None
        return next((t for t in self._tasks if t.id == task_id), None)

    def task_label(self, task_id: Optional[int]) -> str:
        """Title for a time log; deleted or missing tasks get a generic label"""
        task = self.find_task(task_id)
        return task.title if task else tr("timer.generic_activity")

    def recent_tasks(self, limit: Optional[int] = None) -> List[Task]:
        if limit is None:
            limit = self.preferences.recent_task_limit
        return self._tasks[:limit]

    # ------------------------------------------------------------------
    # Derived figures
    # ------------------------------------------------------------------

    def today_minutes(self) -> int:
        return aggregation.today_minutes(self._logs, self._today())

    def active_task_count(self) -> int:
        return aggregation.active_task_count(self._tasks)

    def finance_summary(self) -> FinanceSummary:
        return aggregation.finance_summary(self._transactions, self._balance)

    def monthly_series(self, count: Optional[int] = None) -> MonthlySeries:
        if count is None:
            count = self.preferences.month_window
        return aggregation.monthly_series(self._transactions, count, self._today())

    def category_series(self) -> CategorySeries:
        return aggregation.category_series(self._categories, self.preferences.chart_palette)
