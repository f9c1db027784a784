"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. The dashboard store only sees
lists of domain models; how they become text under which key lives here.
- Each collection is stored independently under its own key
- Loading never fails: missing or malformed values fall back to empty state
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Optional, TypeVar
import logging

from pydantic import TypeAdapter, ValidationError

from timemanager.domain.models import Task, TimeLog, Transaction, Category
from timemanager.infra.db import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

TASKS_KEY = "tm_tasks"
LOGS_KEY = "tm_logs"
TRANSACTIONS_KEY = "tm_txns"
CATEGORIES_KEY = "tm_cats"
BALANCE_KEY = "tm_balance"
LAST_CHECKED_KEY = "tm_last_checked_date"

# Written by the login page; only ever removed here
SESSION_KEYS = ("loggedIn", "userEmail")

_tasks_adapter = TypeAdapter(List[Task])
_logs_adapter = TypeAdapter(List[TimeLog])
_transactions_adapter = TypeAdapter(List[Transaction])
_categories_adapter = TypeAdapter(List[Category])


class StateRepository:
    """
    Handles persistence of the dashboard state in a key-value store.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _load_list(self, key: str, adapter: TypeAdapter) -> List[T]:
        raw = self.store.get(key)
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding malformed value under %r: %s", key, e)
            return []

    def _save_list(self, key: str, adapter: TypeAdapter, items: List[T]) -> None:
        self.store.set(key, adapter.dump_json(items).decode("utf-8"))

    # Tasks
    def load_tasks(self) -> List[Task]:
        return self._load_list(TASKS_KEY, _tasks_adapter)

    def save_tasks(self, tasks: List[Task]) -> None:
        self._save_list(TASKS_KEY, _tasks_adapter, tasks)

    # Time logs
    def load_time_logs(self) -> List[TimeLog]:
        return self._load_list(LOGS_KEY, _logs_adapter)

    def save_time_logs(self, logs: List[TimeLog]) -> None:
        self._save_list(LOGS_KEY, _logs_adapter, logs)

    # Transactions
    def load_transactions(self) -> List[Transaction]:
        return self._load_list(TRANSACTIONS_KEY, _transactions_adapter)

    def save_transactions(self, transactions: List[Transaction]) -> None:
        self._save_list(TRANSACTIONS_KEY, _transactions_adapter, transactions)

    # Categories
    def load_categories(self) -> List[Category]:
        return self._load_list(CATEGORIES_KEY, _categories_adapter)

    def save_categories(self, categories: List[Category]) -> None:
        self._save_list(CATEGORIES_KEY, _categories_adapter, categories)

    # Balance
    def load_balance(self) -> Decimal:
        """Get the starting balance, zero if unset or unreadable"""
        raw = self.store.get(BALANCE_KEY)
        if raw is None:
            return Decimal("0")
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning("Discarding malformed balance %r", raw)
            return Decimal("0")
        if not value.is_finite():
            logger.warning("Discarding non-finite balance %r", raw)
            return Decimal("0")
        return value

    def save_balance(self, balance: Decimal) -> None:
        self.store.set(BALANCE_KEY, str(balance))

    # Month rollover bookkeeping
    def load_last_checked_date(self) -> Optional[date]:
        raw = self.store.get(LAST_CHECKED_KEY)
        if raw is None:
            return None
        try:
            return date.fromisoformat(raw.strip()[:10])
        except ValueError:
            logger.warning("Discarding malformed last-checked date %r", raw)
            return None

    def save_last_checked_date(self, day: date) -> None:
        self.store.set(LAST_CHECKED_KEY, day.isoformat())

    def clear_session(self) -> None:
        """Forget the signed-in user (stub logout)"""
        for key in SESSION_KEYS:
            self.store.delete(key)
