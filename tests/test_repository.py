"""
Tests for the key-value persistence layer.
"""

import datetime
from decimal import Decimal
import pytest

from timemanager.domain.models import Task, TimeLog, Transaction, Category, Priority
from timemanager.infra.db import MemoryKeyValueStore, SqlKeyValueStore, open_store
from timemanager.infra.repository import (
    StateRepository, TASKS_KEY, LOGS_KEY, TRANSACTIONS_KEY, CATEGORIES_KEY, BALANCE_KEY, LAST_CHECKED_KEY,
)


CREATED = datetime.datetime(2026, 10, 19, 10, 30)


class TestKeyValueStores:

    @pytest.fixture(params=["sql", "memory"])
    def kv(self, request, kv_store):
        return kv_store if request.param == "sql" else MemoryKeyValueStore()

    def test_set_get_overwrite_delete(self, kv):
        assert kv.get("missing") is None
        kv.set("k", "one")
        kv.set("k", "two")
        assert kv.get("k") == "two"
        kv.delete("k")
        kv.delete("k")
        assert kv.get("k") is None

    def test_unicode_text(self, kv):
        kv.set("k", '["Água", "Übung"]')
        assert kv.get("k") == '["Água", "Übung"]'

    def test_sqlite_file_survives_reopen(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'state.db'}"
        first = SqlKeyValueStore(url)
        first.set("tm_balance", "12.50")
        first.dispose()

        second = open_store(url)
        assert second.get("tm_balance") == "12.50"
        second.dispose()

    def test_open_store_memory(self):
        assert isinstance(open_store("memory"), MemoryKeyValueStore)


class TestRoundTrip:

    def test_collections_round_trip(self, repository):
        tasks = [
            Task(id=3, title="Newest", priority=Priority.HIGH, done=True, created=CREATED),
            Task(id=1, title="Oldest", priority=Priority.LOW, created=CREATED),
        ]
        logs = [TimeLog(id=5, duration_seconds=61, created=CREATED, task_id=3), TimeLog(id=4, duration_seconds=1, created=CREATED)]
        transactions = [Transaction(id=2, description="Rent", amount=Decimal("-300.00"), category="Housing", created=CREATED)]
        categories = [Category(name="Food", value=Decimal("75")), Category(name="Fun", value=Decimal("12.34"))]

        repository.save_tasks(tasks)
        repository.save_time_logs(logs)
        repository.save_transactions(transactions)
        repository.save_categories(categories)
        repository.save_balance(Decimal("100.00"))

        fresh = StateRepository(repository.store)
        assert fresh.load_tasks() == tasks
        assert fresh.load_time_logs() == logs
        assert fresh.load_transactions() == transactions
        assert fresh.load_categories() == categories
        assert fresh.load_balance() == Decimal("100.00")

    def test_last_checked_date(self, repository):
        assert repository.load_last_checked_date() is None
        repository.save_last_checked_date(datetime.date(2026, 9, 30))
        assert repository.load_last_checked_date() == datetime.date(2026, 9, 30)


class TestMalformedValues:
    """Broken stored data loads as empty state instead of failing."""

    @pytest.mark.parametrize("key,loader", [
        (TASKS_KEY, "load_tasks"),
        (LOGS_KEY, "load_time_logs"),
        (TRANSACTIONS_KEY, "load_transactions"),
        (CATEGORIES_KEY, "load_categories"),
    ])
    @pytest.mark.parametrize("raw", ["not json", "{}", '[{"id": "x"}]', '[{"id": 1, "title": ""}]'])
    def test_collections_fall_back_to_empty(self, repository, key, loader, raw):
        repository.store.set(key, raw)
        assert getattr(repository, loader)() == []

    def test_missing_values(self, repository):
        assert repository.load_tasks() == []
        assert repository.load_balance() == Decimal("0")

    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity"])
    def test_balance_falls_back_to_zero(self, repository, raw):
        repository.store.set(BALANCE_KEY, raw)
        assert repository.load_balance() == Decimal("0")

    def test_malformed_date(self, repository):
        repository.store.set(LAST_CHECKED_KEY, "yesterday")
        assert repository.load_last_checked_date() is None

    def test_malformed_value_is_logged(self, repository, caplog):
        repository.store.set(TASKS_KEY, "[oops")
        with caplog.at_level("WARNING"):
            repository.load_tasks()
        assert TASKS_KEY in caplog.text
