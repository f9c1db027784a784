"""
Tests for the pure aggregation functions behind the dashboard and charts.
"""

import datetime
from decimal import Decimal
import pytest

from timemanager.domain.models import Task, TimeLog, Transaction, Category, DEFAULT_PALETTE
from timemanager.services import aggregation


TODAY = datetime.date(2026, 10, 19)


def txn(id_, amount, created):
    return Transaction(id=id_, description=f"txn {id_}", amount=Decimal(amount), created=created)


class TestLastMonths:

    def test_six_months_end_at_current_month(self):
        months = aggregation.last_months(6, TODAY)
        assert [m.key for m in months] == [
            "2026-05", "2026-06", "2026-07", "2026-08", "2026-09", "2026-10"
        ]
        assert months[-1].label == "Oct 2026"
        assert months[0].start == datetime.date(2026, 5, 1)

    def test_window_crosses_year_boundary(self):
        months = aggregation.last_months(4, datetime.date(2026, 2, 28))
        assert [m.key for m in months] == ["2025-11", "2025-12", "2026-01", "2026-02"]

    def test_non_positive_count_is_empty(self):
        assert aggregation.last_months(0, TODAY) == []


class TestMonthlySeries:

    def test_no_transactions_gives_zero_buckets(self):
        series = aggregation.monthly_series([], 6, TODAY)
        assert len(series.keys) == 6
        assert len(set(series.keys)) == 6
        assert series.keys == sorted(series.keys)
        assert series.keys[-1] == "2026-10"
        assert series.income == [Decimal("0")] * 6
        assert series.expense == [Decimal("0")] * 6

    def test_buckets_split_income_and_expense(self):
        transactions = [
            txn(1, "500.00", datetime.datetime(2026, 10, 1, 9, 0)),
            txn(2, "-300.00", datetime.datetime(2026, 10, 2, 9, 0)),
            txn(3, "-20.555", datetime.datetime(2026, 9, 30, 23, 59)),
            txn(4, "120", datetime.datetime(2026, 5, 1, 0, 0)),
        ]
        series = aggregation.monthly_series(transactions, 6, TODAY)

        assert series.income == [Decimal("120.00"), 0, 0, 0, 0, Decimal("500.00")]
        assert series.expense == [0, 0, 0, 0, Decimal("20.56"), Decimal("300.00")]

    def test_transactions_outside_window_are_excluded(self):
        transactions = [
            txn(1, "999", datetime.datetime(2026, 4, 30, 12, 0)),   # one month too old
            txn(2, "-50", datetime.datetime(2026, 11, 1, 8, 0)),    # future month
            txn(3, "10", datetime.datetime(2026, 10, 19, 8, 0)),
        ]
        series = aggregation.monthly_series(transactions, 6, TODAY)
        assert sum(series.income) == Decimal("10")
        assert sum(series.expense) == Decimal("0")

    def test_zero_amount_counts_as_income(self):
        transactions = [
            txn(1, "0", datetime.datetime(2026, 10, 3, 12, 0)),
            txn(2, "-4", datetime.datetime(2026, 10, 4, 12, 0)),
        ]
        series = aggregation.monthly_series(transactions, 1, TODAY)
        assert series.income == [Decimal("0.00")]
        assert series.expense == [Decimal("4.00")]

        summary = aggregation.finance_summary(transactions, Decimal("0"))
        assert summary.income == 0
        assert summary.expense == Decimal("4")

    def test_stored_amount_beyond_context_precision(self):
        transactions = [
            txn(1, "1e30", datetime.datetime(2026, 10, 3, 12, 0)),
            txn(2, "-123456789012345678901234567", datetime.datetime(2026, 10, 4, 12, 0)),
        ]
        series = aggregation.monthly_series(transactions, 1, TODAY)
        assert series.income == [Decimal("1e30")]
        assert series.expense == [Decimal("123456789012345678901234567.00")]


class TestFinanceSummary:

    def test_empty_ledger_net_is_balance(self):
        summary = aggregation.finance_summary([], Decimal("12.34"))
        assert summary.income == 0
        assert summary.expense == 0
        assert summary.net == Decimal("12.34")

    def test_expense_reported_as_absolute(self):
        transactions = [txn(1, "-10", datetime.datetime(2026, 1, 1)), txn(2, "-5.5", datetime.datetime(2026, 1, 2))]
        summary = aggregation.finance_summary(transactions, Decimal("0"))
        assert summary.expense == Decimal("15.5")
        assert summary.net == Decimal("-15.5")


def test_today_minutes_counts_only_today():
    logs = [
        TimeLog(id=1, duration_seconds=600, created=datetime.datetime(2026, 10, 19, 0, 0, 1)),
        TimeLog(id=2, duration_seconds=29, created=datetime.datetime(2026, 10, 19, 23, 59)),
        TimeLog(id=3, duration_seconds=3600, created=datetime.datetime(2026, 10, 18, 23, 59)),
    ]
    assert aggregation.today_minutes(logs, TODAY) == 10


def test_active_task_count():
    tasks = [
        Task(id=1, title="a", done=False),
        Task(id=2, title="b", done=True),
        Task(id=3, title="c"),
    ]
    assert aggregation.active_task_count(tasks) == 2


class TestColors:

    def test_palette_prefix_when_it_fits(self):
        assert aggregation.generate_colors(3) == DEFAULT_PALETTE[:3]

    def test_palette_cycles_when_categories_outnumber_it(self):
        colors = aggregation.generate_colors(len(DEFAULT_PALETTE) + 2)
        assert colors[len(DEFAULT_PALETTE)] == DEFAULT_PALETTE[0]
        assert colors[len(DEFAULT_PALETTE) + 1] == DEFAULT_PALETTE[1]

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_custom_palette(self, count):
        palette = ["#111111", "#222222"]
        colors = aggregation.generate_colors(count, palette)
        assert len(colors) == count
        assert set(colors) <= set(palette)


def test_category_series():
    categories = [Category(name="Rent", value=Decimal("1200")), Category(name="Food", value=Decimal("300"))]
    series = aggregation.category_series(categories)
    assert series.labels == ["Rent", "Food"]
    assert series.values == [Decimal("1200"), Decimal("300")]
    assert series.colors == DEFAULT_PALETTE[:2]
