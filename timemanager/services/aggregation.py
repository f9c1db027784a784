"""
Aggregation functions behind the dashboard figures and the two charts.

Everything here is pure: the collections and the reference date are passed
in, nothing is mutated, and the same inputs always give the same output.
"""

import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, Iterable, List, Optional, Sequence

from timemanager.domain.models import (
    Task, TimeLog, Transaction, Category,
    FinanceSummary, MonthBucket, MonthlySeries, CategorySeries, DEFAULT_PALETTE,
)
from timemanager.i18n import format_month

CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    """Round half up to cents, with precision for any stored magnitude"""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def month_key(moment: datetime.date) -> str:
    """Bucket key for a date or datetime, e.g. '2026-10'"""
    return f"{moment.year}-{moment.month:02d}"


def today_minutes(logs: Iterable[TimeLog], today: datetime.date) -> int:
    """Minutes logged on the given calendar day, rounded to the nearest minute"""
    seconds = sum(log.duration_seconds for log in logs if log.created.date() == today)
    return int((Decimal(seconds) / 60).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def active_task_count(tasks: Iterable[Task]) -> int:
    return sum(1 for task in tasks if not task.done)


def finance_summary(transactions: Iterable[Transaction], balance: Decimal) -> FinanceSummary:
    """
    Income, expense and net balance.

    Args:
        transactions: Ledger entries (sign gives the direction)
        balance: Starting balance declared by the user

    Returns:
        FinanceSummary with expense as an absolute value
    """
    income = Decimal("0")
    expense = Decimal("0")
    for txn in transactions:
        if txn.amount > 0:
            income += txn.amount
        elif txn.amount < 0:
            expense += txn.amount
    return FinanceSummary(income=income, expense=abs(expense), net=balance + income + expense)


def last_months(count: int, today: datetime.date, lang: Optional[str] = None) -> List[MonthBucket]:
    """
    The rolling window: `count` calendar months ending at today's month.

    Returns:
        Buckets ordered oldest first
    """
    buckets: List[MonthBucket] = []
    for offset in range(count - 1, -1, -1):
        # Walk back whole months from the current one
        year, month = divmod(today.year * 12 + today.month - 1 - offset, 12)
        start = datetime.date(year, month + 1, 1)
        buckets.append(MonthBucket(key=month_key(start), label=format_month(start, lang), start=start))
    return buckets


def monthly_series(transactions: Iterable[Transaction], count: int,
                   today: datetime.date, lang: Optional[str] = None) -> MonthlySeries:
    """
    Income and expense totals for each month of the rolling window.

    Transactions dated outside the window are left out entirely.
    """
    months = last_months(count, today, lang)
    index: Dict[str, int] = {bucket.key: i for i, bucket in enumerate(months)}
    incomes = [Decimal("0")] * len(months)
    expenses = [Decimal("0")] * len(months)

    for txn in transactions:
        i = index.get(month_key(txn.created))
        if i is None:
            continue
        if txn.amount >= 0:
            incomes[i] += txn.amount
        else:
            expenses[i] += abs(txn.amount)

    return MonthlySeries(
        keys=[bucket.key for bucket in months],
        labels=[bucket.label for bucket in months],
        income=[to_cents(value) for value in incomes],
        expense=[to_cents(value) for value in expenses],
    )


def generate_colors(count: int, palette: Sequence[str] = DEFAULT_PALETTE) -> List[str]:
    """Slice colours, cycling the palette when there are more slices than colours"""
    return [palette[i % len(palette)] for i in range(count)]


def category_series(categories: Sequence[Category],
                    palette: Sequence[str] = DEFAULT_PALETTE) -> CategorySeries:
    """Pie chart data in insertion order"""
    return CategorySeries(
        labels=[c.name for c in categories],
        values=[c.value for c in categories],
        colors=generate_colors(len(categories), palette),
    )
