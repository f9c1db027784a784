"""
Data Seeder for Time Manager.
Populates the configured store with realistic data for testing and demo purposes.
"""

import sys
import random
from datetime import datetime, timedelta
from pathlib import Path
from PySide6.QtCore import QCoreApplication

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from timemanager.infra.config import get_settings
from timemanager.infra.db import open_store
from timemanager.infra.repository import StateRepository
from timemanager.services import DashboardStore


class ShiftedClock:
    """Clock that can be moved back in time while seeding"""

    def __init__(self):
        self.moment = datetime.now()

    def __call__(self) -> datetime:
        return self.moment


def seed():
    # QTimer needs an application instance even without an event loop
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)

    settings = get_settings()
    print(f"Seeding store at: {settings.get_db_url()}")

    clock = ShiftedClock()
    store = DashboardStore(StateRepository(open_store(settings.get_db_url())),
                           preferences=settings.preferences, clock=clock)

    # 1. Tasks
    for title, priority in [("Write monthly report", "high"), ("Review budget", "medium"),
                            ("Clean inbox", "low"), ("Plan next sprint", "medium")]:
        print(f"Creating task: {title}")
        store.add_task(title, priority)
    store.toggle_task(store.tasks[-1].id)

    # 2. Finance: starting balance and six months of salary/rent/groceries
    store.set_balance("1500.00")
    now = datetime.now()
    for months_back in range(5, -1, -1):
        clock.moment = now - timedelta(days=30 * months_back)
        store.add_transaction("Salary", "4200.00", "Income")
        store.add_transaction("Rent", "-1800.00", "Housing")
        store.add_transaction("Groceries", f"-{random.randint(350, 700)}.{random.randint(0, 99):02d}", "Food")
        print(f"Generated transactions for {clock.moment:%Y-%m}")
    clock.moment = now

    # 3. Categories for the pie chart
    for name, value in [("Housing", "1800"), ("Food", "600"), ("Transport", "250"), ("Leisure", "300")]:
        store.add_or_update_category(name, value)

    # 4. One finished timer session on the first task
    store.select_timer_task(store.tasks[0].id)
    store.start_timer()
    for _ in range(25 * 60):
        store.timer._on_tick()
    store.stop_timer()

    print("Seeding complete.")


if __name__ == "__main__":
    seed()
