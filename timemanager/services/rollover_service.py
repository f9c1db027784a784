"""
Month Rollover Service - notices when the calendar month changes.

The bar chart is keyed by calendar month, so a dashboard left open across the
end of a month has to shift its window. A coarse periodic check is enough.
"""

import datetime
import logging
from typing import Callable, Optional
from PySide6.QtCore import QObject, QTimer, Signal

from timemanager.infra.repository import StateRepository

logger = logging.getLogger(__name__)


class MonthRolloverWatcher(QObject):
    """
    Periodically compares today's month with the last one seen.
    """

    month_changed = Signal(str)  # new YYYY-MM key

    def __init__(self, repository: StateRepository,
                 clock: Callable[[], datetime.datetime] = datetime.datetime.now,
                 interval_seconds: int = 60,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.repository = repository
        self.clock = clock
        self.last_checked: datetime.date = repository.load_last_checked_date() or clock().date()

        self.timer = QTimer(self)
        self.timer.setInterval(interval_seconds * 1000)
        self.timer.timeout.connect(self.check)

    def start(self) -> None:
        """Begin periodic checks"""
        self.timer.start()

    def stop(self) -> None:
        """Stop periodic checks"""
        self.timer.stop()

    def is_active(self) -> bool:
        return self.timer.isActive()

    def check(self) -> bool:
        """
        Compare the current month with the last checked one.

        Returns:
            True if the month changed (and month_changed was emitted)
        """
        today = self.clock().date()
        if (today.year, today.month) == (self.last_checked.year, self.last_checked.month):
            return False

        logger.info("Month changed from %s to %s", self.last_checked.isoformat()[:7], today.isoformat()[:7])
        self.last_checked = today
        self.repository.save_last_checked_date(today)
        self.month_changed.emit(f"{today.year}-{today.month:02d}")
        return True
