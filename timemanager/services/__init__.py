"""Services layer - Business logic"""

from .timer_service import WorkTimer
from .rollover_service import MonthRolloverWatcher
from .store import DashboardStore
from .report_service import ReportService

__all__ = ["WorkTimer", "MonthRolloverWatcher", "DashboardStore", "ReportService"]
