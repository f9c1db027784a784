"""
Timer Service - Work stopwatch.

Architecture Decision: Observer Pattern (Qt Signals)
The timer emits signals when state changes, keeping it decoupled from UI.
Committing the finished session is left to the caller (the dashboard store),
so the timer itself owns no persistent data.
"""

from typing import Optional
from PySide6.QtCore import QObject, QTimer, Signal

from timemanager.domain.models import TimerState, TimerStatus


def format_time(total_seconds: int) -> str:
    """Format seconds as HH:MM:SS; the hour field grows past 99"""
    hours, remainder = divmod(max(int(total_seconds), 0), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class WorkTimer(QObject):
    """
    A three-state stopwatch (idle, running, paused) counting whole seconds.
    """

    # Signals
    tick = Signal(str, int)  # (formatted_time, total_seconds)
    state_changed = Signal(str)  # TimerStatus value

    TICK_INTERVAL_MS = 1000

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.status = TimerStatus.IDLE
        self.seconds: int = 0
        self.task_id: Optional[int] = None

        # Internal timer that fires every second while running
        self.timer = QTimer(self)
        self.timer.setInterval(self.TICK_INTERVAL_MS)
        self.timer.timeout.connect(self._on_tick)

    @property
    def running(self) -> bool:
        return self.status == TimerStatus.RUNNING

    def select_task(self, task_id: Optional[int]) -> None:
        """Task the next committed session will be linked to"""
        self.task_id = task_id

    def start(self) -> None:
        """
        Start or resume counting. Does nothing if already running.
        """
        if self.running:
            return
        self.status = TimerStatus.RUNNING
        self.timer.start()
        self.state_changed.emit(self.status.value)

    def pause(self) -> None:
        """
        Halt counting but keep the elapsed seconds.
        """
        if not self.running:
            return
        self.timer.stop()
        self.status = TimerStatus.PAUSED
        self.state_changed.emit(self.status.value)

    def stop(self) -> int:
        """
        End the session.

        Returns:
            The elapsed seconds, or 0 if nothing was counted (then the timer
            is left as it was)
        """
        elapsed = self.seconds
        if not elapsed:
            return 0

        self.timer.stop()
        self.status = TimerStatus.IDLE
        self.seconds = 0
        self.tick.emit(format_time(0), 0)
        self.state_changed.emit(self.status.value)
        return elapsed

    def state(self) -> TimerState:
        return TimerState(status=self.status, seconds=self.seconds, task_id=self.task_id)

    def _on_tick(self):
        """Called every second to update the timer"""
        if not self.running:
            return
        self.seconds += 1
        self.tick.emit(format_time(self.seconds), self.seconds)
