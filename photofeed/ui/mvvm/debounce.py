"""
Debouncer - settle a fast-changing value before acting on it.
"""
from typing import Any, Optional

from PySide6.QtCore import QObject, QTimer, Signal


class Debouncer(QObject):
    """
    Restartable single-shot timer carrying the latest pushed value.

    Each push() replaces the pending value and restarts the timer; only
    when the interval elapses without another push is `triggered` emitted,
    once, with the last value.

    Example:
        debouncer = Debouncer(800)
        debouncer.triggered.connect(vm.submit_term)
        line_edit.textChanged.connect(debouncer.push)
    """

    triggered = Signal(object)

    def __init__(self, interval_ms: int = 800, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._pending: Any = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval(self) -> int:
        return self._timer.interval()

    @interval.setter
    def interval(self, value: int) -> None:
        self._timer.setInterval(value)

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def push(self, value: Any) -> None:
        """Store value and restart the quiet period."""
        self._pending = value
        self._timer.start()

    def flush(self) -> None:
        """Fire immediately if a value is pending."""
        if self._timer.isActive():
            self._timer.stop()
            self._on_timeout()

    def cancel(self) -> None:
        """Drop the pending value without firing."""
        self._timer.stop()
        self._pending = None

    def _on_timeout(self) -> None:
        value, self._pending = self._pending, None
        self.triggered.emit(value)
