# core/chrono.py
import logging

from PySide6.QtCore import QObject, QElapsedTimer, QTimer, Signal

from app.calculation import round2
from app.config import TICK_MS

log = logging.getLogger(__name__)


class Clock(QObject):
    elapsedChanged = Signal(int)  # milliseconds
    started = Signal()
    stopped = Signal()

    def __init__(self, tick_ms: int = TICK_MS, parent=None):
        super().__init__(parent)
        self._elapsed_ms = 0          # accumulated over finished segments
        self._running = False
        self._t = QElapsedTimer()

        # single notification source per clock
        self._tick = QTimer(self)
        self._tick.setInterval(tick_ms)
        self._tick.timeout.connect(self._on_tick)

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self):
        if self._running:
            log.warning("Clock already running; start ignored")
            return
        self._running = True
        self._t.start()
        self._tick.start()
        self.started.emit()

    def stop(self):
        if not self._running:
            return
        self._elapsed_ms += self._t.elapsed()
        self._running = False
        self._tick.stop()
        self.stopped.emit()

    def restart(self):
        self.stop()
        self._elapsed_ms = 0
        self.start()

    def elapsed_ms(self) -> int:
        if self._running:
            return self._elapsed_ms + max(0, self._t.elapsed())
        return self._elapsed_ms

    def elapsed_seconds(self) -> float:
        return round2(self.elapsed_ms() / 1000.0)

    def _on_tick(self):
        self.elapsedChanged.emit(self.elapsed_ms())
