# ui/main_window.py
from __future__ import annotations
import html
import logging

from PySide6.QtCore import QEvent, QObject, Qt, Slot
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QLineEdit, QMainWindow, QMessageBox,
    QPushButton, QSizePolicy, QVBoxLayout, QWidget,
)

from app.errors import TypingTestError
from app.state import LetterStatus, Stats
from services.key_router import KeyRouter
from services.typing_engine import TypingEngine
from ui.session_summary import SessionSummary

log = logging.getLogger(__name__)

_COLORS = {
    LetterStatus.UNKNOWN: "#9aa1a9",
    LetterStatus.CORRECT: "#22c55e",
    LetterStatus.INCORRECT: "#ef4444",
}
_WORD_BG = "rgba(234,179,8,0.10)"


class MainWindow(QMainWindow):
    def __init__(self, engine: TypingEngine | None = None):
        super().__init__()
        self.setWindowTitle("Typemaster")
        self.resize(1200, 720)

        self.engine = engine if engine is not None else TypingEngine()
        self.router = KeyRouter(self.engine)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 40, 16, 16)
        root_v.setSpacing(24)

        top = QHBoxLayout()
        top.setSpacing(40)
        self.lblTimer = QLabel("0.0 s", self)
        self.lblTimer.setAlignment(Qt.AlignCenter)
        self.lblStats = QLabel("", self)
        self.lblStats.setAlignment(Qt.AlignCenter)
        top.addWidget(self.lblTimer)
        top.addWidget(self.lblStats, 1)
        root_v.addLayout(top)

        self.lblWords = QLabel("", self)
        self.lblWords.setTextFormat(Qt.RichText)
        self.lblWords.setWordWrap(True)
        self.lblWords.setAlignment(Qt.AlignCenter)
        self.lblWords.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.lblWords.setStyleSheet("font-size: 30px; line-height: 1.35;")
        root_v.addWidget(self.lblWords, 1)

        row = QHBoxLayout()
        self.input = QLineEdit(self)
        self.input.setStyleSheet("font-size: 22px;")
        self.input.installEventFilter(self)
        self.input.textEdited.connect(self._on_text_edited)
        self.btnRedo = QPushButton("Redo", self)
        self.btnRedo.clicked.connect(self._on_redo)
        self.btnSummary = QPushButton("Summary", self)
        self.btnSummary.setEnabled(False)
        self.btnSummary.clicked.connect(self._show_summary)
        self.btnClear = QPushButton("Clear stats", self)
        self.btnClear.clicked.connect(self.engine.calculator.reset)
        row.addWidget(self.input, 1)
        row.addWidget(self.btnRedo)
        row.addWidget(self.btnSummary)
        row.addWidget(self.btnClear)
        root_v.addLayout(row)

        self.setCentralWidget(root)

        self.engine.clock.elapsedChanged.connect(self._on_elapsed_changed)
        self.engine.clock.started.connect(lambda: self.lblTimer.setStyleSheet("color: #eab308;"))
        self.engine.clock.stopped.connect(lambda: self.lblTimer.setStyleSheet(""))
        self.engine.words.subscribe(self._on_words)
        self.engine.stats.subscribe(self._on_stats)

        self._load()
        self.input.setFocus()

    def _load(self):
        try:
            self.engine.load_words()
        except TypingTestError as e:
            log.exception("Could not start a test")
            QMessageBox.critical(self, "Typemaster", str(e))
            self.input.setEnabled(False)

    # ---------------- input ----------------
    def eventFilter(self, obj: QObject, ev: QEvent) -> bool:
        if obj is self.input and ev.type() == QEvent.KeyPress:
            try:
                outcome = self.router.handle(ev.key(), ev.modifiers(), self.input.text())
            except TypingTestError as e:
                log.error("Key handling failed: %s", e)
                return True
            if outcome.clear_input:
                self.input.clear()
            self._render_words()
            return outcome.consumed
        return super().eventFilter(obj, ev)

    @Slot(str)
    def _on_text_edited(self, text: str):
        self.engine.record_input(text)
        self._render_words()

    def _on_redo(self):
        try:
            self.engine.reset()
        except TypingTestError as e:
            log.error("Reset failed: %s", e)
        self.input.clear()
        self.input.setFocus()
        self._render_words()

    def closeEvent(self, ev):
        self.engine.words.unsubscribe(self._on_words)
        self.engine.stats.unsubscribe(self._on_stats)
        self.engine.clock.stop()
        super().closeEvent(ev)

    # ---------------- channels ----------------
    @Slot(int)
    def _on_elapsed_changed(self, ms: int):
        self.lblTimer.setText(f"{ms / 1000.0:0.1f} s")

    def _on_words(self, words):
        self.lblTimer.setText("0.0 s")
        self._render_words()

    def _on_stats(self, stats: Stats):
        if not stats.is_defined:
            self.lblStats.setText("")
            self.btnSummary.setEnabled(False)
            return
        self.lblStats.setText(
            f"{stats.clean_speed:.2f} WPM  ·  raw {stats.raw_speed:.2f}  ·  {stats.accuracy:.2f} %"
        )
        self.btnSummary.setEnabled(self.engine.last_run is not None)

    def _show_summary(self):
        run = self.engine.last_run
        if run is None:
            return
        dlg = SessionSummary(self.engine.stats.value, run.words, run.word_times_ms, parent=self)
        dlg.exec()
        self.input.setFocus()

    # ---------------- rendering ----------------
    def _render_words(self):
        words = self.engine.state.words
        current = self.engine.state.index
        parts: list[str] = []
        for w_idx, word in enumerate(words):
            statuses = self.engine.letter_status[w_idx]
            letters = "".join(
                f'<span style="color:{_COLORS[st]}">{html.escape(ch)}</span>'
                for ch, st in zip(word, statuses)
            )
            if w_idx == current:
                letters = f'<span style="background:{_WORD_BG}">{letters}</span>'
            parts.append(letters)
        self.lblWords.setText(" ".join(parts))
