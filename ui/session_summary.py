# ui/session_summary.py
from __future__ import annotations
from typing import Sequence

from PySide6.QtWidgets import QDialog, QGridLayout, QLabel, QPushButton, QVBoxLayout
import pyqtgraph as pg

from app.calculation import per_word_speeds, smooth
from app.state import Stats
from utils.graph_helper import setup_speed_plot, update_curve


class SessionSummary(QDialog):
    """Final stats of a finished run plus a per-word speed curve."""

    def __init__(
        self,
        stats: Stats,
        words: Sequence[str],
        times_ms: Sequence[int],
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Session Summary")
        self.resize(720, 420)

        root = QVBoxLayout(self)
        grid = QGridLayout()
        rows = (
            ("Clean speed", f"{stats.clean_speed:.2f} WPM"),
            ("Raw speed", f"{stats.raw_speed:.2f} WPM"),
            ("Accuracy", f"{stats.accuracy:.2f} %"),
            ("Words", f"{stats.all_words:.0f} ({stats.incorrect_words:.0f} incorrect)"),
            ("Letters", f"{stats.all_letters:.0f} ({stats.incorrect_letters:.0f} incorrect)"),
        )
        for r, (name, value) in enumerate(rows):
            grid.addWidget(QLabel(name, self), r, 0)
            grid.addWidget(QLabel(value, self), r, 1)
        root.addLayout(grid)

        plot = pg.PlotWidget()
        curve = setup_speed_plot(plot, "#eab308")
        update_curve(curve, smooth(per_word_speeds(words, times_ms)))
        root.addWidget(plot, stretch=1)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
