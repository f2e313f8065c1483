import random

import pytest
from PySide6.QtCore import QCoreApplication

from services.stats import StatsCalculator
from services.typing_engine import TypingEngine
from services.word_source import WordSource


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeClock:
    """Stands in for core.chrono.Clock with a settable elapsed time."""

    def __init__(self, elapsed_ms: int = 0):
        self.running = False
        self.now_ms = elapsed_ms
        self.starts = 0
        self.restarts = 0

    def start(self):
        if self.running:
            return
        self.running = True
        self.starts += 1

    def stop(self):
        self.running = False

    def restart(self):
        self.stop()
        self.now_ms = 0
        self.restarts += 1
        self.start()

    def elapsed_ms(self) -> int:
        return self.now_ms

    def elapsed_seconds(self) -> float:
        return round(self.now_ms / 1000.0, 2)


@pytest.fixture
def write_words(tmp_path):
    def _write(words, name="words.txt"):
        p = tmp_path / name
        p.write_text("\n".join(words) + "\n", encoding="utf-8")
        return p
    return _write


@pytest.fixture
def source(write_words):
    path = write_words(["cat", "dog", "bird", "fish", "horse", "mouse"])
    return WordSource(path, default_count=3, rng=random.Random(7))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(source, clock):
    eng = TypingEngine(source=source, clock=clock, calculator=StatsCalculator())
    eng.load_words()
    return eng
