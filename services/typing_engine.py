# services/typing_engine.py
import logging
from typing import List, Optional

from app.errors import SourceUnavailable
from app.state import EngineState, FinishedRun, GameState, LetterStatus, new_letter_grid
from core.channel import LatestValue
from core.chrono import Clock
from services.stats import StatsCalculator
from services.word_source import WordSource

log = logging.getLogger(__name__)


class TypingEngine:
    """
    Word-by-word typing test.

    Owns the game state and the per-letter status grid; uses a Clock for
    elapsed time and hands finished runs to a StatsCalculator. The active
    word sequence is published on `words`, finished-run stats on `stats`.
    """

    def __init__(self, source: Optional[WordSource] = None, clock: Optional[Clock] = None,
                 calculator: Optional[StatsCalculator] = None):
        self.source = source if source is not None else WordSource()
        self.clock = clock if clock is not None else Clock()
        self.calculator = calculator if calculator is not None else StatsCalculator()
        self.state = GameState()
        self.letter_status: List[List[LetterStatus]] = []
        self.words = LatestValue()
        self._count: Optional[int] = None
        self.last_run: Optional[FinishedRun] = None

    # ---------- read helpers ----------
    @property
    def stats(self) -> LatestValue:
        return self.calculator.stats

    @property
    def status(self) -> EngineState:
        if not self.state.words:
            return EngineState.IDLE
        return EngineState.RUNNING if self.state.started else EngineState.READY

    @property
    def is_running(self) -> bool:
        return self.state.started

    @property
    def current_word(self) -> str:
        return self.state.current_word

    @property
    def current_input(self) -> str:
        return self.state.current_input

    @property
    def is_last_word(self) -> bool:
        return self.state.is_last_word

    @property
    def word_times_ms(self) -> List[int]:
        return list(self.state.word_times_ms)

    # ---------- word sequence ----------
    def load_words(self, count: Optional[int] = None):
        try:
            self.source.load()
        except SourceUnavailable:
            log.error("Could not load words from %s", self.source.path)
            raise
        self.load_sequence(count)

    def load_sequence(self, count: Optional[int] = None):
        words = tuple(self.source.sample(count))
        self._count = count
        self.state.words = words
        self.letter_status = new_letter_grid(words)
        self.state.clear()
        self.words.publish(words)
        log.debug("New word sequence of %d words", len(words))

    # ---------- input ----------
    def record_input(self, text: str):
        self.state.current_input = text
        target = self.current_word
        row = self._current_row()
        if row is None:
            return
        for i, ch in enumerate(text[:len(target)]):
            row[i] = LetterStatus.CORRECT if ch == target[i] else LetterStatus.INCORRECT

    def start(self):
        if self.state.started:
            return
        self.state.started = True
        self.clock.start()

    def complete_current_word(self):
        if not self.state.words:
            return
        typed = self.state.current_input
        self._mark_skipped_letters()
        self.state.typed.append(typed)
        self.state.word_times_ms.append(self.clock.elapsed_ms())
        if self.state.is_last_word:
            self.reset()
        else:
            self.state.index += 1
            self.state.current_input = ""

    def clear_current_word_styling(self):
        row = self._current_row()
        if row is not None:
            row[:] = [LetterStatus.UNKNOWN] * len(row)
        self.state.current_input = ""

    def clear_last_character_styling(self):
        last = len(self.state.current_input) - 1
        if last < 0:
            return
        row = self._current_row()
        if row is not None and last < len(row):
            row[last] = LetterStatus.UNKNOWN

    # ---------- lifecycle ----------
    def end(self):
        if not self.state.started:
            return
        self.clock.stop()
        self.state.started = False
        if self.state.is_complete:
            elapsed = self.clock.elapsed_seconds()
            self.last_run = FinishedRun(
                self.state.words, tuple(self.state.typed),
                tuple(self.state.word_times_ms), elapsed,
            )
            self.calculator.calculate(elapsed, self.state.words, self.state.typed)
        else:
            log.info("Run abandoned after %d of %d words; stats unchanged",
                     len(self.state.typed), len(self.state.words))

    def reset(self):
        self.end()
        self.state.clear()
        self.load_sequence(self._count)
        self.clock.restart()
        self.state.started = True

    def _current_row(self):
        if 0 <= self.state.index < len(self.letter_status):
            return self.letter_status[self.state.index]
        return None

    def _mark_skipped_letters(self):
        row = self._current_row()
        if row is None:
            return
        for i in range(len(self.state.current_input), len(self.current_word)):
            row[i] = LetterStatus.INCORRECT
