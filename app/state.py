from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple
import math


class LetterStatus(Enum):
    UNKNOWN = "unknown"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class EngineState(Enum):
    IDLE = "idle"
    READY = "ready"
    RUNNING = "running"


@dataclass(frozen=True)
class Word:
    text: str

    def __len__(self) -> int:
        return len(self.text)

    def matching_positions(self, other: "Word") -> int:
        """Count characters equal at the same index, up to the shorter word."""
        return sum(1 for a, b in zip(self.text, other.text) if a == b)


def new_letter_grid(words) -> List[List[LetterStatus]]:
    return [[LetterStatus.UNKNOWN] * len(w) for w in words]


@dataclass
class GameState:
    words: Tuple[str, ...] = ()
    typed: List[str] = field(default_factory=list)
    index: int = 0
    current_input: str = ""
    started: bool = False
    word_times_ms: List[int] = field(default_factory=list)

    def clear(self):
        self.typed.clear()
        self.word_times_ms.clear()
        self.index = 0
        self.current_input = ""

    @property
    def current_word(self) -> str:
        if 0 <= self.index < len(self.words):
            return self.words[self.index]
        return ""

    @property
    def is_last_word(self) -> bool:
        return self.index >= len(self.words) - 1

    @property
    def is_complete(self) -> bool:
        return bool(self.words) and len(self.typed) == len(self.words)


@dataclass(frozen=True)
class Stats:
    clean_speed: float = math.nan
    raw_speed: float = math.nan
    accuracy: float = math.nan
    all_words: float = math.nan
    incorrect_words: float = math.nan
    all_letters: float = math.nan
    incorrect_letters: float = math.nan

    @property
    def is_defined(self) -> bool:
        # NaN marks "not computed yet"; zero is a real result
        return not math.isnan(self.accuracy)


UNDEFINED_STATS = Stats()


@dataclass(frozen=True)
class FinishedRun:
    words: Tuple[str, ...]
    typed: Tuple[str, ...]
    word_times_ms: Tuple[int, ...]
    elapsed_seconds: float
