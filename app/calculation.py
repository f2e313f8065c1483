from decimal import Decimal, ROUND_HALF_UP
from typing import List, NamedTuple, Sequence
import logging

from app.config import CHARS_PER_WORD
from app.errors import EmptyInput
from app.state import Stats, Word

log = logging.getLogger(__name__)


class WordComparison(NamedTuple):
    total_letters: int
    correct_letters: int
    incorrect_letters: int
    incorrect_words: int


def round2(value: float) -> float:
    """Two decimals, halves rounded away from zero."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def compare_words(targets: Sequence[str], typed: Sequence[str]) -> WordComparison:
    total = correct = incorrect = wrong_words = 0
    for target_text, typed_text in zip(targets, typed):
        target = Word(target_text)
        attempt = Word(typed_text)
        matches = attempt.matching_positions(target)
        total += len(target)
        correct += matches
        incorrect += len(target) - matches
        # exact equality, not letter-match count
        if attempt != target:
            wrong_words += 1
    return WordComparison(total, correct, incorrect, wrong_words)


def accuracy(correct_letters: int, total_letters: int) -> float:
    return 100.0 * correct_letters / total_letters


def raw_speed(total_letters: int, elapsed_seconds: float) -> float:
    minutes = elapsed_seconds / 60.0
    if minutes <= 0:
        log.warning("Elapsed time too small for a speed figure: %s s", elapsed_seconds)
        return 0.0
    return (total_letters / CHARS_PER_WORD) / minutes


def clean_speed(raw: float, acc: float) -> float:
    return raw * (acc / 100.0)


def compute_stats(elapsed_seconds: float, targets: Sequence[str], typed: Sequence[str]) -> Stats:
    """
    Derive a Stats snapshot from a finished test.

    Raises EmptyInput when either word list is empty. The caller guarantees
    both lists have the same length.
    """
    if not targets:
        raise EmptyInput("Target word list is empty.")
    if not typed:
        raise EmptyInput("Typed word list is empty.")

    cmp = compare_words(targets, typed)
    acc = accuracy(cmp.correct_letters, cmp.total_letters) if cmp.total_letters else 0.0
    raw = raw_speed(cmp.total_letters, elapsed_seconds)
    clean = clean_speed(raw, acc)

    return Stats(
        clean_speed=round2(clean),
        raw_speed=round2(raw),
        accuracy=round2(acc),
        all_words=len(targets),
        incorrect_words=cmp.incorrect_words,
        all_letters=cmp.total_letters,
        incorrect_letters=cmp.incorrect_letters,
    )


def per_word_speeds(targets: Sequence[str], times_ms: Sequence[int]) -> List[float]:
    """
    Speed of each completed word from its completion timestamp.
    A word's duration is measured from the previous completion (or zero).
    """
    out: List[float] = []
    last = 0
    for word, t in zip(targets, times_ms):
        dur_ms = max(1, t - last)
        last = t
        out.append(round2((len(word) / CHARS_PER_WORD) / (dur_ms / 60000.0)))
    return out


def smooth(values: Sequence[float], factor: float = 0.35) -> List[float]:
    out, last = [], None
    for v in values:
        last = v if last is None else last + factor * (v - last)
        out.append(last)
    return out
