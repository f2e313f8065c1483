# services/stats.py
import logging
from typing import Sequence

from app.calculation import compute_stats
from app.state import Stats, UNDEFINED_STATS
from core.channel import LatestValue

log = logging.getLogger(__name__)


class StatsCalculator:
    def __init__(self):
        self.stats = LatestValue(UNDEFINED_STATS)

    @property
    def latest(self) -> Stats:
        return self.stats.value

    def calculate(self, elapsed_seconds: float, words: Sequence[str], typed: Sequence[str]):
        if elapsed_seconds <= 0:
            log.warning("Elapsed time must be greater than zero, got %s; stats unchanged", elapsed_seconds)
            return None
        snapshot = compute_stats(elapsed_seconds, words, typed)
        self.stats.publish(snapshot)
        log.info(
            "Stats updated: %.2f clean / %.2f raw, %.2f%% accuracy",
            snapshot.clean_speed, snapshot.raw_speed, snapshot.accuracy,
        )
        return snapshot

    def reset(self):
        self.stats.publish(UNDEFINED_STATS)
