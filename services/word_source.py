# services/word_source.py
import logging
import random
from typing import List, Optional

from app.config import DEFAULT_WORD_COUNT, WORDS_PATH
from app.errors import InsufficientPool, NotLoaded
from utils.file_handler import read_word_file

log = logging.getLogger(__name__)


class WordSource:
    def __init__(self, path=WORDS_PATH, default_count: int = DEFAULT_WORD_COUNT, rng: Optional[random.Random] = None):
        self.path = path
        self.default_count = default_count
        self._rng = rng or random.Random()
        self._words: List[str] = []

    def __len__(self) -> int:
        return len(self._words)

    @property
    def is_loaded(self) -> bool:
        return bool(self._words)

    def load(self) -> List[str]:
        words = list(dict.fromkeys(read_word_file(self.path)))
        self._words = words
        log.info("Loaded %d words from %s", len(words), self.path)
        return list(words)

    def _random_indices(self, count: int) -> List[int]:
        if count > len(self._words):
            raise InsufficientPool(count, len(self._words))
        seen = set()
        picked: List[int] = []
        # retry duplicate draws until enough distinct indices, keep draw order
        while len(picked) < count:
            i = self._rng.randrange(len(self._words))
            if i not in seen:
                seen.add(i)
                picked.append(i)
        return picked

    def sample(self, count: Optional[int] = None) -> List[str]:
        if not self._words:
            raise NotLoaded("Words have not been loaded. Call load() first.")
        n = self.default_count if count is None else count
        if n < 0:
            raise ValueError(f"count must be non-negative, got {n}")
        return [self._words[i] for i in self._random_indices(n)]
