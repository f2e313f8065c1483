from pathlib import Path
from typing import List

from app.errors import SourceUnavailable


def parse_word_lines(data: str) -> List[str]:
    """One word per line; surrounding whitespace trimmed, blank lines dropped."""
    return [ln.strip() for ln in data.split("\n") if ln.strip()]


def read_word_file(path) -> List[str]:
    p = Path(path)
    try:
        data = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(p, str(e)) from e
    return parse_word_lines(data)
