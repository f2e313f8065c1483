# app/config.py
import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent

WORDS_PATH = Path(
    os.environ.get("TYPEMASTER_WORDS", ROOT_DIR / "assets" / "words" / "english-1k.txt")
)
DEFAULT_WORD_COUNT = int(os.environ.get("TYPEMASTER_WORD_COUNT", "25"))

# clock notification cadence
TICK_MS = 100

# standard speed normalisation
CHARS_PER_WORD = 4

LOG_FILE = "app.log"
LOG_LEVEL = os.environ.get("TYPEMASTER_LOG_LEVEL", "INFO").upper()
