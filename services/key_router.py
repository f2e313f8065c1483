# services/key_router.py
from typing import NamedTuple

from PySide6.QtCore import Qt

from services.typing_engine import TypingEngine


class KeyOutcome(NamedTuple):
    consumed: bool = False      # swallow the key event
    clear_input: bool = False   # empty the input field


PASS = KeyOutcome()
CONSUMED = KeyOutcome(consumed=True, clear_input=True)


class KeyRouter:
    """
    Translates key presses on the input field into engine calls.
    `text` is the field content at key-down time, before the key applies.
    """

    def __init__(self, engine: TypingEngine):
        self.engine = engine

    def handle(self, key, modifiers, text: str) -> KeyOutcome:
        if not self.engine.is_running:
            self.engine.start()
        self.engine.record_input(text)

        if key == Qt.Key_Space:
            self.engine.complete_current_word()
            return CONSUMED
        if key in (Qt.Key_Tab, Qt.Key_Backtab):
            self.engine.reset()
            return CONSUMED
        if key == Qt.Key_Backspace:
            if modifiers & Qt.ControlModifier:
                self.engine.clear_current_word_styling()
                return CONSUMED
            self.engine.clear_last_character_styling()
        return PASS
