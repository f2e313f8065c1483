# core/channel.py
from PySide6.QtCore import QObject, Signal


class LatestValue(QObject):
    """
    Multicast channel that remembers the last published value.
    A new subscriber is called with that value right away.
    """
    changed = Signal(object)

    def __init__(self, initial=None, parent=None):
        super().__init__(parent)
        self._value = initial

    @property
    def value(self):
        return self._value

    def publish(self, value):
        self._value = value
        self.changed.emit(value)

    def subscribe(self, slot):
        self.changed.connect(slot)
        if self._value is not None:
            slot(self._value)

    def unsubscribe(self, slot):
        self.changed.disconnect(slot)
