"""
Application State
=================
Holds the single mutable value of the application: the assumed number of
classes N. Views subscribe to `num_classes_changed`; the controller writes.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from losscurve.config import DEFAULT_CLASSES, MAX_CLASSES, MIN_CLASSES

logger = logging.getLogger(__name__)


class ClassCountState(QObject):
    """Observable class count, always within [MIN_CLASSES, MAX_CLASSES]."""
    num_classes_changed = Signal(int)

    def __init__(self, num_classes: int = DEFAULT_CLASSES, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._validate(num_classes)
        self._num_classes = num_classes

    @property
    def num_classes(self) -> int:
        return self._num_classes

    @staticmethod
    def _validate(n: int) -> None:
        if not MIN_CLASSES <= n <= MAX_CLASSES:
            raise ValueError(
                f"Number of classes must be between {MIN_CLASSES} and {MAX_CLASSES}, got {n}."
            )

    def set_num_classes(self, n: int) -> None:
        """Update N and notify subscribers if it changed."""
        self._validate(n)
        if n == self._num_classes:
            return
        self._num_classes = n
        logger.debug(f"Number of classes set to {n}")
        self.num_classes_changed.emit(n)
