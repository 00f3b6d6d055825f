# editopia/services/history.py
from __future__ import annotations
from collections import deque
from typing import Deque, Optional
from PIL import Image

from editopia.config import MAX_UNDO


class History:
    """Ограниченная история undo для Pillow-изображений (без копий, на ответственности вызывающего).

    При переполнении вытесняется самый старый снимок, undo берёт самый свежий.
    """
    def __init__(self, maxlen: int = MAX_UNDO):
        if maxlen < 1:
            raise ValueError(f"History capacity must be positive, got {maxlen}")
        self._undo: Deque[Image.Image] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._undo.maxlen

    def __len__(self) -> int:
        return len(self._undo)

    def clear(self) -> None:
        self._undo.clear()

    def push(self, prev: Image.Image) -> None:
        # deque(maxlen) сам выталкивает элемент с левого края
        self._undo.append(prev)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def undo(self) -> Optional[Image.Image]:
        if not self._undo:
            return None
        return self._undo.pop()
