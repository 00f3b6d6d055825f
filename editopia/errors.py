# editopia/errors.py
from __future__ import annotations


class EditorError(Exception):
    """Базовая ошибка редактора (все ошибки локальные и восстановимые)."""


class InvalidImage(EditorError):
    """Нулевой размер или не удалось декодировать файл."""


class OutOfRange(EditorError):
    """Коэффициент коррекции вне допустимого диапазона."""

    def __init__(self, name: str, value: float, low: float, high: float, *, include_low: bool = True):
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        left = "[" if include_low else "("
        super().__init__(f"{name} factor {value:g} is outside {left}{low:.2f}, {high:.2f}]")


class NoImageLoaded(EditorError):
    """Операция до загрузки изображения."""


class EncodeWriteFailure(EditorError):
    """Ошибка кодирования/записи при экспорте."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
