# editopia/controller.py
from __future__ import annotations
import logging
from typing import Callable, Optional, Tuple
from PIL import Image
from editopia.config import PREVIEW_SIZE, SLIDER_SCALE
from editopia.errors import EditorError, OutOfRange
from editopia.session import EditSession
from editopia.services import preview as Spreview
from editopia.services.transforms import FilterKind

logger = logging.getLogger(__name__)

DisplayFn = Callable[[Image.Image], None]
NotifyFn = Callable[[str, bool], None]   # (текст, это ошибка)


class EditorController:
    """Тонкий слой событий интерфейса поверх EditSession (без Tk)."""
    def __init__(self, session: EditSession, display: DisplayFn, notify: NotifyFn, *,
                 on_reset: Optional[Callable[[], None]] = None,
                 preview_size: Tuple[int, int] = PREVIEW_SIZE):
        self.s = session
        self._display = display
        self._notify = notify
        self._on_reset = on_reset
        self._preview_size = preview_size
        self._suppress = False

    def set_on_reset(self, cb: Optional[Callable[[], None]]) -> None:
        self._on_reset = cb

    # ---- состояние для кнопок ----
    def has_image(self) -> bool:
        return self.s.has_image()

    def can_undo(self) -> bool:
        return self.s.can_undo()

    def _show(self) -> None:
        if self.s.edited is not None:
            self._display(Spreview.make_preview(self.s.edited, self._preview_size))

    def _fail(self, text: str, err: Exception) -> bool:
        logger.warning("%s: %s", text, err)
        self._notify(f"{text}:\n{err}", True)
        return False

    # ---- файлы ----
    def open_image(self, path: str) -> bool:
        try:
            self.s.open(path)
        except EditorError as e:
            return self._fail("Не удалось загрузить изображение", e)
        self._reset_controls()
        self._show()
        return True

    def save(self) -> Optional[str]:
        try:
            path = self.s.export()
        except EditorError as e:
            self._fail("Не удалось сохранить изображение", e)
            return None
        self._notify(f"Изображение сохранено как {path}", False)
        return path

    # ---- события ----
    def select_filter(self, label: str) -> bool:
        if self._suppress:
            return False
        try:
            kind = FilterKind.from_label(label)
        except ValueError as e:
            return self._fail("Неизвестный фильтр", e)
        if not self.s.apply_filter(kind):
            return False
        if kind is FilterKind.NONE:
            self._reset_controls()
        self._show()
        return True

    def exposure_changed(self, value: float, adjusting: bool = False) -> bool:
        return self._adjust(self.s.adjust_exposure, value, adjusting)

    def saturation_changed(self, value: float, adjusting: bool = False) -> bool:
        return self._adjust(self.s.adjust_saturation, value, adjusting)

    def _adjust(self, op: Callable[[float], bool], value: float, adjusting: bool) -> bool:
        # пересчёт только когда ползунок отпущен
        if self._suppress or adjusting:
            return False
        try:
            changed = op(value / SLIDER_SCALE)
        except OutOfRange as e:
            return self._fail("Недопустимое значение", e)
        if changed:
            self._show()
        return changed

    def undo(self) -> bool:
        if not self.s.undo():
            return False
        self._show()
        return True

    def reset(self) -> bool:
        if not self.s.reset():
            return False
        self._reset_controls()
        self._show()
        return True

    def _reset_controls(self) -> None:
        """Вернуть виджеты к значениям по умолчанию, не порождая новых событий."""
        if self._on_reset is None:
            return
        self._suppress = True
        try:
            self._on_reset()
        finally:
            self._suppress = False
