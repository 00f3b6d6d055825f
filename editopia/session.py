# editopia/session.py
from __future__ import annotations
import logging
from typing import Optional
from PIL import Image
from editopia.config import EXPOSURE_MAX, EXPOSURE_MIN, SATURATION_MAX, SATURATION_MIN
from editopia.errors import NoImageLoaded, OutOfRange
from editopia.model import Model
from editopia.services import io as Sio, transforms as Sx
from editopia.services.transforms import FilterKind

logger = logging.getLogger(__name__)


class EditSession:
    """Сессия редактирования одного изображения.

    Любой фильтр и любая коррекция пересчитываются от ``original``, поэтому
    правки не накапливают погрешность. В историю попадают только дискретные
    действия (выбор фильтра); ползунки историю не трогают.
    """
    def __init__(self, model: Optional[Model] = None):
        self.m = model if model is not None else Model()

    # ---- состояние ----
    @property
    def original(self) -> Optional[Image.Image]:
        return self.m.original

    @property
    def edited(self) -> Optional[Image.Image]:
        """Текущий результат (только для чтения; для экрана делайте копию)."""
        return self.m.edited

    @property
    def active_filter(self) -> FilterKind:
        return self.m.active_filter

    @property
    def exposure(self) -> float:
        return self.m.exposure

    @property
    def saturation(self) -> float:
        return self.m.saturation

    @property
    def path(self) -> Optional[str]:
        return self.m.path

    def has_image(self) -> bool:
        return self.m.edited is not None

    def can_undo(self) -> bool:
        return self.m.history.can_undo()

    def history_size(self) -> int:
        return len(self.m.history)

    # ---- файлы ----
    def load(self, image: Image.Image, path: Optional[str] = None) -> None:
        buf = Sio.to_buffer(image)   # InvalidImage -> сессия не меняется
        self.m.original = buf
        self.m.edited = buf.copy()
        self.m.path = path
        self.m.history.clear()
        self.m.reset_params()
        logger.info("Loaded %s (%dx%d)", path or "<memory>", *buf.size)

    def open(self, path: str) -> None:
        self.load(Sio.open_image(path), path=path)

    def export(self, target: Optional[str] = None) -> str:
        """Записать edited; по умолчанию в edited_<имя исходника>. Возвращает путь."""
        if self.m.edited is None:
            raise NoImageLoaded("No image loaded, nothing to export")
        path = target or Sio.export_path(self.m.path)
        Sio.save_image(path, self.m.edited)
        return path

    # ---- операции ----
    def _require_image(self, op: str) -> bool:
        if self.m.edited is None or self.m.original is None:
            logger.debug("%s ignored: no image loaded", op)
            return False
        return True

    def apply_filter(self, kind: FilterKind) -> bool:
        if not self._require_image("apply_filter"):
            return False
        if kind is FilterKind.NONE:
            self.m.history.push(self.m.edited)
            return self.reset()
        new_im = Sx.apply_filter(kind, self.m.original)
        # замена только после полного пересчёта
        self.m.history.push(self.m.edited)
        self.m.edited = new_im
        self.m.active_filter = kind
        logger.debug("Applied %s, history=%d", kind.value, len(self.m.history))
        return True

    def adjust_exposure(self, factor: float) -> bool:
        if not self._require_image("adjust_exposure"):
            return False
        if not (EXPOSURE_MIN < factor <= EXPOSURE_MAX):
            raise OutOfRange("exposure", factor, EXPOSURE_MIN, EXPOSURE_MAX, include_low=False)
        self.m.edited = Sx.exposure(self.m.original, factor)
        self.m.exposure = factor
        return True

    def adjust_saturation(self, factor: float) -> bool:
        if not self._require_image("adjust_saturation"):
            return False
        if not (SATURATION_MIN <= factor <= SATURATION_MAX):
            raise OutOfRange("saturation", factor, SATURATION_MIN, SATURATION_MAX)
        self.m.edited = Sx.saturation(self.m.original, factor)
        self.m.saturation = factor
        return True

    def undo(self) -> bool:
        if not self._require_image("undo"):
            return False
        prev = self.m.history.undo()
        if prev is None:
            return False
        self.m.edited = prev
        return True

    def reset(self) -> bool:
        if not self._require_image("reset"):
            return False
        self.m.edited = self.m.original.copy()
        self.m.reset_params()
        return True
