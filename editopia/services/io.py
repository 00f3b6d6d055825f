# editopia/services/io.py
from __future__ import annotations
import logging
import os
from typing import Optional
from PIL import Image, UnidentifiedImageError

from editopia.config import DEFAULT_EXPORT_NAME, EXPORT_FORMAT, EXPORT_PREFIX, EXPORT_QUALITY
from editopia.errors import EncodeWriteFailure, InvalidImage

logger = logging.getLogger(__name__)

_ALPHA_MODES = ("RGBA", "LA", "PA")


def _has_alpha(img: Image.Image) -> bool:
    return img.mode in _ALPHA_MODES or "transparency" in img.info

def _flatten_on_black(img: Image.Image) -> Image.Image:
    """Прозрачность накладываем на чёрный фон (как отрисовка в RGB-буфер)."""
    rgba = img.convert("RGBA")
    base = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
    return Image.alpha_composite(base, rgba).convert("RGB")

def to_buffer(img: Image.Image) -> Image.Image:
    """Собственная RGB-копия без альфы; нулевой размер недопустим."""
    w, h = img.size
    if w <= 0 or h <= 0:
        raise InvalidImage(f"Image has zero dimension: {w}x{h}")
    if _has_alpha(img):
        return _flatten_on_black(img)
    return img.convert("RGB") if img.mode != "RGB" else img.copy()

def open_image(path: str) -> Image.Image:
    """Открыть и полностью декодировать файл, вернуть RGB-буфер."""
    try:
        with Image.open(path) as img:
            img.load()
            return to_buffer(img)
    except (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError) as e:
        logger.warning("Cannot decode %s: %s", path, e)
        raise InvalidImage(f"Cannot decode {path}: {e}") from e

def export_path(source: Optional[str], directory: Optional[str] = None) -> str:
    """edited_ + имя исходного файла, по умолчанию рядом с исходником."""
    name = os.path.basename(source) if source else DEFAULT_EXPORT_NAME
    if directory is None:
        directory = os.path.dirname(source) if source else ""
    return os.path.join(directory, EXPORT_PREFIX + name)

def save_image(path: str, img: Image.Image) -> None:
    """Сохранить в фиксированной кодировке (JPEG) независимо от расширения."""
    save_img = img if img.mode == "RGB" else img.convert("RGB")
    try:
        save_img.save(path, format=EXPORT_FORMAT, quality=EXPORT_QUALITY)
    except (OSError, ValueError) as e:
        logger.error("Export to %s failed: %s", path, e)
        raise EncodeWriteFailure(path, str(e)) from e
    logger.info("Saved %s (%dx%d)", path, *save_img.size)
