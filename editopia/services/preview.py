# editopia/services/preview.py
from __future__ import annotations
from typing import Tuple
from PIL import Image

from editopia.config import PREVIEW_SIZE


def fit_size(size: Tuple[int, int], box: Tuple[int, int]) -> Tuple[int, int]:
    """Размер, вписанный в box с сохранением пропорций (без увеличения)."""
    w, h = size
    bw, bh = box
    if w <= 0 or h <= 0:
        return (0, 0)
    scale = min(1.0, bw / w, bh / h)
    return (max(1, round(w * scale)), max(1, round(h * scale)))

def make_preview(img: Image.Image, box: Tuple[int, int] = PREVIEW_SIZE) -> Image.Image:
    """Уменьшенная копия только для экрана; исходный буфер не трогаем."""
    tw, th = fit_size(img.size, box)
    if (tw, th) == img.size or tw == 0:
        return img.copy()
    return img.resize((tw, th), Image.LANCZOS)
