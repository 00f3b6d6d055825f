from __future__ import annotations
from enum import Enum
from typing import Callable, Dict
from PIL import Image
import numpy as np


class FilterKind(Enum):
    """Именованные фильтры; значение = подпись в интерфейсе."""
    NONE = "None"
    WARM = "Warm"
    COOL = "Cool"
    VINTAGE = "Vintage"
    SEPIA = "Sepia"
    BLACK_AND_WHITE = "B&W"

    @classmethod
    def from_label(cls, label: str) -> "FilterKind":
        try:
            return cls(label)
        except ValueError:
            raise ValueError(f"Unknown filter: {label!r}") from None


def _is_empty(img: Image.Image) -> bool:
    w, h = img.size
    return w == 0 or h == 0

def _rgb(img: Image.Image) -> Image.Image:
    return img if img.mode == "RGB" else img.convert("RGB")

def _np_from_pil(img: Image.Image) -> np.ndarray:
    return np.asarray(_rgb(img), dtype=np.float64)

def _pil_from_np(arr: np.ndarray) -> Image.Image:
    # подчищаем диапазон и тип
    arr = np.clip(arr, 0, 255).astype(np.uint8)
    return Image.fromarray(np.ascontiguousarray(arr))

# ---- поканальные LUT (Image.point) ----

_IDENTITY_LUT = list(range(256))

def _scale_lut(factor: float) -> list[int]:
    """x -> trunc(x * factor), ограничено [0, 255]."""
    return [max(0, min(255, int(x * factor))) for x in range(256)]

def _apply_channel_luts(img: Image.Image, r: list[int], g: list[int], b: list[int]) -> Image.Image:
    if _is_empty(img):
        return img.copy()
    return _rgb(img).point(r + g + b)

def warm(img: Image.Image) -> Image.Image:
    """Тёплый: красный ×1.2, синий ×0.8"""
    return _apply_channel_luts(img, _scale_lut(1.2), _IDENTITY_LUT, _scale_lut(0.8))

def cool(img: Image.Image) -> Image.Image:
    """Холодный: красный ×0.8, синий ×1.2"""
    return _apply_channel_luts(img, _scale_lut(0.8), _IDENTITY_LUT, _scale_lut(1.2))

def exposure(img: Image.Image, factor: float) -> Image.Image:
    """Экспозиция: линейное масштабирование всех каналов без смещения."""
    lut = _scale_lut(factor)
    return _apply_channel_luts(img, lut, lut, lut)

# ---- межканальные преобразования (numpy) ----

_SEPIA = np.array([[0.393, 0.769, 0.189],
                   [0.349, 0.686, 0.168],
                   [0.272, 0.534, 0.131]], dtype=np.float64)

def sepia(img: Image.Image) -> Image.Image:
    if _is_empty(img):
        return img.copy()
    arr = _np_from_pil(img)
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    out = np.stack([k[0] * r + k[1] * g + k[2] * b for k in _SEPIA], axis=-1)
    # сначала отбрасываем дробную часть, потом ограничиваем сверху
    return _pil_from_np(np.minimum(np.trunc(out), 255))

def black_and_white(img: Image.Image) -> Image.Image:
    """Ч/Б по яркости с небольшим усилением контраста (±10 от середины)."""
    if _is_empty(img):
        return img.copy()
    arr = _np_from_pil(img)
    lum = np.trunc(0.299 * arr[..., 0] + 0.587 * arr[..., 1] + 0.114 * arr[..., 2])
    lum = np.where(lum < 128, lum - 10, lum + 10)
    lum = np.clip(lum, 0, 255)
    return _pil_from_np(np.repeat(lum[..., None], 3, axis=2))

# ---- HSB (float32, те же шаги, что у java.awt.Color) ----

_F = np.float32

def _to_hsb(img: Image.Image) -> np.ndarray:
    """PIL -> HSB, все компоненты в [0, 1], float32"""
    arr = np.asarray(_rgb(img), dtype=np.int32)
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    cmax = arr.max(axis=-1)
    cmin = arr.min(axis=-1)

    bri = cmax.astype(_F) / _F(255.0)
    span = (cmax - cmin).astype(_F)
    sat = np.where(cmax != 0, span / np.maximum(cmax, 1).astype(_F), _F(0.0))

    span_safe = np.where(span == 0, _F(1.0), span)
    redc = (cmax - r).astype(_F) / span_safe
    greenc = (cmax - g).astype(_F) / span_safe
    bluec = (cmax - b).astype(_F) / span_safe
    hue = np.where(r == cmax, bluec - greenc,
                   np.where(g == cmax, _F(2.0) + redc - bluec, _F(4.0) + greenc - redc))
    hue = hue / _F(6.0)
    hue = np.where(hue < 0, hue + _F(1.0), hue)
    hue = np.where(sat == 0, _F(0.0), hue)
    return np.stack([hue, sat, bri], axis=-1).astype(_F)

def _to_byte(x: np.ndarray) -> np.ndarray:
    # (int)(x * 255 + 0.5)
    return (x * _F(255.0) + _F(0.5)).astype(np.int32)

def _from_hsb(hsb: np.ndarray) -> Image.Image:
    h, s, v = hsb[..., 0], hsb[..., 1], hsb[..., 2]
    h6 = (h - np.floor(h)) * _F(6.0)
    f = h6 - np.floor(h6)
    p = v * (_F(1.0) - s)
    q = v * (_F(1.0) - s * f)
    t = v * (_F(1.0) - (s * (_F(1.0) - f)))

    sector = h6.astype(np.int32)
    conds = [sector == i for i in range(6)]
    zero = _F(0.0)
    r = np.select(conds, [v, q, p, p, t, v], default=zero)
    g = np.select(conds, [t, v, v, q, p, p], default=zero)
    b = np.select(conds, [p, p, t, v, v, q], default=zero)

    # без насыщенности все каналы = яркость
    gray = s == 0
    rgb = np.stack([np.where(gray, v, c) for c in (r, g, b)], axis=-1).astype(_F)
    return _pil_from_np(_to_byte(rgb))

def vintage(img: Image.Image) -> Image.Image:
    """Винтаж: сдвиг тона к жёлтому, меньше насыщенности, выцветание."""
    if _is_empty(img):
        return img.copy()
    hsb = _to_hsb(img)
    hsb[..., 0] = np.fmod(hsb[..., 0] + _F(0.05), _F(1.0))
    hsb[..., 1] = np.minimum(_F(1.0), hsb[..., 1] * _F(0.8))
    hsb[..., 2] = np.minimum(_F(1.0), hsb[..., 2] * _F(0.9) + _F(0.1))
    return _from_hsb(hsb)

def saturation(img: Image.Image, factor: float) -> Image.Image:
    """Насыщенность: S *= factor, тон и яркость без изменений"""
    if _is_empty(img):
        return img.copy()
    hsb = _to_hsb(img)
    hsb[..., 1] = np.minimum(np.maximum(hsb[..., 1] * _F(factor), _F(0.0)), _F(1.0))
    return _from_hsb(hsb)

# ---- таблица фильтров ----

FILTERS: Dict[FilterKind, Callable[[Image.Image], Image.Image]] = {
    FilterKind.WARM: warm,
    FilterKind.COOL: cool,
    FilterKind.VINTAGE: vintage,
    FilterKind.SEPIA: sepia,
    FilterKind.BLACK_AND_WHITE: black_and_white,
}

def apply_filter(kind: FilterKind, img: Image.Image) -> Image.Image:
    """Применить именованный фильтр; NONE возвращает копию без изменений."""
    if kind is FilterKind.NONE:
        return _rgb(img).copy()
    return FILTERS[kind](img)
