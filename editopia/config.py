# editopia/config.py
"""Константы редактора: история, диапазоны коррекций, экспорт, предпросмотр."""
from __future__ import annotations

# история
MAX_UNDO = 10

# экспозиция: (0.10, 3.00], левая граница не входит
EXPOSURE_MIN = 0.10
EXPOSURE_MAX = 3.00
EXPOSURE_DEFAULT = 1.00

# насыщенность: [0.00, 2.00]
SATURATION_MIN = 0.00
SATURATION_MAX = 2.00
SATURATION_DEFAULT = 1.00

# ползунки работают в процентах (значение / 100)
SLIDER_SCALE = 100.0
EXPOSURE_SLIDER = (11, 300, 100)   # min, max, init
SATURATION_SLIDER = (0, 200, 100)

# экспорт: одна фиксированная кодировка
EXPORT_PREFIX = "edited_"
EXPORT_FORMAT = "JPEG"
EXPORT_QUALITY = 95
DEFAULT_EXPORT_NAME = "image.jpg"

# предпросмотр (только копия для экрана)
PREVIEW_SIZE = (600, 400)

# окно
WINDOW_TITLE = "Editopia"
WINDOW_GEOMETRY = "1024x768"

FILTER_LABELS = ("None", "Warm", "Cool", "Vintage", "Sepia", "B&W")
