from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from PIL import Image
from editopia.config import EXPOSURE_DEFAULT, MAX_UNDO, SATURATION_DEFAULT
from editopia.services.history import History
from editopia.services.transforms import FilterKind

@dataclass
class Model:
    original: Optional[Image.Image] = None   # база для всех пересчётов, после загрузки не меняется
    edited: Optional[Image.Image] = None
    path: Optional[str] = None
    history: History = field(default_factory=lambda: History(maxlen=MAX_UNDO))

    # текущие параметры
    active_filter: FilterKind = FilterKind.NONE
    exposure: float = EXPOSURE_DEFAULT
    saturation: float = SATURATION_DEFAULT

    def reset_params(self) -> None:
        self.active_filter = FilterKind.NONE
        self.exposure = EXPOSURE_DEFAULT
        self.saturation = SATURATION_DEFAULT
