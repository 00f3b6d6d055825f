from __future__ import annotations
import tkinter as tk
from PIL import Image, ImageTk

class ImageCanvas(tk.Frame):
    """Виджет отображения (получает уже уменьшенную копию для экрана)"""
    def __init__(self, master, *, bg="#111", fg="#bbb", placeholder="Нет изображения",
                 min_zoom=0.25, max_zoom=4.0, step=1.1):
        super().__init__(master, bg=bg)
        self._label = tk.Label(self, bg=bg, fg=fg, text=placeholder)
        self._label.pack(expand=True, fill=tk.BOTH)
        self._placeholder = placeholder

        self._pil_image: Image.Image | None = None
        self._tk_image: ImageTk.PhotoImage | None = None

        self.min_zoom = float(min_zoom)
        self.max_zoom = float(max_zoom)
        self.step = float(step)
        self.zoom = 1.0

        # зум только над картинкой, двойной клик возвращает 1:1
        self._label.bind("<MouseWheel>", self._on_mousewheel)
        self._label.bind("<Double-Button-1>", lambda e: self.set_zoom(1.0))

    def set_image(self, img: Image.Image | None):
        self._pil_image = img
        self.refresh()

    def set_zoom(self, z: float):
        self.zoom = max(self.min_zoom, min(self.max_zoom, float(z)))
        self.refresh()

    def _on_mousewheel(self, event):
        factor = self.step if event.delta > 0 else (1.0 / self.step)
        self.set_zoom(self.zoom * factor)

    def refresh(self):
        if self._pil_image is None:
            self._label.config(image="", text=self._placeholder)
            self._tk_image = None
            return
        img = self._pil_image
        if self.zoom != 1.0:
            w, h = img.size
            img = img.resize((max(1, int(w * self.zoom)), max(1, int(h * self.zoom))), Image.LANCZOS)
        self._tk_image = ImageTk.PhotoImage(img)
        self._label.config(image=self._tk_image, text="")
