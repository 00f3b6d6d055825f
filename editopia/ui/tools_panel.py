from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from editopia.config import EXPOSURE_SLIDER, FILTER_LABELS, SATURATION_SLIDER

class ToolsPanel(tk.Frame):
    """Панель: фильтр, экспозиция, насыщенность + кнопки действий"""
    def __init__(self, master):
        super().__init__(master)

        adj = tk.LabelFrame(self, text="Коррекция")
        adj.pack(side=tk.TOP, fill=tk.X, padx=8, pady=(8, 4))

        tk.Label(adj, text="Фильтр:").pack(anchor="w", padx=6)
        self._filter = tk.StringVar(value=FILTER_LABELS[0])
        self._combo = ttk.Combobox(adj, textvariable=self._filter, values=FILTER_LABELS,
                                   state="disabled")
        self._combo.pack(fill=tk.X, padx=6, pady=(0, 6))

        self._exposure = self._mk_scale(adj, "Экспозиция (%):", EXPOSURE_SLIDER)
        self._saturation = self._mk_scale(adj, "Насыщенность (%):", SATURATION_SLIDER)

        acts = tk.LabelFrame(self, text="Действия")
        acts.pack(side=tk.TOP, fill=tk.X, padx=8, pady=4)

        self.btns = {}
        self.btns["load"] = self._mk_button(acts, "Открыть изображение…")
        self.btns["undo"] = self._mk_button(acts, "Отменить")
        self.btns["save"] = self._mk_button(acts, "Сохранить")
        self.btns["reset"] = self._mk_button(acts, "Сбросить всё", pady=(0, 8))
        self.btns["load"].config(state="normal")

    def _mk_scale(self, parent, text, limits):
        lo, hi, init = limits
        tk.Label(parent, text=text).pack(anchor="w", padx=6)
        var = tk.IntVar(value=init)
        sc = tk.Scale(parent, from_=lo, to=hi, resolution=1, orient=tk.HORIZONTAL,
                      length=200, variable=var, tickinterval=(hi - lo) // 4, state="disabled")
        sc.pack(fill=tk.X, padx=6, pady=(0, 6))
        sc.default = init
        sc.var = var
        return sc

    def _mk_button(self, parent, text, *, pady=(0, 6)):
        b = tk.Button(parent, text=text, state="disabled")
        b.pack(fill=tk.X, pady=pady, padx=8)
        return b

    # публичные API
    def set_callbacks(self, mapping: dict[str, callable]):
        """Кнопки: load/undo/save/reset; события: filter(label), exposure(value, adjusting), saturation(...)"""
        for k, cb in mapping.items():
            if k in self.btns:
                self.btns[k].config(command=cb)
        if "filter" in mapping:
            self._combo.bind("<<ComboboxSelected>>", lambda e: mapping["filter"](self._filter.get()))
        for key, sc in (("exposure", self._exposure), ("saturation", self._saturation)):
            if key in mapping:
                self._bind_release(sc, mapping[key])

    def _bind_release(self, scale: tk.Scale, cb):
        # при перетаскивании adjusting=True, пересчёт только по отпусканию
        scale.config(command=lambda v: cb(float(v), True))
        scale.bind("<ButtonRelease-1>", lambda e: cb(float(scale.get()), False))
        scale.bind("<KeyRelease>", lambda e: cb(float(scale.get()), False))

    def reset_controls(self):
        self._filter.set(FILTER_LABELS[0])
        for sc in (self._exposure, self._saturation):
            sc.var.set(sc.default)

    def set_state(self, has_image: bool, can_undo: bool):
        state = "normal" if has_image else "disabled"
        self._combo.config(state="readonly" if has_image else "disabled")
        self._exposure.config(state=state)
        self._saturation.config(state=state)
        self.btns["save"].config(state=state)
        self.btns["reset"].config(state=state)
        self.btns["undo"].config(state="normal" if (has_image and can_undo) else "disabled")
