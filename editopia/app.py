# editopia/app.py
import logging
import tkinter as tk
from tkinter import filedialog, messagebox
from editopia.config import WINDOW_GEOMETRY, WINDOW_TITLE
from editopia.controller import EditorController
from editopia.session import EditSession
from editopia.ui import ImageCanvas, ToolsPanel


# --- приложение ---
class EditorApp(tk.Tk):
    def __init__(self, session: EditSession):
        super().__init__()
        self.title(WINDOW_TITLE)
        self.geometry(WINDOW_GEOMETRY)

        self.ctl = EditorController(session, display=self._display, notify=self._notify)

        # слева картинка, справа панель управления
        self._paned = tk.PanedWindow(self, orient=tk.HORIZONTAL, sashrelief=tk.RAISED)
        self._paned.pack(expand=True, fill=tk.BOTH, padx=10, pady=10)

        self.image_canvas = ImageCanvas(self._paned, bg="#111")
        self._paned.add(self.image_canvas, minsize=520)

        self.tools_panel = ToolsPanel(self._paned)
        self._paned.add(self.tools_panel, minsize=220)

        self.tools_panel.set_callbacks({
            "load": self.open_image,
            "undo": self._run(self.ctl.undo),
            "save": self.ctl.save,
            "reset": self._run(self.ctl.reset),
            "filter": self._run(self.ctl.select_filter),
            "exposure": self._run(self.ctl.exposure_changed),
            "saturation": self._run(self.ctl.saturation_changed),
        })
        self.ctl.set_on_reset(self.tools_panel.reset_controls)
        self._update_buttons()

    def _run(self, fn):
        # после каждой операции: обновить доступность кнопок
        def wrapper(*args):
            result = fn(*args)
            self._update_buttons()
            return result
        return wrapper

    def _update_buttons(self):
        self.tools_panel.set_state(self.ctl.has_image(), self.ctl.can_undo())

    # --- колбэки контроллера ---
    def _display(self, img):
        self.image_canvas.set_image(img)

    def _notify(self, text: str, is_error: bool):
        if is_error:
            messagebox.showerror("Ошибка", text)
        else:
            messagebox.showinfo("Готово", text)

    # --- загрузка ---
    def open_image(self):
        path = filedialog.askopenfilename(
            title="Выберите изображение",
            filetypes=[
                ("Изображения", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp *.ppm *.pgm *.pnm"),
                ("Все файлы", "*.*"),
            ],
        )
        if not path:
            return
        self.ctl.open_image(path)
        self._update_buttons()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = EditorApp(EditSession())
    app.mainloop()
