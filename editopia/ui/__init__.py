from .image_canvas import ImageCanvas
from .tools_panel import ToolsPanel

__all__ = ["ImageCanvas", "ToolsPanel"]
