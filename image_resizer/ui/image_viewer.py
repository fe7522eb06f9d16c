"""Панель предпросмотра ресайза: исходник, результат или оба рядом.

Принципы:
- SRP: только отрисовка; раскладку и координаты считает `ui.preview`.
- Чистый код: публичный API из трёх сеттеров, перерисовка в одном месте.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

from image_resizer.models.resize_model import Dimensions, SourceRect
from image_resizer.ui.preview import CAPTION_HEIGHT, Placement, caption, crop_visible, layout_row, map_rect

VIEW_ORIGINAL = "original"
VIEW_RESULT = "result"
VIEW_SIDE_BY_SIDE = "side_by_side"
VIEW_MODES = (VIEW_ORIGINAL, VIEW_RESULT, VIEW_SIDE_BY_SIDE)

_CROP_OUTLINE = "#ff9f1c"


class ImageViewer(ctk.CTkFrame):
    """Канва с исходником и результатом ресайза.

    В режиме «рядом» обе картинки рисуются в общем масштабе, поэтому разница
    размеров видна глазом. Для режима fill на исходнике обводится область,
    которая попала в результат.
    """
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._original_image: Optional[Image.Image] = None
        self._resized_image: Optional[Image.Image] = None
        self._source: Optional[SourceRect] = None
        # PhotoImage must outlive the canvas item, tk keeps no reference
        self._tk_images: List[ImageTk.PhotoImage] = []

        self._view_mode: str = VIEW_ORIGINAL
        self._show_crop: bool = True

        self._canvas.bind("<Configure>", lambda _event: self._render())

    # ---- Public API ----
    def set_image(self, image: Image.Image) -> None:
        """Устанавливает исходник и убирает прошлый результат."""
        self._original_image = image
        self._resized_image = None
        self._source = None
        self._render()

    def set_result(self, image: Optional[Image.Image], source: Optional[SourceRect] = None) -> None:
        """Устанавливает результат ресайза и прямоугольник, из которого он получен."""
        self._resized_image = image
        self._source = source if image is not None else None
        self._render()

    def set_view_mode(self, mode: str) -> None:
        """'original' | 'result' | 'side_by_side'; неизвестное значение игнорируется."""
        if mode in VIEW_MODES:
            self._view_mode = mode
            self._render()

    def set_show_crop(self, show: bool) -> None:
        self._show_crop = bool(show)
        self._render()

    # ---- Internals ----
    def _visible(self) -> List[Tuple[str, Image.Image]]:
        """Что рисовать в текущем режиме; без результата остаётся только исходник."""
        if self._original_image is None:
            return []
        if self._resized_image is None or self._view_mode == VIEW_ORIGINAL:
            return [("Оригинал", self._original_image)]
        if self._view_mode == VIEW_RESULT:
            return [("Результат", self._resized_image)]
        return [("Оригинал", self._original_image), ("Результат", self._resized_image)]

    def _render(self) -> None:
        self._canvas.delete("all")
        self._tk_images = []
        visible = self._visible()
        if not visible:
            return

        panel = (max(1, int(self._canvas.winfo_width())), max(1, int(self._canvas.winfo_height())))
        placements = layout_row([image.size for _label, image in visible], panel)
        for (label, image), place in zip(visible, placements):
            tk_image = ImageTk.PhotoImage(image.resize((place.width, place.height), Image.Resampling.LANCZOS))
            self._tk_images.append(tk_image)
            self._canvas.create_image(place.x, place.y, image=tk_image, anchor="nw")
            self._canvas.create_text(
                place.x + place.width // 2,
                place.y + place.height + CAPTION_HEIGHT // 2,
                text=caption(label, *image.size),
                fill=self._get_caption_fg(),
            )
            if image is self._original_image:
                self._draw_crop(place)

    def _draw_crop(self, place: Placement) -> None:
        if not self._show_crop or self._source is None or self._original_image is None:
            return
        if not crop_visible(self._source, Dimensions(*self._original_image.size)):
            return
        self._canvas.create_rectangle(*map_rect(self._source, place), outline=_CROP_OUTLINE, width=2, dash=(6, 3))

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if self._is_dark() else "#f2f2f2"

    def _get_caption_fg(self) -> str:
        return "#d0d0d0" if self._is_dark() else "#303030"

    @staticmethod
    def _is_dark() -> bool:
        return ctk.get_appearance_mode().lower() == "dark"
