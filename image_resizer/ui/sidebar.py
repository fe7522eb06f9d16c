"""Боковая панель: открытие файла, информация, параметры ресайза, результат и экспорт.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from image_resizer.models.image_model import ImageData, ResizedImage
from image_resizer.models.resize_model import ResizeMode
from image_resizer.services.export_service import format_file_size

MODE_LABELS = {
    ResizeMode.EXACT: "Точный размер",
    ResizeMode.FIT: "Вписать (пропорции)",
    ResizeMode.FILL: "Заполнить (кроп)",
}


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: файл, информация, параметры, результат."""
    def __init__(self, master: ctk.CTk, default_mode: ResizeMode = ResizeMode.EXACT,
                 default_quality: float = 0.9, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_target_change: Optional[Callable[[], None]] = None
        self.on_resize: Optional[Callable[[], None]] = None
        self.on_save: Optional[Callable[[], None]] = None

        bold = ctk.CTkFont(size=16, weight="bold")

        # File
        self._title = ctk.CTkLabel(self, text="Файл", font=bold)
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=bold)
        self._info_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_path.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=6, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Parameters
        self._params_title = ctk.CTkLabel(self, text="Параметры", font=bold)
        self._params_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        size_row = ctk.CTkFrame(self, fg_color="transparent")
        size_row.grid(row=8, column=0, padx=8, pady=(0, 6), sticky="ew")
        size_row.grid_columnconfigure((1, 3), weight=1)
        self._width_val = ctk.StringVar(value="")
        self._height_val = ctk.StringVar(value="")
        ctk.CTkLabel(size_row, text="Ш:").grid(row=0, column=0, padx=(0, 4))
        self._width_entry = ctk.CTkEntry(size_row, textvariable=self._width_val, width=70)
        self._width_entry.grid(row=0, column=1, sticky="ew")
        ctk.CTkLabel(size_row, text="В:").grid(row=0, column=2, padx=(8, 4))
        self._height_entry = ctk.CTkEntry(size_row, textvariable=self._height_val, width=70)
        self._height_entry.grid(row=0, column=3, sticky="ew")
        self._width_val.trace_add("write", self._emit_target_change)
        self._height_val.trace_add("write", self._emit_target_change)

        self._mode_menu = ctk.CTkOptionMenu(self, values=list(MODE_LABELS.values()))
        self._mode_menu.set(MODE_LABELS[default_mode])
        self._mode_menu.grid(row=9, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._quality_val = ctk.StringVar(value=f"Качество: {int(round(default_quality * 100))}%")
        self._quality_label = ctk.CTkLabel(self, textvariable=self._quality_val, anchor="w")
        self._quality_label.grid(row=10, column=0, padx=8, pady=(0, 2), sticky="w")
        self._quality_slider = ctk.CTkSlider(self, from_=0, to=100, number_of_steps=100, command=self._on_quality_change)
        self._quality_slider.set(default_quality * 100)
        self._quality_slider.grid(row=11, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._resize_btn = ctk.CTkButton(self, text="Изменить размер", command=self._emit_resize, state="disabled")
        self._resize_btn.grid(row=12, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Result
        self._result_title = ctk.CTkLabel(self, text="Результат", font=bold)
        self._result_title.grid(row=13, column=0, padx=8, pady=(8, 4), sticky="w")
        self._result_val = ctk.StringVar(value="—")
        self._result_info = ctk.CTkLabel(self, textvariable=self._result_val, anchor="w", justify="left")
        self._result_info.grid(row=14, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._filename_val = ctk.StringVar(value="")
        self._filename_entry = ctk.CTkEntry(self, textvariable=self._filename_val)
        self._filename_entry.grid(row=15, column=0, padx=8, pady=(0, 6), sticky="ew")
        self._filename_entry.bind("<Return>", lambda _e: self._emit_save())

        self._save_btn = ctk.CTkButton(self, text="Сохранить…", command=self._emit_save, state="disabled")
        self._save_btn.grid(row=16, column=0, padx=8, pady=(0, 8), sticky="ew")

        # Errors
        self._error_val = ctk.StringVar(value="")
        self._error_label = ctk.CTkLabel(
            self, textvariable=self._error_val, text_color="#d9534f", wraplength=250, anchor="w", justify="left"
        )
        self._error_label.grid(row=17, column=0, padx=8, pady=(0, 8), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path))
        self._size_val.set(format_file_size(image_data.size_bytes) if image_data.size_bytes is not None else "—")
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")
        self._mode_val.set(image_data.mode)

    def get_target_text(self) -> Tuple[str, str]:
        """Сырые строки из полей ширины и высоты."""
        return self._width_val.get(), self._height_val.get()

    def fill_target_if_empty(self, width: int, height: int) -> None:
        """Подставляет размер исходника в пустые поля, заполненные не трогает."""
        if not self._width_val.get().strip():
            self._width_val.set(str(width))
        if not self._height_val.get().strip():
            self._height_val.set(str(height))

    def get_mode(self) -> ResizeMode:
        label = self._mode_menu.get()
        for mode, text in MODE_LABELS.items():
            if text == label:
                return mode
        return ResizeMode.parse(label)

    def get_quality(self) -> float:
        """Качество JPEG в [0, 1]."""
        return max(0.0, min(1.0, float(self._quality_slider.get()) / 100.0))

    def set_resize_enabled(self, enabled: bool) -> None:
        self._resize_btn.configure(state="normal" if enabled else "disabled")

    def set_result_info(self, resized: ResizedImage) -> None:
        """Показывает цель и фактический размер, оценку веса файла и качество."""
        target = resized.request.target
        self._result_val.set(
            f"Цель: {int(target.width)} × {int(target.height)} px\n"
            f"Факт: {resized.width} × {resized.height} px\n"
            f"Размер: {format_file_size(resized.size_bytes)}\n"
            f"Качество: {int(round(resized.quality * 100))}%"
        )
        self._filename_val.set(resized.default_filename)
        self._save_btn.configure(state="normal")

    def clear_result(self) -> None:
        self._result_val.set("—")
        self._filename_val.set("")
        self._save_btn.configure(state="disabled")

    def get_filename(self) -> str:
        return self._filename_val.get()

    def show_error(self, message: str) -> None:
        self._error_val.set(message)

    def clear_error(self) -> None:
        self._error_val.set("")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_target_change(self, *_args: object) -> None:
        if self.on_target_change:
            self.on_target_change()

    def _emit_resize(self) -> None:
        if self.on_resize:
            self.on_resize()

    def _emit_save(self) -> None:
        if self.on_save and self._save_btn.cget("state") == "normal":
            self.on_save()

    def _on_quality_change(self, value: float) -> None:
        self._quality_val.set(f"Качество: {int(round(value))}%")
