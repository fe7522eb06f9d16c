from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from image_resizer.ui.image_viewer import VIEW_ORIGINAL, VIEW_RESULT, VIEW_SIDE_BY_SIDE

VIEW_LABELS = {
    VIEW_ORIGINAL: "Оригинал",
    VIEW_RESULT: "Результат",
    VIEW_SIDE_BY_SIDE: "Рядом",
}


class BottomBar(ctk.CTkFrame):
    """Нижняя панель: что показывать, обводка кропа и итог последнего ресайза."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=48, **kwargs)

        # callbacks
        self.on_view_mode_change: Optional[Callable[[str], None]] = None
        self.on_show_crop_change: Optional[Callable[[bool], None]] = None

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(3, weight=1)  # summary stretches

        ctk.CTkLabel(self, text="Просмотр").grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._labels_to_modes = {label: mode for mode, label in VIEW_LABELS.items()}
        self._view_buttons = ctk.CTkSegmentedButton(
            self, values=list(VIEW_LABELS.values()), command=self._on_view_click
        )
        self._view_buttons.set(VIEW_LABELS[VIEW_ORIGINAL])
        self._view_buttons.grid(row=0, column=1, padx=6, pady=8, sticky="w")

        self._show_crop = ctk.BooleanVar(value=True)
        self._crop_switch = ctk.CTkSwitch(
            self, text="Область кропа", variable=self._show_crop, command=self._on_crop_toggle
        )
        self._crop_switch.grid(row=0, column=2, padx=12, pady=8, sticky="w")

        self._summary = ctk.StringVar(value="")
        self._summary_label = ctk.CTkLabel(self, textvariable=self._summary, anchor="e")
        self._summary_label.grid(row=0, column=3, padx=(6, 12), pady=8, sticky="ew")

    # public API (sync from controller)
    def set_view_mode_value(self, mode: str) -> None:
        self._view_buttons.set(VIEW_LABELS.get(mode, VIEW_LABELS[VIEW_ORIGINAL]))

    def set_summary(self, text: str) -> None:
        self._summary.set(text)

    # events
    def _on_view_click(self, label: str) -> None:
        mode = self._labels_to_modes.get(label)
        if mode and self.on_view_mode_change:
            self.on_view_mode_change(mode)

    def _on_crop_toggle(self) -> None:
        if self.on_show_crop_change:
            self.on_show_crop_change(bool(self._show_crop.get()))
