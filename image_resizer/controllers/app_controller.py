"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики геометрии и кодирования).
- DIP: зависит от сервисов как от абстрактных ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
- Ошибки сервисов не роняют окно: показываются в сайдбаре как отклонённая операция.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, TclError
from typing import Optional

import customtkinter as ctk

from image_resizer.config import ResizerConfig
from image_resizer.models.errors import InvalidDimensions, ResizerError
from image_resizer.models.image_model import ImageData, ResizedImage
from image_resizer.models.resize_model import Dimensions
from image_resizer.services.export_service import choose_filename, save_bytes
from image_resizer.services.image_service import ImageService
from image_resizer.services.resize_service import ResizeService
from image_resizer.ui.bottom_bar import BottomBar
from image_resizer.ui.image_viewer import VIEW_ORIGINAL, VIEW_SIDE_BY_SIDE, ImageViewer
from image_resizer.ui.preview import result_summary
from image_resizer.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)

IMAGE_FILETYPES = (
    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
    ("All files", "*.*"),
)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка изображений через `ImageService`.
    - Ресайз и кодирование через `ResizeService`, сохранение через `save_bytes`.
    - Синхронизация режима просмотра, итоговой строки и кнопок.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    config: ResizerConfig = field(default_factory=ResizerConfig)

    _image_service: ImageService = field(default_factory=ImageService)
    _resize_service: Optional[ResizeService] = None
    _current_image: Optional[ImageData] = None
    _current_result: Optional[ResizedImage] = None
    _error_job: Optional[str] = None

    def __post_init__(self) -> None:
        if self._resize_service is None:
            self._resize_service = ResizeService(self.config)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Сохраняет слабую связность: компоненты UI ничего не знают друг о друге,
        общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_target_change = self._update_resize_button
        self.sidebar.on_resize = self._handle_resize
        self.sidebar.on_save = self._handle_save

        self.bottom.on_view_mode_change = self._set_view_mode
        self.bottom.on_show_crop_change = self.viewer.set_show_crop

    @property
    def current_image(self) -> Optional[ImageData]:
        return self._current_image

    @property
    def current_result(self) -> Optional[ResizedImage]:
        return self._current_result

    # ---- Operations ----
    def open_path(self, file_path: str | Path) -> bool:
        """Загружает файл и сбрасывает предыдущие результаты. Возвращает успех."""
        try:
            image_data = self._image_service.load_image(file_path)
        except (ResizerError, OSError) as exc:
            self._report_error(f"Не удалось открыть файл: {exc}")
            return False

        self._current_image = image_data
        self._current_result = None
        self._clear_error()

        self.viewer.set_image(image_data.pil_image)
        self.sidebar.set_image_info(image_data)
        self.sidebar.clear_result()
        self.sidebar.fill_target_if_empty(image_data.width, image_data.height)
        self.bottom.set_summary("")
        self._update_resize_button()
        self._set_view_mode(VIEW_ORIGINAL)
        return True

    def resize_current(self) -> Optional[ResizedImage]:
        """Ресайз текущего изображения по параметрам сайдбара."""
        if self._current_image is None:
            return None
        try:
            target = Dimensions.parse(*self.sidebar.get_target_text())
            request = self._resize_service.build_request(self._current_image, target, self.sidebar.get_mode())
            resized = self._resize_service.resize(self._current_image, request, quality=self.sidebar.get_quality())
        except ResizerError as exc:
            self._report_error(f"Ошибка ресайза: {exc}")
            return None

        self._current_result = resized
        self._clear_error()
        self.viewer.set_result(resized.pil_image, resized.result.source)
        self.sidebar.set_result_info(resized)
        self.bottom.set_summary(result_summary(resized))
        self._set_view_mode(VIEW_SIDE_BY_SIDE)
        return resized

    def save_to(self, path: str | Path) -> Optional[Path]:
        """Сохраняет последний результат по указанному пути."""
        if self._current_result is None:
            return None
        try:
            return save_bytes(self._current_result.encoded, path)
        except OSError as exc:
            self._report_error(f"Не удалось сохранить файл: {exc}")
            return None

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(title="Выберите изображение", filetypes=IMAGE_FILETYPES)
        except TclError:
            # Silent fail if dialog cannot open
            return
        if file_path:
            self.open_path(file_path)

    def _handle_resize(self) -> None:
        self.resize_current()

    def _handle_save(self) -> None:
        if self._current_result is None:
            return
        filename = choose_filename(self.sidebar.get_filename(), self._current_result.default_filename)
        initial_dir = str(self._current_image.path.parent) if self._current_image else None
        try:
            path = filedialog.asksaveasfilename(
                title="Сохранить изображение",
                initialfile=filename,
                initialdir=initial_dir,
                defaultextension=self.config.output_extension,
                filetypes=(("JPEG", "*.jpg *.jpeg"),),
            )
        except TclError:
            return
        if path:
            self.save_to(path)

    # ---- Helpers ----
    def _update_resize_button(self) -> None:
        """Кнопка активна, только если есть изображение и оба размера положительны."""
        enabled = self._current_image is not None
        if enabled:
            try:
                Dimensions.parse(*self.sidebar.get_target_text())
            except InvalidDimensions:
                enabled = False
        self.sidebar.set_resize_enabled(enabled)

    def _set_view_mode(self, mode: str) -> None:
        self.viewer.set_view_mode(mode)
        self.bottom.set_view_mode_value(mode)

    def _report_error(self, message: str) -> None:
        logger.warning(message)
        self.sidebar.show_error(message)
        if self._error_job is not None:
            self.window.after_cancel(self._error_job)
        self._error_job = self.window.after(self.config.error_timeout_ms, self._clear_error)

    def _clear_error(self) -> None:
        if self._error_job is not None:
            self.window.after_cancel(self._error_job)
            self._error_job = None
        self.sidebar.clear_error()
