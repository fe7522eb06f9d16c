"""Контроллер проверяется на подставных виджетах, без создания окна."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

pytest.importorskip("customtkinter")

from image_resizer.controllers.app_controller import AppController  # noqa: E402
from image_resizer.models.resize_model import ResizeMode, SourceRect  # noqa: E402
from image_resizer.services.export_service import format_file_size  # noqa: E402


class FakeViewer:
    def __init__(self) -> None:
        self.image = None
        self.resized = None
        self.source = None
        self.view_mode = None
        self.show_crop = True

    def set_image(self, image) -> None:
        self.image = image
        self.resized = self.source = None

    def set_result(self, image, source=None) -> None:
        self.resized, self.source = image, source

    def set_view_mode(self, mode: str) -> None:
        self.view_mode = mode

    def set_show_crop(self, show: bool) -> None:
        self.show_crop = show


class FakeSidebar:
    def __init__(self) -> None:
        self.width = ""
        self.height = ""
        self.mode = ResizeMode.EXACT
        self.quality = 0.8
        self.filename = ""
        self.error = ""
        self.resize_enabled = False
        self.info = None
        self.result = None
        self.on_open_file = self.on_target_change = self.on_resize = self.on_save = None

    def set_image_info(self, image_data) -> None:
        self.info = image_data

    def get_target_text(self):
        return self.width, self.height

    def fill_target_if_empty(self, width: int, height: int) -> None:
        self.width = self.width or str(width)
        self.height = self.height or str(height)

    def get_mode(self) -> ResizeMode:
        return self.mode

    def get_quality(self) -> float:
        return self.quality

    def set_resize_enabled(self, enabled: bool) -> None:
        self.resize_enabled = enabled

    def set_result_info(self, resized) -> None:
        self.result = resized
        self.filename = resized.default_filename

    def clear_result(self) -> None:
        self.result = None
        self.filename = ""

    def get_filename(self) -> str:
        return self.filename

    def show_error(self, message: str) -> None:
        self.error = message

    def clear_error(self) -> None:
        self.error = ""


class FakeBottom:
    def __init__(self) -> None:
        self.summary = ""
        self.view_mode = None
        self.on_view_mode_change = self.on_show_crop_change = None

    def set_summary(self, text: str) -> None:
        self.summary = text

    def set_view_mode_value(self, mode: str) -> None:
        self.view_mode = mode


class FakeWindow:
    def __init__(self) -> None:
        self.scheduled: list[tuple[int, object]] = []
        self.cancelled: list[str] = []

    def after(self, ms: int, callback) -> str:
        self.scheduled.append((ms, callback))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, job: str) -> None:
        self.cancelled.append(job)


@pytest.fixture
def controller() -> AppController:
    ctrl = AppController(viewer=FakeViewer(), sidebar=FakeSidebar(), bottom=FakeBottom(), window=FakeWindow())
    ctrl.bind_events()
    return ctrl


def test_bind_events_wires_sidebar(controller: AppController) -> None:
    assert controller.sidebar.on_resize is not None
    assert controller.sidebar.on_save is not None


def test_open_autofills_target_and_enables_resize(controller: AppController, landscape_jpeg: Path) -> None:
    assert controller.open_path(landscape_jpeg)

    assert controller.sidebar.get_target_text() == ("800", "600")
    assert controller.sidebar.resize_enabled
    assert controller.viewer.image is not None


def test_open_keeps_user_entered_target(controller: AppController, landscape_jpeg: Path) -> None:
    controller.sidebar.width = "320"
    controller.open_path(landscape_jpeg)
    assert controller.sidebar.get_target_text() == ("320", "600")


def test_resize_then_save(controller: AppController, landscape_jpeg: Path, tmp_path: Path) -> None:
    controller.open_path(landscape_jpeg)
    controller.sidebar.width, controller.sidebar.height = "400", "400"
    controller.sidebar.mode = ResizeMode.FIT

    resized = controller.resize_current()

    assert resized is not None
    assert (resized.width, resized.height) == (400, 300)
    assert controller.viewer.resized is resized.pil_image
    assert controller.sidebar.filename == "holiday.photo_400x300.jpg"

    saved = controller.save_to(tmp_path / "out.jpg")
    assert saved is not None and saved.read_bytes() == resized.encoded


def test_new_image_clears_previous_result(controller: AppController, landscape_jpeg: Path) -> None:
    controller.open_path(landscape_jpeg)
    controller.resize_current()
    controller.open_path(landscape_jpeg)

    assert controller.current_result is None
    assert controller.sidebar.result is None
    assert controller.viewer.source is None
    assert controller.bottom.summary == ""
    assert controller.viewer.view_mode == controller.bottom.view_mode == "original"


def test_invalid_target_is_reported_not_raised(controller: AppController, landscape_jpeg: Path) -> None:
    controller.open_path(landscape_jpeg)
    controller.sidebar.width = "0"

    assert controller.resize_current() is None
    assert controller.sidebar.error
    ms, _callback = controller.window.scheduled[-1]
    assert ms == controller.config.error_timeout_ms


def test_error_clears_after_timeout(controller: AppController, tmp_path: Path) -> None:
    path = tmp_path / "bad.png"
    path.write_text("nope")

    assert not controller.open_path(path)
    assert controller.sidebar.error

    _ms, callback = controller.window.scheduled[-1]
    callback()
    assert controller.sidebar.error == ""


def test_button_disabled_without_valid_target(controller: AppController, landscape_jpeg: Path) -> None:
    controller.open_path(landscape_jpeg)
    controller.sidebar.height = "abc"
    controller.sidebar.on_target_change()
    assert not controller.sidebar.resize_enabled


def test_save_without_result_is_noop(controller: AppController, tmp_path: Path) -> None:
    result: Optional[Path] = controller.save_to(tmp_path / "x.jpg")
    assert result is None
    assert not (tmp_path / "x.jpg").exists()


def test_fill_result_shows_crop_and_summary(controller: AppController, landscape_jpeg: Path) -> None:
    controller.open_path(landscape_jpeg)
    controller.sidebar.width, controller.sidebar.height = "400", "400"
    controller.sidebar.mode = ResizeMode.FILL

    resized = controller.resize_current()

    assert controller.viewer.source.box == pytest.approx(SourceRect(100, 0, 600, 600).box)
    assert controller.viewer.view_mode == controller.bottom.view_mode == "side_by_side"
    assert controller.bottom.summary.startswith("800 × 600 → 400 × 400 · fill · ")
    assert controller.bottom.summary.endswith("кроп 600 × 600 от (100, 0)")
    assert resized is not None and format_file_size(resized.size_bytes) in controller.bottom.summary


def test_bottom_bar_drives_viewer(controller: AppController, landscape_jpeg: Path) -> None:
    controller.open_path(landscape_jpeg)

    controller.bottom.on_view_mode_change("result")
    controller.bottom.on_show_crop_change(False)

    assert controller.viewer.view_mode == controller.bottom.view_mode == "result"
    assert controller.viewer.show_crop is False


def test_failed_resize_keeps_previous_preview(controller: AppController, landscape_jpeg: Path) -> None:
    controller.open_path(landscape_jpeg)
    first = controller.resize_current()
    controller.sidebar.width = "x"

    assert controller.resize_current() is None
    assert first is not None and controller.viewer.resized is first.pil_image
