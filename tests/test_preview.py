from __future__ import annotations

from pathlib import Path

import pytest

from image_resizer.models.resize_model import Dimensions, ResizeMode, SourceRect
from image_resizer.services.image_service import ImageService
from image_resizer.services.resize_service import ResizeService
from image_resizer.ui.preview import Placement, caption, crop_visible, layout_row, map_rect, result_summary


class TestLayoutRow:
    def test_small_image_is_centered_not_upscaled(self) -> None:
        (place,) = layout_row([(100, 50)], (400, 300), gap=16, caption_height=22)
        assert place == Placement(150, 114, 100, 50, 1.0)

    def test_side_by_side_shares_one_scale(self) -> None:
        original, result = layout_row([(800, 600), (400, 400)], (616, 322), gap=16, caption_height=22)

        assert original == Placement(0, 0, 400, 300, 0.5)
        assert result == Placement(416, 0, 200, 200, 0.5)

    def test_height_can_limit_scale(self) -> None:
        (place,) = layout_row([(100, 400)], (1000, 222), gap=16, caption_height=22)
        assert (place.width, place.height) == (50, 200)
        assert place.scale == pytest.approx(0.5)

    def test_tiny_panel_keeps_one_pixel(self) -> None:
        for place in layout_row([(5000, 10), (10, 5000)], (1, 1)):
            assert place.width >= 1 and place.height >= 1

    def test_nothing_to_lay_out(self) -> None:
        assert layout_row([], (400, 300)) == []


def test_map_rect_scales_and_offsets() -> None:
    place = Placement(10, 20, 400, 300, 0.5)
    assert map_rect(SourceRect(100, 0, 600, 600), place) == pytest.approx((60, 20, 360, 320))


@pytest.mark.parametrize(
    "source,expected",
    [
        (SourceRect(0, 0, 800, 600), False),
        (SourceRect(1e-9, 0, 800 - 2e-9, 600), False),
        (SourceRect(100, 0, 600, 600), True),
        (SourceRect(0, 0.75, 800, 598.5), True),
    ],
)
def test_crop_visible(source: SourceRect, expected: bool) -> None:
    assert crop_visible(source, Dimensions(800, 600)) is expected


def test_caption() -> None:
    assert caption("Результат", 400, 300) == "Результат · 400 × 300"


class TestResultSummary:
    @pytest.fixture
    def service(self) -> ResizeService:
        return ResizeService()

    def test_fill_mentions_crop(self, service: ResizeService, landscape_jpeg: Path) -> None:
        image = ImageService().load_image(landscape_jpeg)
        resized = service.resize(image, service.build_request(image, Dimensions(400, 400), ResizeMode.FILL))

        text = result_summary(resized)
        assert text.startswith("800 × 600 → 400 × 400 · fill · ")
        assert text.endswith(" · кроп 600 × 600 от (100, 0)")

    def test_fit_reports_actual_size_without_crop(self, service: ResizeService, landscape_jpeg: Path) -> None:
        image = ImageService().load_image(landscape_jpeg)
        resized = service.resize(image, service.build_request(image, Dimensions(400, 400), ResizeMode.FIT))

        text = result_summary(resized)
        assert text.startswith("800 × 600 → 400 × 300 · fit · ")
        assert "кроп" not in text
