"""Общие фикстуры: изображения, сгенерированные Pillow во временном каталоге."""
from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image


def make_image(path: Path, size: tuple[int, int], color=(200, 120, 40), mode: str = "RGB", **save_kwargs) -> Path:
    Image.new(mode, size, color).save(path, **save_kwargs)
    return path


@pytest.fixture
def landscape_jpeg(tmp_path: Path) -> Path:
    """800x600 JPEG."""
    return make_image(tmp_path / "holiday.photo.jpg", (800, 600))


@pytest.fixture
def transparent_png(tmp_path: Path) -> Path:
    """64x32 полностью прозрачный PNG."""
    return make_image(tmp_path / "logo.png", (64, 32), color=(0, 0, 0, 0), mode="RGBA")


@pytest.fixture
def striped_image() -> Image.Image:
    """300x100: красная, зелёная и синяя вертикальные полосы по 100 px."""
    image = Image.new("RGBA", (300, 100))
    for index, color in enumerate([(255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255)]):
        image.paste(color, (index * 100, 0, index * 100 + 100, 100))
    return image
