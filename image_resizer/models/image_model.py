"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from image_resizer.models.resize_model import Dimensions, ResizeRequest, ResizeResult


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель исходного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL (RGBA, с учётом EXIF-ориентации).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "RGB".
        size_bytes: Размер файла, если доступен.
        stem: Имя файла без расширения, база для имени результата.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
    stem: str

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)


@dataclass(frozen=True)
class ResizedImage:
    """Результат одного прохода конвейера: геометрия, растр и закодированный JPEG."""
    request: ResizeRequest
    result: ResizeResult
    pil_image: Image.Image
    encoded: bytes
    quality: float
    default_filename: str

    @property
    def size_bytes(self) -> int:
        return len(self.encoded)

    @property
    def width(self) -> int:
        return self.pil_image.width

    @property
    def height(self) -> int:
        return self.pil_image.height
