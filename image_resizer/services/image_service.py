"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from image_resizer.models.errors import UnsupportedImageError
from image_resizer.models.image_model import ImageData

logger = logging.getLogger(__name__)


def filename_without_extension(filename: str) -> str:
    """Отрезает последнее расширение; имя, начинающееся с точки («.bashrc»), не трогает."""
    dot = filename.rfind(".")
    return filename[:dot] if dot > 0 else filename


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA, повёрнутым по EXIF),
            размерами, исходным режимом, размером файла и именем без расширения.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            UnsupportedImageError: если файл не распознан как изображение
                или превышает `Image.MAX_IMAGE_PIXELS`.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as opened:
                source_mode = opened.mode
                # browsers report the natural size after EXIF rotation, so do we
                pil_image = ImageOps.exif_transpose(opened).convert("RGBA")
        except UnidentifiedImageError as exc:
            raise UnsupportedImageError(f"Файл не является изображением: {path}") from exc
        except Image.DecompressionBombError as exc:
            raise UnsupportedImageError(f"Изображение слишком велико для декодирования: {path}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.info("Загружено %s: %dx%d %s", path.name, width, height, source_mode)
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=source_mode,
            size_bytes=size_bytes,
            stem=filename_without_extension(path.name),
        )
