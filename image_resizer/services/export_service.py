"""Кодирование в JPEG и экспорт результата.

Принципы:
- SRP: кодирование, имена файлов и запись на диск; геометрии здесь нет.
- Чистый код: функции без состояния, параметры явно передаются вызывающим.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from image_resizer.config import validate_quality

logger = logging.getLogger(__name__)

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def encode_jpeg(
    image: Image.Image,
    quality: float,
    background: Tuple[int, int, int] = (255, 255, 255),
) -> bytes:
    """Кодирует изображение в JPEG.

    Args:
        image: Растр любого режима; альфа-канал сводится на `background`.
        quality: 0 — максимальное сжатие, 1 — наилучшее качество.
        background: Цвет подложки для прозрачных пикселей.

    Returns:
        Байты JPEG.

    Raises:
        InvalidQuality: если `quality` не число из [0, 1].
    """
    quality = validate_quality(quality)
    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        flat = Image.new("RGBA", rgba.size, background + (255,))
        flat.alpha_composite(rgba)
        rgb = flat.convert("RGB")
    else:
        rgb = image.convert("RGB")

    buffer = io.BytesIO()
    rgb.save(buffer, format="JPEG", quality=int(round(quality * 100)))
    return buffer.getvalue()


def default_filename(
    base_name: Optional[str],
    width: int,
    height: int,
    fallback: str = "resized",
    extension: str = ".jpg",
) -> str:
    """Имя вида `{база}_{ширина}x{высота}.jpg`."""
    return f"{base_name or fallback}_{width}x{height}{extension}"


def choose_filename(user_value: Optional[str], default: str) -> str:
    """Введённое пользователем имя, либо имя по умолчанию, если поле пустое."""
    value = (user_value or "").strip()
    return value or default


def format_file_size(size_bytes: int) -> str:
    """Человекочитаемый размер: `0 Bytes`, `1.5 KB`, `2.25 MB`.

    Основание 1024, не более двух знаков после точки, хвостовые нули отбрасываются.
    """
    if size_bytes <= 0:
        return "0 Bytes"
    index = 0
    while size_bytes >= 1024 ** (index + 1) and index < len(_SIZE_UNITS) - 1:
        index += 1
    text = f"{size_bytes / 1024 ** index:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[index]}"


def save_bytes(data: bytes, path: str | Path) -> Path:
    """Записывает байты в файл; каталог должен существовать.

    Raises:
        FileNotFoundError: если каталога назначения нет.
        OSError: при ошибке записи.
    """
    target = Path(path)
    if not target.parent.is_dir():
        raise FileNotFoundError(f"Каталог не найден: {target.parent}")
    target.write_bytes(data)
    logger.info("Сохранено %s (%s)", target, format_file_size(len(data)))
    return target
