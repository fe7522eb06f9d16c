"""Настройки приложения и конфигурация логирования."""
from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass
from typing import Tuple

from image_resizer.models.errors import InvalidQuality
from image_resizer.models.resize_model import ResizeMode

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class ResizerConfig:
    """Значения по умолчанию для GUI и CLI.

    Fields:
        default_quality: Качество JPEG в [0, 1].
        default_mode: Режим, выбранный при запуске.
        fallback_basename: База имени файла, если имя исходника неизвестно.
        output_extension: Расширение экспортируемого файла.
        background: Цвет подложки при сведении альфа-канала в JPEG.
        error_timeout_ms: Через сколько мс скрывать сообщение об ошибке в UI.
        log_level: Уровень логирования по умолчанию.
    """
    default_quality: float = 0.9
    default_mode: ResizeMode = ResizeMode.EXACT
    fallback_basename: str = "resized"
    output_extension: str = ".jpg"
    background: Tuple[int, int, int] = (255, 255, 255)
    error_timeout_ms: int = 5000
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        validate_quality(self.default_quality)
        if self.error_timeout_ms <= 0:
            raise ValueError(f"error_timeout_ms должен быть > 0, получено {self.error_timeout_ms}")


def validate_quality(quality: object) -> float:
    """Проверяет качество JPEG и возвращает его как float.

    Raises:
        InvalidQuality: если значение не число из [0, 1].
    """
    if isinstance(quality, bool) or not isinstance(quality, (int, float)):
        raise InvalidQuality(f"Качество должно быть числом, получено {quality!r}")
    value = float(quality)
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise InvalidQuality(f"Качество должно быть в диапазоне [0, 1], получено {quality!r}")
    return value


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
