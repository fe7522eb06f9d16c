"""Растеризация и конвейер ресайза: геометрия -> растр -> JPEG.

Принципы:
- SRP: геометрию считает `geometry.resolve`, кодирование — `export_service`;
  здесь только их связка и отрисовка выбранного прямоугольника.
- DIP: настройки приходят через `ResizerConfig`, а не читаются из UI.
"""
from __future__ import annotations

import logging
from typing import Union

from PIL import Image

from image_resizer.config import ResizerConfig, validate_quality
from image_resizer.models.errors import InvalidDimensions
from image_resizer.models.image_model import ImageData, ResizedImage
from image_resizer.models.resize_model import Dimensions, ResizeMode, ResizeRequest, ResizeResult
from image_resizer.services.export_service import default_filename, encode_jpeg
from image_resizer.services.geometry import resolve, resolve_request

logger = logging.getLogger(__name__)


def rasterize(image: Image.Image, result: ResizeResult) -> Image.Image:
    """Рисует `result.source` исходника на холст размера `result.output`.

    Используется LANCZOS; координаты прямоугольника могут быть дробными.

    Raises:
        InvalidDimensions: если сторона холста после округления меньше 1 px.
    """
    size = result.output.as_pixels()
    if min(size) < 1:
        raise InvalidDimensions(f"Холст {size[0]}x{size[1]} px: каждая сторона должна быть не меньше 1 px")
    left, top, right, bottom = result.source.box
    # Pillow rejects a box that overshoots the image by float noise
    box = (max(0.0, left), max(0.0, top), min(float(image.width), right), min(float(image.height), bottom))
    return image.resize(size, Image.Resampling.LANCZOS, box=box)


def simple_resize(image: Image.Image, width: int, height: int, quality: float = 0.9) -> bytes:
    """Растягивает изображение ровно до width x height и возвращает JPEG."""
    result = resolve(Dimensions(*image.size), Dimensions(width, height), ResizeMode.EXACT)
    return encode_jpeg(rasterize(image, result), quality)


def resize_with_aspect_ratio(image: Image.Image, max_width: int, max_height: int, quality: float = 0.9) -> bytes:
    """Вписывает изображение в max_width x max_height с сохранением пропорций и возвращает JPEG."""
    result = resolve(Dimensions(*image.size), Dimensions(max_width, max_height), ResizeMode.FIT)
    return encode_jpeg(rasterize(image, result), quality)


class ResizeService:
    def __init__(self, config: ResizerConfig | None = None) -> None:
        self._config = config or ResizerConfig()

    @property
    def config(self) -> ResizerConfig:
        return self._config

    def build_request(self, image_data: ImageData, target: Dimensions, mode: Union[ResizeMode, str]) -> ResizeRequest:
        return ResizeRequest(original=image_data.dimensions, target=target, mode=ResizeMode.parse(mode))

    def resize(self, image_data: ImageData, request: ResizeRequest, quality: float | None = None) -> ResizedImage:
        """Полный проход конвейера для одного изображения.

        Args:
            image_data: Загруженный исходник.
            request: Запрос ресайза (исходный размер должен совпадать с `image_data`).
            quality: Качество JPEG в [0, 1]; по умолчанию берётся из конфигурации.

        Returns:
            `ResizedImage` с растром, байтами JPEG и именем файла по умолчанию.

        Raises:
            InvalidDimensions, UnknownMode: некорректный запрос или запрос к другому исходнику.
            InvalidQuality: качество вне [0, 1].
        """
        if request.original != image_data.dimensions:
            raise InvalidDimensions(
                f"Запрос рассчитан на {request.original}, а изображение {image_data.width}x{image_data.height}"
            )
        quality = validate_quality(self._config.default_quality if quality is None else quality)
        result = resolve_request(request)
        raster = rasterize(image_data.pil_image, result)
        encoded = encode_jpeg(raster, quality, background=self._config.background)
        filename = default_filename(
            image_data.stem,
            raster.width,
            raster.height,
            fallback=self._config.fallback_basename,
            extension=self._config.output_extension,
        )
        logger.info(
            "%s: %dx%d -> %dx%d (%s), %d байт",
            image_data.path.name,
            image_data.width,
            image_data.height,
            raster.width,
            raster.height,
            request.mode.value,
            len(encoded),
        )
        return ResizedImage(
            request=request,
            result=result,
            pil_image=raster,
            encoded=encoded,
            quality=quality,
            default_filename=filename,
        )
