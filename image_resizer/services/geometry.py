"""Резолвер геометрии ресайза.

Чистая функция: (исходный размер, целевой размер, режим) -> (размер холста, прямоугольник выборки).
Без состояния и ввода-вывода, безопасна для одновременного вызова.

Режимы:
- exact: холст равен цели, исходник растягивается целиком.
- fit: пропорции сохраняются, результат вписан в цель (может быть меньше по одной оси).
- fill: холст равен цели, исходник обрезается по центру.
"""
from __future__ import annotations

import logging
from typing import Union

from image_resizer.models.errors import InvalidDimensions
from image_resizer.models.resize_model import (
    Dimensions,
    ResizeMode,
    ResizeRequest,
    ResizeResult,
    SourceRect,
    round_half_up,
)

logger = logging.getLogger(__name__)


def resolve(original: Dimensions, target: Dimensions, mode: Union[ResizeMode, str]) -> ResizeResult:
    """Вычисляет размер холста и прямоугольник выборки для выбранного режима.

    Args:
        original: Натуральный размер исходного изображения.
        target: Желаемый размер.
        mode: Режим ресайза (член `ResizeMode` или его строковое значение).

    Returns:
        `ResizeResult`; в режиме fill координаты выборки не округляются.

    Raises:
        InvalidDimensions: если `original` или `target` не `Dimensions`.
        UnknownMode: если режим вне exact / fit / fill.
    """
    if not isinstance(original, Dimensions) or not isinstance(target, Dimensions):
        raise InvalidDimensions(f"Ожидались Dimensions, получено {original!r} и {target!r}")
    mode = ResizeMode.parse(mode)

    full = SourceRect.full(original)

    if mode is ResizeMode.EXACT:
        result = ResizeResult(output=target, source=full)
    elif mode is ResizeMode.FIT:
        scale = min(target.width / original.width, target.height / original.height)
        # a sliver of a very thin source must still be at least one pixel
        output = Dimensions(
            max(1, round_half_up(original.width * scale)),
            max(1, round_half_up(original.height * scale)),
        )
        result = ResizeResult(output=output, source=full)
    else:
        scale = max(target.width / original.width, target.height / original.height)
        source_w = target.width / scale
        source_h = target.height / scale
        source = SourceRect(
            x=(original.width - source_w) / 2,
            y=(original.height - source_h) / 2,
            width=source_w,
            height=source_h,
        )
        result = ResizeResult(output=target, source=source)

    logger.debug("resolve %s: %s -> %s, source=%s", mode.value, original, result.output, result.source)
    return result


def resolve_request(request: ResizeRequest) -> ResizeResult:
    return resolve(request.original, request.target, request.mode)


def calculate_dimensions(
    original_width: float,
    original_height: float,
    target_width: float,
    target_height: float,
    mode: Union[ResizeMode, str],
) -> ResizeResult:
    """Плоская форма `resolve` для вызова с числами вместо `Dimensions`."""
    return resolve(
        Dimensions(original_width, original_height),
        Dimensions(target_width, target_height),
        mode,
    )
