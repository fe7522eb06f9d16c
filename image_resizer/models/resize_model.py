"""Модели геометрии ресайза: размеры, прямоугольник выборки, режим, запрос и результат.

Принципы:
- SRP: только структуры данных и их валидация, без вычислений режимов.
- Чистый код: неизменяемость (`frozen=True`), некорректное значение не может быть создано.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Tuple

from image_resizer.models.errors import InvalidDimensions, UnknownMode


def round_half_up(value: float) -> int:
    """Округление «половина вверх» (2.5 -> 3), в отличие от банковского `round`."""
    return int(math.floor(value + 0.5))


def _check_extent(name: str, value: object) -> float:
    # bool is a subclass of int, but True/False are not sizes
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidDimensions(f"{name}: ожидалось число, получено {value!r}")
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        raise InvalidDimensions(f"{name}: размер должен быть положительным и конечным, получено {value!r}")
    return number


@dataclass(frozen=True)
class Dimensions:
    """Размер изображения или холста в пикселях.

    Fields:
        width: Ширина, > 0.
        height: Высота, > 0.

    Raises:
        InvalidDimensions: если хотя бы одна сторона не положительное конечное число.
    """
    width: float
    height: float

    def __post_init__(self) -> None:
        _check_extent("width", self.width)
        _check_extent("height", self.height)

    @classmethod
    def parse(cls, width_text: str, height_text: str) -> "Dimensions":
        """Разбирает пользовательский ввод (строки) в целочисленные размеры.

        Raises:
            InvalidDimensions: если строка не целое число или число не положительное.
        """
        return cls(_parse_int("width", width_text), _parse_int("height", height_text))

    def as_pixels(self) -> Tuple[int, int]:
        """Целочисленный размер для выделения холста."""
        return round_half_up(self.width), round_half_up(self.height)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def _parse_int(name: str, text: str) -> int:
    raw = (text or "").strip()
    # plain ASCII digits only, int() alone also accepts signs and underscores
    digits = raw[1:] if raw.startswith("-") else raw
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidDimensions(f"{name}: «{raw}» не является целым числом")
    value = int(raw)
    if value <= 0:
        raise InvalidDimensions(f"{name}: размер должен быть больше нуля, получено {value}")
    return value


@dataclass(frozen=True)
class SourceRect:
    """Прямоугольник выборки в пиксельном пространстве исходника.

    Координаты вещественные: субпиксельное смещение нужно для точного центрирования кропа.
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def full(cls, dimensions: Dimensions) -> "SourceRect":
        return cls(0, 0, dimensions.width, dimensions.height)

    @property
    def box(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) в формате параметра `box` у Pillow."""
        return self.x, self.y, self.x + self.width, self.y + self.height


class ResizeMode(str, Enum):
    EXACT = "exact"
    FIT = "fit"
    FILL = "fill"

    @classmethod
    def parse(cls, value: object) -> "ResizeMode":
        """Приводит значение к режиму; строки сравниваются без учёта регистра.

        Raises:
            UnknownMode: для любого значения вне exact / fit / fill.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownMode(f"Неизвестный режим ресайза: {value!r}")


@dataclass(frozen=True)
class ResizeRequest:
    """Единственный вход резолвера: исходный размер, целевой размер и режим."""
    original: Dimensions
    target: Dimensions
    mode: ResizeMode


@dataclass(frozen=True)
class ResizeResult:
    """Выход резолвера.

    Fields:
        output: Размер холста назначения.
        source: Прямоугольник, который читается из исходника.
    """
    output: Dimensions
    source: SourceRect
