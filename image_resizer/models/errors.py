"""Иерархия ошибок ресайзера.

Все ошибки прикладного уровня наследуются от `ResizerError`, чтобы контроллер
и CLI могли перехватывать их одним `except`.
"""
from __future__ import annotations


class ResizerError(Exception):
    """Базовая ошибка приложения."""


class InvalidDimensions(ResizerError, ValueError):
    """Размер не положительный, не конечный или вовсе не число."""


class UnknownMode(ResizerError, ValueError):
    """Режим ресайза вне набора exact / fit / fill."""


class InvalidQuality(ResizerError, ValueError):
    """Качество JPEG вне диапазона [0, 1]."""


class UnsupportedImageError(ResizerError):
    """Файл не удалось декодировать как изображение."""
