"""Геометрия панели предпросмотра: раскладка картинок, рамка кропа, подписи.

Принципы:
- SRP: только расчёты координат и текстов, без tkinter, поэтому проверяется без окна.
- Виджеты (`ImageViewer`, `BottomBar`) лишь рисуют то, что посчитано здесь.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from image_resizer.models.image_model import ResizedImage
from image_resizer.models.resize_model import Dimensions, SourceRect, round_half_up
from image_resizer.services.export_service import format_file_size

PREVIEW_GAP = 16
CAPTION_HEIGHT = 22


@dataclass(frozen=True)
class Placement:
    """Положение картинки на канве.

    Fields:
        x, y: Левый верхний угол в координатах канвы.
        width, height: Размер после масштабирования.
        scale: Общий масштаб ряда (пиксели канвы на пиксель картинки).
    """
    x: int
    y: int
    width: int
    height: int
    scale: float


def layout_row(
    sizes: Sequence[Tuple[int, int]],
    panel: Tuple[int, int],
    gap: int = PREVIEW_GAP,
    caption_height: int = CAPTION_HEIGHT,
) -> List[Placement]:
    """Раскладывает картинки в один ряд в общем масштабе.

    Масштаб общий, чтобы результат и исходник сохраняли реальное соотношение
    размеров. Крупнее 1:1 картинки не растягиваются. Ряд центрируется по
    горизонтали, картинки выровнены по верхнему краю, под ними остаётся место
    для подписи.
    """
    if not sizes:
        return []
    panel_w, panel_h = panel
    free_w = max(1, panel_w - gap * (len(sizes) - 1))
    free_h = max(1, panel_h - caption_height)
    row_w = sum(w for w, _ in sizes)
    row_h = max(h for _, h in sizes)
    scale = min(1.0, free_w / row_w, free_h / row_h)

    scaled = [(max(1, round_half_up(w * scale)), max(1, round_half_up(h * scale))) for w, h in sizes]
    total_w = sum(w for w, _ in scaled) + gap * (len(scaled) - 1)
    x = max(0, (panel_w - total_w) // 2)
    y = max(0, (panel_h - caption_height - max(h for _, h in scaled)) // 2)

    placements = []
    for w, h in scaled:
        placements.append(Placement(x, y, w, h, scale))
        x += w + gap
    return placements


def map_rect(source: SourceRect, placement: Placement) -> Tuple[float, float, float, float]:
    """Переводит прямоугольник выборки из пикселей исходника в координаты канвы."""
    left, top, right, bottom = source.box
    s = placement.scale
    return placement.x + left * s, placement.y + top * s, placement.x + right * s, placement.y + bottom * s


def crop_visible(source: SourceRect, original: Dimensions) -> bool:
    """True, если выборка заметно (больше чем на полпикселя) меньше исходника."""
    full = SourceRect.full(original).box
    return any(not math.isclose(a, b, abs_tol=0.5) for a, b in zip(source.box, full))


def caption(label: str, width: int, height: int) -> str:
    return f"{label} · {width} × {height}"


def result_summary(resized: ResizedImage) -> str:
    """Строка итога: `800 × 600 → 400 × 400 · fill · 34.2 KB · кроп 600 × 600 от (100, 0)`."""
    ow, oh = resized.request.original.as_pixels()
    parts = [
        f"{ow} × {oh} → {resized.width} × {resized.height}",
        resized.request.mode.value,
        format_file_size(resized.size_bytes),
    ]
    source = resized.result.source
    if crop_visible(source, resized.request.original):
        parts.append(
            f"кроп {round_half_up(source.width)} × {round_half_up(source.height)}"
            f" от ({round_half_up(source.x)}, {round_half_up(source.y)})"
        )
    return " · ".join(parts)
