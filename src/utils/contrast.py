"""WCAG 2.x luminance and contrast-ratio arithmetic.

Inputs are sRGB components in [0, 1]. Colour-space conversion happens
upstream; a colour with fewer than three components is treated as grey.
"""

from __future__ import annotations

from typing import Optional, Sequence

from core.config import get_settings
from schemas.internal.text import ContrastAnalysis, ContrastLevel, TextChunk


def _linearize(component: float) -> float:
    if component <= 0.03928:
        return component / 12.92
    return ((component + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Sequence[float]) -> float:
    """Return the relative luminance of an sRGB colour."""
    if not color:
        return 0.0
    if len(color) >= 3:
        red, green, blue = color[0], color[1], color[2]
    else:
        red = green = blue = color[0]
    return (
        0.2126 * _linearize(red)
        + 0.7152 * _linearize(green)
        + 0.0722 * _linearize(blue)
    )


def contrast_ratio(foreground: Sequence[float], background: Sequence[float]) -> float:
    """Return the contrast ratio between two colours, in [1, 21]."""
    first = relative_luminance(foreground)
    second = relative_luminance(background)
    lighter, darker = max(first, second), min(first, second)
    return (lighter + 0.05) / (darker + 0.05)


def analyze_text_chunk(
    chunk: TextChunk, *, level: Optional[ContrastLevel] = None
) -> Optional[ContrastAnalysis]:
    """Measure a chunk's contrast, or None when its background is unknown.

    A pre-computed ``contrast_ratio`` on the chunk wins over the colours.
    ``level`` defaults to ``CONTRAST_LEVEL``.
    """
    if chunk.background_color is None:
        return None
    if level is None:
        level = get_settings().contrast_level
    ratio = chunk.contrast_ratio
    if ratio is None:
        ratio = contrast_ratio(chunk.text_color, chunk.background_color)
    return ContrastAnalysis(
        foreground_color=chunk.text_color,
        background_color=chunk.background_color,
        ratio=ratio,
        text_type=chunk.text_type,
        level=level,
        passes=chunk.text_type.meets_contrast(ratio, level),
    )


__all__ = ["analyze_text_chunk", "contrast_ratio", "relative_luminance"]
