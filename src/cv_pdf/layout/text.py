"""Greedy text wrapping against measured font widths."""

from __future__ import annotations

from typing import Protocol

from cv_pdf.layout.style import BULLET_ADVANCE_EM, BULLET_GAP_SPACES


class Measurable(Protocol):
    def width_of(self, text: str, size: float) -> float: ...


def wrap_text(text: str, max_width: float, font_size: float, font: Measurable) -> list[str]:
    """Wrap ``text`` into lines no wider than ``max_width``.

    Breaks only between words. A word that is wider than ``max_width`` on its
    own is emitted alone on its line, unbroken.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and font.width_of(candidate, font_size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def bullet_joint_width(font: Measurable, font_size: float) -> float:
    """Horizontal space taken by one bullet glyph plus its surrounding gaps."""
    space = font.width_of(" ", font_size)
    return 2 * BULLET_GAP_SPACES * space + BULLET_ADVANCE_EM * font_size


def bullet_line_width(items: list[str], font_size: float, font: Measurable) -> float:
    if not items:
        return 0.0
    joints = (len(items) - 1) * bullet_joint_width(font, font_size)
    return sum(font.width_of(item, font_size) for item in items) + joints


def wrap_bullet_list(
    items: list[str], max_width: float, font_size: float, font: Measurable
) -> list[list[str]]:
    """Wrap bullet-separated ``items`` into lines of whole items.

    The width check uses the rendered joint (gap, bullet glyph, gap), which is
    wider than a plain ``" • "`` separator.
    """
    joint = bullet_joint_width(font, font_size)
    lines: list[list[str]] = []
    current: list[str] = []
    line_width = 0.0
    for item in items:
        item_width = font.width_of(item, font_size)
        if current and line_width + joint + item_width > max_width:
            lines.append(current)
            current = [item]
            line_width = item_width
        elif current:
            current.append(item)
            line_width += joint + item_width
        else:
            current = [item]
            line_width = item_width
    if current:
        lines.append(current)
    return lines
