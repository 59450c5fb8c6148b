"""Tagged text runs drawn left to right on a single line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

URL_PATTERN = re.compile(r"https?://\S+")
# " - " inside metadata text (date ranges, compound company names).
_DASH_SEPARATOR = re.compile(r"\s-\s")


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Bullet:
    pass


@dataclass(frozen=True)
class Link:
    text: str
    url: str


Segment = Union[PlainText, Bullet, Link]


def bullet_segments(text: str) -> list[Segment]:
    """Split on ``" - "`` and ``•`` into text runs separated by bullet glyphs."""
    parts = _DASH_SEPARATOR.split(text)
    pieces: list[str] = []
    for part in parts:
        pieces.extend(part.split("•"))

    segments: list[Segment] = []
    for i, piece in enumerate(pieces):
        if i > 0:
            segments.append(Bullet())
        piece = piece.strip()
        if piece:
            segments.append(PlainText(piece))
    return segments


def joined(items: list[str | Segment]) -> list[Segment]:
    """Interleave ``items`` with bullet glyphs. Strings become plain runs."""
    segments: list[Segment] = []
    for i, item in enumerate(items):
        if i > 0:
            segments.append(Bullet())
        segments.append(PlainText(item) if isinstance(item, str) else item)
    return segments


def link_segments(text: str) -> list[Segment]:
    """Split ``text`` into plain runs and :class:`Link` runs for bare URLs."""
    segments: list[Segment] = []
    pos = 0
    for match in URL_PATTERN.finditer(text):
        if match.start() > pos:
            segments.append(PlainText(text[pos:match.start()]))
        segments.append(Link(match.group(0), match.group(0)))
        pos = match.end()
    if pos < len(text):
        segments.append(PlainText(text[pos:]))
    return segments


def has_link(segments: list[Segment]) -> bool:
    return any(isinstance(s, Link) for s in segments)
