"""Read a generated PDF back: page text and clickable link regions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LinkRegion:
    uri: str
    # PDF coordinates (origin bottom-left), matching the layout engine.
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass
class PageSummary:
    number: int
    text: str
    links: list[LinkRegion] = field(default_factory=list)

    def contains(self, needle: str) -> bool:
        return needle in self.text


def inspect_pdf(source: bytes | str | Path) -> list[PageSummary]:
    """Summarise every page of a PDF given as bytes or a file path."""
    import fitz  # pymupdf

    if isinstance(source, (bytes, bytearray)):
        doc = fitz.open(stream=bytes(source), filetype="pdf")
    else:
        doc = fitz.open(str(source))
    summaries = []
    try:
        for page in doc:
            height = page.rect.height
            links = [
                LinkRegion(
                    uri=link["uri"],
                    x0=link["from"].x0,
                    y0=height - link["from"].y1,
                    x1=link["from"].x1,
                    y1=height - link["from"].y0,
                )
                for link in page.get_links()
                if link.get("uri")
            ]
            summaries.append(
                PageSummary(number=page.number + 1, text=page.get_text(), links=links)
            )
    finally:
        doc.close()
    return summaries
