"""Font registration and text metrics backed by fpdf2."""

from __future__ import annotations

import logging
from pathlib import Path

from fpdf import FPDF

from cv_pdf.config import FontConfig

logger = logging.getLogger(__name__)

EMBEDDED_FAMILY = "ResumeSans"

# Typographic characters that core (Latin-1) fonts cannot encode.
_LATIN1_FALLBACKS = {
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2013": "-",
    "\u2014": "-",
    "\u2022": "-",
    "\u2026": "...",
    "\u00a0": " ",
}


class Font:
    """A family/style pair bound to a document, measuring text at any size."""

    def __init__(self, pdf: FPDF, family: str, style: str = "", unicode: bool = False):
        self._pdf = pdf
        self.family = family
        self.style = style
        self.unicode = unicode

    @property
    def bold(self) -> bool:
        return "B" in self.style

    def activate(self, size: float) -> None:
        self._pdf.set_font(self.family, self.style, size)

    def prepare(self, text: str) -> str:
        """Ensure text is encodable by this font. Replace if needed."""
        if self.unicode:
            return text
        for char, replacement in _LATIN1_FALLBACKS.items():
            text = text.replace(char, replacement)
        try:
            text.encode("latin-1")
            return text
        except UnicodeEncodeError:
            return text.encode("latin-1", errors="replace").decode("latin-1")

    def width_of(self, text: str, size: float) -> float:
        """Advance width of ``text`` at ``size``, in layout units."""
        if not text:
            return 0.0
        self.activate(size)
        return self._pdf.get_string_width(self.prepare(text))

    def __repr__(self) -> str:
        return f"Font({self.family!r}, {self.style!r})"


def register_fonts(pdf: FPDF, config: FontConfig) -> tuple[Font, Font]:
    """Return ``(regular, bold)`` fonts, embedding TTF files when configured."""
    if config.regular_path and config.bold_path:
        for path in (config.regular_path, config.bold_path):
            if not Path(path).exists():
                raise FileNotFoundError(f"Font file not found: {path}")
        pdf.add_font(EMBEDDED_FAMILY, "", config.regular_path)
        pdf.add_font(EMBEDDED_FAMILY, "B", config.bold_path)
        logger.debug("Embedded TTF fonts %s / %s", config.regular_path, config.bold_path)
        return (
            Font(pdf, EMBEDDED_FAMILY, "", unicode=True),
            Font(pdf, EMBEDDED_FAMILY, "B", unicode=True),
        )
    return Font(pdf, config.family, ""), Font(pdf, config.family, "B")
