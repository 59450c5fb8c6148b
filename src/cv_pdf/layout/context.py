"""Mutable layout state for one PDF generation pass.

Coordinates follow PDF conventions: the origin is the bottom-left corner of
the page and ``y`` decreases as content flows down. Conversion to fpdf2's
top-left system happens only at the drawing calls.

Link annotations are kept pending for the current page and attached to it by
:meth:`RenderContext.flush_annotations`. Every page change goes through
:meth:`RenderContext.new_page`, which flushes first, so links cannot be left
behind on a superseded page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fpdf import FPDF

from cv_pdf.config import AppConfig
from cv_pdf.layout import style
from cv_pdf.layout.fonts import Font, register_fonts
from cv_pdf.layout.segments import Bullet, Link, PlainText, Segment

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class LinkAnnotation:
    """Clickable rectangle ``[x0, y0, x1, y1]`` in page coordinates."""

    x0: float
    y0: float
    x1: float
    y1: float
    url: str

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass
class PageRecord:
    number: int
    links: list[LinkAnnotation] = field(default_factory=list)


class RenderContext:
    """Cursor, page flow and annotation bookkeeping over an fpdf2 document."""

    def __init__(self, config: AppConfig, pdf: FPDF | None = None):
        self.config = config
        self.page_config = config.page
        self.bullets = config.bullets
        self.pdf = pdf or FPDF(
            orientation="P",
            unit="pt",
            format=(config.page.width, config.page.height),
        )
        self.pdf.set_auto_page_break(False)
        self.pdf.set_margins(config.page.margin, config.page.margin, config.page.margin)
        self.regular, self.bold = register_fonts(self.pdf, config.fonts)

        self.pages: list[PageRecord] = []
        self.pending_links: list[LinkAnnotation] = []
        self.y = 0.0
        self._add_page()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def margin(self) -> float:
        return self.page_config.margin

    @property
    def line_height(self) -> float:
        return self.page_config.line_height

    @property
    def content_width(self) -> float:
        return self.page_config.content_width

    @property
    def right_edge(self) -> float:
        return self.page_config.width - self.page_config.margin

    @property
    def top(self) -> float:
        return self.page_config.top

    @property
    def bottom(self) -> float:
        return self.page_config.margin

    @property
    def usable_height(self) -> float:
        return self.top - self.bottom

    @property
    def page_number(self) -> int:
        return len(self.pages)

    def _to_fpdf_y(self, y: float) -> float:
        return self.page_config.height - y

    # ------------------------------------------------------------------
    # Page flow
    # ------------------------------------------------------------------

    def fits(self, height: float, y: float | None = None) -> bool:
        start = self.y if y is None else y
        return start - height >= self.bottom

    def ensure_space(self, height: float) -> bool:
        """Start a new page when ``height`` does not fit. Returns True if it did."""
        if self.fits(height):
            return False
        self.new_page()
        return True

    def new_page(self) -> None:
        """Flush pending annotations, then continue at the top of a fresh page."""
        self.flush_annotations()
        self._add_page()

    def _add_page(self) -> None:
        self.pdf.add_page()
        self.pages.append(PageRecord(number=self.pdf.page))
        self.y = self.top
        logger.debug("Started page %d", self.pdf.page)

    def flush_annotations(self) -> None:
        """Attach pending link annotations to the current page."""
        if not self.pending_links:
            return
        record = self.pages[-1]
        for link in self.pending_links:
            self.pdf.link(
                link.x0,
                self._to_fpdf_y(link.y1),
                link.width,
                link.height,
                link.url,
            )
            record.links.append(link)
        logger.debug("Attached %d link(s) to page %d", len(self.pending_links), record.number)
        self.pending_links = []

    def finish(self) -> bytes:
        """Flush the last page and serialise the document."""
        self.flush_annotations()
        return bytes(self.pdf.output())

    @property
    def attached_links(self) -> list[LinkAnnotation]:
        return [link for page in self.pages for link in page.links]

    # ------------------------------------------------------------------
    # Drawing primitives
    # ------------------------------------------------------------------

    def draw_text(
        self, text: str, x: float, y: float, size: float, font: Font, color: RGB
    ) -> float:
        """Draw ``text`` with its baseline at ``y``. Returns the advance width."""
        if not text:
            return 0.0
        font.activate(size)
        self.pdf.set_text_color(*color)
        prepared = font.prepare(text)
        self.pdf.text(x, self._to_fpdf_y(y), prepared)
        return self.pdf.get_string_width(prepared)

    def draw_bullet(self, x: float, y: float, size: float, color: RGB = style.ACCENT) -> None:
        """Filled circle centred on the lowercase height of text at ``size``."""
        self.draw_circle(
            x + size * self.bullets.x_offset_ratio,
            y + size * self.bullets.baseline_offset_ratio,
            self.bullet_radius(size),
            color,
        )

    def draw_circle(self, cx: float, cy: float, radius: float, color: RGB = style.ACCENT) -> None:
        self.pdf.set_fill_color(*color)
        self.pdf.ellipse(
            cx - radius, self._to_fpdf_y(cy) - radius, 2 * radius, 2 * radius, style="F"
        )

    def bullet_radius(self, size: float) -> float:
        return self.bullets.radius if size >= style.BODY_SIZE else self.bullets.small_radius

    def draw_rule(self, y: float, color: RGB = style.ACCENT) -> None:
        self.pdf.set_draw_color(*color)
        self.pdf.set_line_width(style.RULE_THICKNESS)
        fy = self._to_fpdf_y(y)
        self.pdf.line(self.margin, fy, self.right_edge, fy)

    def add_link(self, x: float, y: float, width: float, size: float, url: str) -> LinkAnnotation:
        """Register a link over text drawn at baseline ``y``, pending until flushed."""
        link = LinkAnnotation(
            x0=x,
            y0=y - style.LINK_DESCENT,
            x1=x + width,
            y1=y + size * style.LINK_ASCENT_RATIO,
            url=url,
        )
        self.pending_links.append(link)
        return link

    def bullet_advance(self, size: float, font: Font) -> tuple[float, float]:
        """Return ``(gap, glyph)`` widths used around one bullet at ``size``."""
        gap = style.BULLET_GAP_SPACES * font.width_of(" ", size)
        return gap, style.BULLET_ADVANCE_EM * size

    def draw_segments(
        self,
        segments: list[Segment],
        x: float,
        y: float,
        size: float,
        font: Font,
        color: RGB,
        link_color: RGB = style.ACCENT,
    ) -> float:
        """Draw a run of segments on one baseline. Returns the x after the run."""
        cursor = x
        for segment in segments:
            if isinstance(segment, Bullet):
                gap, glyph = self.bullet_advance(size, font)
                cursor += gap
                self.draw_bullet(cursor, y, size)
                cursor += glyph + gap
            elif isinstance(segment, Link):
                width = self.draw_text(segment.text, cursor, y, size, font, link_color)
                self.add_link(cursor, y, width, size, segment.url)
                cursor += width
            elif isinstance(segment, PlainText):
                cursor += self.draw_text(segment.text, cursor, y, size, font, color)
        return cursor

    def segments_width(self, segments: list[Segment], size: float, font: Font) -> float:
        width = 0.0
        for segment in segments:
            if isinstance(segment, Bullet):
                gap, glyph = self.bullet_advance(size, font)
                width += 2 * gap + glyph
            else:
                width += font.width_of(segment.text, size)
        return width
