"""Section renderers for the resume body.

Each renderer draws into a :class:`RenderContext` starting at its cursor and
leaves the cursor below the last thing it drew. Renderers skip their section
entirely when the document has nothing to show for it.
"""

from __future__ import annotations

from cv_pdf.layout import style
from cv_pdf.layout.columns import ColumnFlow, Placement
from cv_pdf.layout.context import RenderContext
from cv_pdf.layout.fonts import Font
from cv_pdf.layout.segments import (
    Link,
    bullet_segments,
    has_link,
    joined,
    link_segments,
)
from cv_pdf.layout.text import wrap_bullet_list, wrap_text
from cv_pdf.models.resume import Project, ResumeDocument

HEADING_SPACE = 40
HEADING_GAP = 10

ENTRY_HEAD_HEIGHT = 16 + 14 + 16
ENTRY_GAP = 8

HIGHLIGHT_SPACE = 30
HIGHLIGHT_INDENT = 10
HIGHLIGHT_BULLET_X = 3
HIGHLIGHT_GAP = 3

SKILL_GROUP_SPACE = 30
LANGUAGE_STEP = 16

PROJECT_TITLE_STEP = 14
PROJECT_META_STEP = 12
PROJECT_GAP = 21


def render_section_heading(ctx: RenderContext, title: str, force_new_page: bool = False) -> None:
    """Heading in the accent colour with a rule underneath."""
    if force_new_page:
        ctx.new_page()
    else:
        ctx.ensure_space(HEADING_SPACE)
        ctx.y -= HEADING_GAP

    ctx.draw_text(title, ctx.margin, ctx.y, style.HEADING_SIZE, ctx.bold, style.ACCENT)
    ctx.y -= 5
    ctx.draw_rule(ctx.y)
    ctx.y -= ctx.line_height + 10


def wrap_paragraphs(text: str, max_width: float, size: float, font: Font) -> list[str]:
    lines: list[str] = []
    for paragraph in text.splitlines():
        lines.extend(wrap_text(paragraph, max_width, size, font))
    return lines


def _body_step(ctx: RenderContext) -> float:
    return ctx.line_height + 2


def _entry_estimate(ctx: RenderContext, body_lines: int) -> float:
    estimate = ENTRY_HEAD_HEIGHT + body_lines * _body_step(ctx) + ENTRY_GAP
    return min(estimate, ctx.usable_height)


def _render_entry_head(ctx: RenderContext, title: str, subtitle: str, period: str) -> None:
    ctx.draw_text(title, ctx.margin, ctx.y, style.BODY_SIZE, ctx.bold, style.ACCENT)
    ctx.y -= 16
    ctx.draw_segments(
        bullet_segments(subtitle), ctx.margin, ctx.y, style.BODY_SIZE, ctx.bold, style.GRAY
    )
    ctx.y -= 14
    ctx.draw_segments(
        bullet_segments(period), ctx.margin, ctx.y, style.META_SIZE, ctx.regular, style.LIGHT_GRAY
    )
    ctx.y -= 16


def _render_body_lines(ctx: RenderContext, lines: list[str]) -> None:
    step = _body_step(ctx)
    for line in lines:
        ctx.ensure_space(step)
        ctx.draw_text(line, ctx.margin, ctx.y, style.BODY_SIZE, ctx.regular, style.GRAY)
        ctx.y -= step


def render_highlights(
    ctx: RenderContext, document: ResumeDocument, force_new_page: bool = False
) -> None:
    items = document.highlights
    if not items:
        return

    render_section_heading(ctx, "HIGHLIGHTS", force_new_page)
    size = style.BODY_SIZE
    text_x = ctx.margin + HIGHLIGHT_INDENT
    for item in items:
        ctx.ensure_space(HIGHLIGHT_SPACE)
        lines = wrap_text(item, ctx.content_width - 15, size, ctx.regular)
        for i, line in enumerate(lines):
            if i == 0:
                ctx.draw_circle(
                    ctx.margin + HIGHLIGHT_BULLET_X,
                    ctx.y + size * ctx.bullets.baseline_offset_ratio,
                    ctx.bullet_radius(size),
                )
            else:
                ctx.ensure_space(ctx.line_height)
            ctx.draw_text(line, text_x, ctx.y, size, ctx.regular, style.GRAY)
            ctx.y -= ctx.line_height
        ctx.y -= HIGHLIGHT_GAP


def render_experience(
    ctx: RenderContext, document: ResumeDocument, force_new_page: bool = False
) -> None:
    if not document.experience:
        return

    render_section_heading(ctx, "WORK EXPERIENCE", force_new_page)
    for entry in document.experience:
        lines = wrap_paragraphs(entry.description, ctx.content_width, style.BODY_SIZE, ctx.regular)
        ctx.ensure_space(_entry_estimate(ctx, len(lines)))
        _render_entry_head(ctx, entry.title, entry.company, entry.display_period)
        _render_body_lines(ctx, lines)
        ctx.y -= ENTRY_GAP


def render_education(
    ctx: RenderContext, document: ResumeDocument, force_new_page: bool = False
) -> None:
    if not document.education:
        return

    render_section_heading(ctx, "EDUCATION", force_new_page)
    step = _body_step(ctx)
    for entry in document.education:
        # Descriptions with URLs stay on a single line, so line breaks collapse.
        segments = link_segments(" ".join(entry.description.split()))
        if has_link(segments):
            lines: list[str] = []
            body_lines = 1
        else:
            lines = wrap_paragraphs(
                entry.description, ctx.content_width, style.BODY_SIZE, ctx.regular
            )
            body_lines = len(lines)

        ctx.ensure_space(_entry_estimate(ctx, body_lines))
        _render_entry_head(ctx, entry.degree, entry.institution, entry.period)

        if has_link(segments):
            ctx.ensure_space(step)
            ctx.draw_segments(
                segments, ctx.margin, ctx.y, style.BODY_SIZE, ctx.regular, style.GRAY
            )
            ctx.y -= step
        else:
            _render_body_lines(ctx, lines)
        ctx.y -= ENTRY_GAP


def render_skills(
    ctx: RenderContext, document: ResumeDocument, force_new_page: bool = True
) -> None:
    groups = document.skills.groups()
    if not groups:
        return

    render_section_heading(ctx, "TECHNICAL SKILLS", force_new_page)
    size = style.BODY_SIZE
    step = _body_step(ctx)
    for title, items in groups:
        ctx.ensure_space(SKILL_GROUP_SPACE)
        ctx.draw_text(title, ctx.margin, ctx.y, size, ctx.bold, style.GRAY)
        ctx.y -= 14

        for i, line_items in enumerate(wrap_bullet_list(items, ctx.content_width, size, ctx.regular)):
            if i > 0:
                ctx.y -= step
                ctx.ensure_space(step)
            ctx.draw_segments(joined(line_items), ctx.margin, ctx.y, size, ctx.regular, style.GRAY)
        ctx.y -= ctx.line_height + 8


def render_languages(
    ctx: RenderContext, document: ResumeDocument, force_new_page: bool = False
) -> None:
    if not document.languages:
        return

    render_section_heading(ctx, "LANGUAGES", force_new_page)
    for entry in document.languages:
        ctx.ensure_space(LANGUAGE_STEP)
        parts = [entry.language] + ([entry.level] if entry.level else [])
        ctx.draw_segments(
            joined(parts), ctx.margin, ctx.y, style.BODY_SIZE, ctx.regular, style.GRAY
        )
        ctx.y -= LANGUAGE_STEP


def project_height(ctx: RenderContext, description_lines: int) -> float:
    """Estimated block height, capped so an oversized block starts on a fresh page once."""
    height = (
        PROJECT_TITLE_STEP
        + description_lines * ctx.line_height
        + PROJECT_META_STEP
        + PROJECT_GAP
    )
    return min(height, ctx.usable_height)


def project_links(project: Project) -> list[Link]:
    links = []
    if project.github_url:
        links.append(Link("GitHub", project.github_url))
    if project.demo_url:
        links.append(Link("Demo", project.demo_url))
    return links


def _continue_block(
    flow: ColumnFlow, placement: Placement, y: float, needed: float
) -> tuple[Placement, float]:
    """Move the rest of a block to the next free column once ``needed`` no longer fits."""
    if flow.context.fits(needed, y):
        return placement, y
    flow.commit(placement, y)
    placement = flow.place(needed)
    return placement, placement.y


def render_projects(
    ctx: RenderContext, document: ResumeDocument, force_new_page: bool = False
) -> None:
    projects = document.featured_projects
    if not projects:
        return

    render_section_heading(ctx, "FEATURED PROJECTS", force_new_page)
    flow = ColumnFlow(ctx)
    for project in projects:
        lines = wrap_text(project.summary, flow.column_width, style.BODY_SIZE, ctx.regular)
        placement = flow.place(project_height(ctx, len(lines)))
        y = placement.y

        ctx.draw_text(project.title, placement.x, y, style.BODY_SIZE, ctx.bold, style.ACCENT)
        y -= PROJECT_TITLE_STEP
        for line in lines:
            placement, y = _continue_block(flow, placement, y, ctx.line_height)
            ctx.draw_text(line, placement.x, y, style.BODY_SIZE, ctx.regular, style.GRAY)
            y -= ctx.line_height

        placement, y = _continue_block(flow, placement, y, PROJECT_META_STEP + PROJECT_GAP)
        meta = [part for part in (str(project.year), project.status_label) if part]
        ctx.draw_segments(
            joined(meta), placement.x, y, style.META_SIZE, ctx.regular, style.LIGHT_GRAY
        )
        y -= PROJECT_META_STEP

        links = project_links(project)
        if links:
            ctx.draw_segments(
                joined(links), placement.x, y, style.LINK_ROW_SIZE, ctx.regular, style.ACCENT
            )
        y -= PROJECT_GAP
        flow.commit(placement, y)

    ctx.y = flow.lowest_y
