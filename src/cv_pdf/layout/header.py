"""Name, title and contact block at the top of the first page."""

from __future__ import annotations

from dataclasses import dataclass

from cv_pdf.layout import style
from cv_pdf.layout.context import RenderContext
from cv_pdf.models.resume import PersonalInfo, ResumeDocument


@dataclass(frozen=True)
class ContactItem:
    text: str
    url: str | None = None


def contact_rows(info: PersonalInfo) -> list[list[ContactItem]]:
    """Group contact details into the three printed rows, dropping empty ones."""
    first: list[ContactItem] = []
    if info.email:
        first.append(ContactItem(info.email, f"mailto:{info.email}"))
    if info.phone:
        first.append(ContactItem(info.phone, info.phone if info.phone_is_link else None))
    if info.location:
        first.append(ContactItem(info.location))

    second = [ContactItem(url, url) for url in (info.website, info.github) if url]
    third = [ContactItem(info.linkedin, info.linkedin)] if info.linkedin else []
    return [row for row in (first, second, third) if row]


def render_header(ctx: RenderContext, document: ResumeDocument) -> None:
    info = document.personal_info
    ctx.draw_text(
        info.name or "Name", ctx.margin, ctx.y, style.NAME_SIZE, ctx.bold, style.ACCENT
    )
    ctx.y -= 25
    ctx.draw_text(
        info.title or "Title", ctx.margin, ctx.y, style.TITLE_SIZE, ctx.regular, style.GRAY
    )
    ctx.y -= 18


def render_contact_info(ctx: RenderContext, document: ResumeDocument) -> None:
    size = style.CONTACT_SIZE
    font = ctx.regular
    line_step = ctx.line_height
    gap, glyph = ctx.bullet_advance(size, font)

    for row in contact_rows(document.personal_info):
        x = ctx.margin
        for i, item in enumerate(row):
            width = font.width_of(item.text, size)
            if i > 0:
                if x + 2 * gap + glyph + width > ctx.right_edge:
                    ctx.y -= line_step
                    x = ctx.margin
                else:
                    x += gap
                    ctx.draw_bullet(x, ctx.y, size)
                    x += glyph + gap
            color = style.ACCENT if item.url else style.GRAY
            ctx.draw_text(item.text, x, ctx.y, size, font, color)
            if item.url:
                ctx.add_link(x, ctx.y, width, size, item.url)
            x += width
        ctx.y -= line_step
