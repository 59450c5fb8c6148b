"""Lay out a resume document and serialise it to PDF bytes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from cv_pdf.config import AppConfig
from cv_pdf.layout.context import RenderContext
from cv_pdf.layout.header import render_contact_info, render_header
from cv_pdf.layout.sections import (
    render_education,
    render_experience,
    render_highlights,
    render_languages,
    render_projects,
    render_skills,
)
from cv_pdf.models.resume import ResumeDocument

logger = logging.getLogger(__name__)

SectionRenderer = Callable[[RenderContext, ResumeDocument, bool], None]


@dataclass(frozen=True)
class SectionSpec:
    name: str
    title: str
    render: SectionRenderer


SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec("highlights", "Highlights", render_highlights),
    SectionSpec("experience", "Work Experience", render_experience),
    SectionSpec("skills", "Technical Skills", render_skills),
    SectionSpec("education", "Education", render_education),
    SectionSpec("languages", "Languages", render_languages),
    SectionSpec("projects", "Featured Projects", render_projects),
)


def build_filename(name: str | None) -> str:
    """``"Jane Doe"`` -> ``"Jane_Doe_CV.pdf"``."""
    stem = re.sub(r"\s+", "_", (name or "").strip()) or "My"
    return f"{stem}_CV.pdf"


def render_document(document: ResumeDocument, config: AppConfig | None = None) -> RenderContext:
    """Run the full layout pass and return the context with every page flushed."""
    config = config or AppConfig()
    ctx = RenderContext(config)
    info = document.personal_info
    ctx.pdf.set_title(f"{info.name} CV".strip())
    if info.name:
        ctx.pdf.set_author(info.name)
    ctx.pdf.set_creator("cv-pdf")

    render_header(ctx, document)
    render_contact_info(ctx, document)
    for section in SECTIONS:
        forced = config.sections.forces_new_page(section.name)
        logger.debug("Rendering %s (force_new_page=%s)", section.name, forced)
        section.render(ctx, document, forced)

    ctx.flush_annotations()
    return ctx


def generate_pdf(document: ResumeDocument, config: AppConfig | None = None) -> bytes:
    """Convert a resume document to PDF bytes."""
    ctx = render_document(document, config)
    data = ctx.finish()
    logger.info(
        "Generated %d page(s), %d link(s), %d bytes",
        ctx.page_number,
        len(ctx.attached_links),
        len(data),
    )
    return data
