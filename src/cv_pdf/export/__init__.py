"""PDF export module for cv-pdf."""
from cv_pdf.export.exporter import ExportResult, ResumeExporter, save_pdf
from cv_pdf.export.pdf_renderer import (
    SECTIONS,
    build_filename,
    generate_pdf,
    render_document,
)

__all__ = [
    "ExportResult",
    "ResumeExporter",
    "SECTIONS",
    "build_filename",
    "generate_pdf",
    "render_document",
    "save_pdf",
]
