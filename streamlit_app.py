"""Streamlit Web UI for cv-pdf.

One button: fetch the resume (or read an uploaded file), lay it out and offer
the PDF for download as ``{Name}_CV.pdf``.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from cv_pdf.clients.cv_client import CVClient
from cv_pdf.config import load_config
from cv_pdf.export.exporter import ResumeExporter
from cv_pdf.models.resume import ResumeDocument
from cv_pdf.parsers.document_loader import parse_document

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="CV PDF",
    page_icon=":page_facing_up:",
    layout="centered",
)

config = load_config()

if "is_generating" not in st.session_state:
    st.session_state.is_generating = False

# ---------------------------------------------------------------------------
# Sidebar: data source
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("CV PDF")
    st.caption("Resume export with clickable links")

    source_mode = st.radio("Resume data", ["Website API", "Upload file"], index=0)
    cv_data_url = config.source.cv_data_url
    uploaded = None
    if source_mode == "Website API":
        cv_data_url = st.text_input("Resume endpoint", value=config.source.cv_data_url)
    else:
        uploaded = st.file_uploader("Resume file", type=["json", "yaml", "yml"])


def _document_source():
    if uploaded is not None:
        raw = uploaded.getvalue()
        suffix = Path(uploaded.name).suffix

        async def from_upload() -> ResumeDocument:
            return parse_document(raw, suffix)

        return from_upload

    return CVClient.from_config(config.source, cv_data_url).fetch_document


def _on_notice(level: str, message: str) -> None:
    if level == "success":
        st.toast(message)
    else:
        st.error(message)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

st.header("Save as PDF")

if source_mode == "Upload file" and uploaded is None:
    st.info("Upload a JSON or YAML resume file in the sidebar.")

clicked = st.button(
    "Generating..." if st.session_state.is_generating else "Save as PDF",
    type="primary",
    disabled=st.session_state.is_generating
    or (source_mode == "Upload file" and uploaded is None),
)

if clicked:
    exporter = ResumeExporter(_document_source(), config, on_notice=_on_notice)
    st.session_state.is_generating = True
    try:
        with st.spinner("Generating..."):
            result = asyncio.run(exporter.export())
    finally:
        st.session_state.is_generating = exporter.is_generating

    if result.success:
        st.session_state["pdf_bytes"] = result.data
        st.session_state["pdf_filename"] = result.filename
    else:
        logger.warning("PDF export failed: %s", result.error_message)
        st.session_state.pop("pdf_bytes", None)

# Render results from session_state (survives rerun after download click)
if "pdf_bytes" in st.session_state:
    st.download_button(
        label=f"Download {st.session_state['pdf_filename']}",
        data=st.session_state["pdf_bytes"],
        file_name=st.session_state["pdf_filename"],
        mime="application/pdf",
    )
