"""Tests for ResumeExporter."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from cv_pdf.clients.cv_client import DataFetchError
from cv_pdf.export.exporter import (
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    ResumeExporter,
    save_pdf,
)


class TestResumeExporter:
    async def test_export_returns_pdf_and_filename(self, jane_doe):
        notices = MagicMock()
        exporter = ResumeExporter(AsyncMock(return_value=jane_doe), on_notice=notices)

        result = await exporter.export()

        assert result.success is True
        assert result.filename == "Jane_Doe_CV.pdf"
        assert result.data[:4] == b"%PDF"
        assert result.path is None
        assert exporter.is_generating is False
        notices.assert_called_once_with("success", SUCCESS_MESSAGE)

    async def test_export_writes_file(self, jane_doe, tmp_path):
        exporter = ResumeExporter(AsyncMock(return_value=jane_doe))

        result = await exporter.export(tmp_path / "out")

        assert result.path == tmp_path / "out" / "Jane_Doe_CV.pdf"
        assert result.path.read_bytes() == result.data

    async def test_fetch_failure_reports_and_resets(self):
        notices = MagicMock()
        source = AsyncMock(side_effect=DataFetchError("Failed to fetch CV data: 500"))
        exporter = ResumeExporter(source, on_notice=notices)

        result = await exporter.export()

        assert result.success is False
        assert result.data is None
        assert "500" in result.error_message
        assert exporter.is_generating is False
        notices.assert_called_once_with("error", FAILURE_MESSAGE)

    async def test_no_file_written_on_failure(self, tmp_path):
        exporter = ResumeExporter(AsyncMock(side_effect=RuntimeError("boom")))

        result = await exporter.export(tmp_path)

        assert result.success is False
        assert list(tmp_path.iterdir()) == []

    async def test_is_generating_while_running(self, jane_doe):
        seen = []

        async def source():
            seen.append(exporter.is_generating)
            return jane_doe

        exporter = ResumeExporter(source)
        await exporter.export()
        assert seen == [True]
        assert exporter.is_generating is False

    async def test_exporter_can_run_again_after_failure(self, jane_doe):
        source = AsyncMock(side_effect=[RuntimeError("down"), jane_doe])
        exporter = ResumeExporter(source)

        assert (await exporter.export()).success is False
        assert (await exporter.export()).success is True


def test_save_pdf_creates_parent_dirs(tmp_path):
    path = save_pdf(b"%PDF-1.4", tmp_path / "a" / "b" / "cv.pdf")
    assert path.read_bytes() == b"%PDF-1.4"
