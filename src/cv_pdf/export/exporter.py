"""One-click export: fetch the resume, lay it out and hand over the file."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable

from cv_pdf.config import AppConfig
from cv_pdf.export.pdf_renderer import build_filename, generate_pdf
from cv_pdf.models.resume import ResumeDocument

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "PDF generated successfully!"
FAILURE_MESSAGE = "Failed to generate PDF"

DocumentSource = Callable[[], Awaitable[ResumeDocument]]
NoticeCallback = Callable[[str, str], None]  # (level, message)


@dataclass
class ExportResult:
    success: bool
    filename: str | None = None
    data: bytes | None = None
    path: Path | None = None
    elapsed_seconds: float = 0.0
    error_message: str | None = None


class ResumeExporter:
    """Runs a whole generation per call; either a complete file or nothing.

    ``is_generating`` is true only while :meth:`export` is running, including
    when it fails.
    """

    def __init__(
        self,
        source: DocumentSource,
        config: AppConfig | None = None,
        on_notice: NoticeCallback | None = None,
    ):
        self.source = source
        self.config = config or AppConfig()
        self.on_notice = on_notice
        self.is_generating = False

    def _notify(self, level: str, message: str) -> None:
        if self.on_notice is not None:
            self.on_notice(level, message)

    async def export(self, output_dir: str | Path | None = None) -> ExportResult:
        """Generate the PDF; write it into ``output_dir`` when one is given."""
        self.is_generating = True
        start = time.monotonic()
        try:
            document = await self.source()
            data = generate_pdf(document, self.config)
            filename = build_filename(document.personal_info.name)
            path = None
            if output_dir is not None:
                path = save_pdf(data, Path(output_dir) / filename)
            result = ExportResult(
                success=True,
                filename=filename,
                data=data,
                path=path,
                elapsed_seconds=time.monotonic() - start,
            )
        except Exception as exc:
            logger.error("Error generating PDF", exc_info=True)
            self._notify("error", FAILURE_MESSAGE)
            return ExportResult(
                success=False,
                elapsed_seconds=time.monotonic() - start,
                error_message=str(exc),
            )
        finally:
            self.is_generating = False

        logger.info("Exported %s in %.1fs", result.filename, result.elapsed_seconds)
        self._notify("success", SUCCESS_MESSAGE)
        return result


def save_pdf(data: bytes, output_path: str | Path) -> Path:
    """Save PDF bytes to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
