"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cv_pdf.config import AppConfig
from cv_pdf.layout.context import RenderContext
from cv_pdf.models.resume import ResumeDocument

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FixedWidthFont:
    """Monospace stand-in: every character is half the font size wide."""

    def width_of(self, text: str, size: float) -> float:
        return len(text) * size * 0.5


@pytest.fixture
def fixed_font() -> FixedWidthFont:
    return FixedWidthFont()


@pytest.fixture
def jane_doe_path() -> Path:
    return FIXTURES_DIR / "jane_doe.json"


@pytest.fixture
def jane_doe_data(jane_doe_path) -> dict:
    return json.loads(jane_doe_path.read_text(encoding="utf-8"))


@pytest.fixture
def jane_doe(jane_doe_data) -> ResumeDocument:
    return ResumeDocument.model_validate(jane_doe_data)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def ctx(config) -> RenderContext:
    return RenderContext(config)
