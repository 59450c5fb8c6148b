"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_FORCED_SECTIONS = {"skills": True}


@dataclass(frozen=True)
class PageConfig:
    width: float = 595
    height: float = 842
    margin: float = 60
    line_height: float = 12

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("page width and height must be positive")
        if not 0 < self.margin < min(self.width, self.height) / 2:
            raise ValueError(f"page margin out of range: {self.margin}")
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        return self.height - self.margin


@dataclass(frozen=True)
class FontConfig:
    family: str = "Helvetica"
    regular_path: str | None = None
    bold_path: str | None = None

    def __post_init__(self) -> None:
        if bool(self.regular_path) != bool(self.bold_path):
            raise ValueError("fonts regular_path and bold_path must be set together")


@dataclass(frozen=True)
class BulletConfig:
    # Tuned by eye for Helvetica; re-check when switching font families.
    baseline_offset_ratio: float = 0.3
    x_offset_ratio: float = 0.15
    radius: float = 2.0
    small_radius: float = 1.5

    def __post_init__(self) -> None:
        if self.radius <= 0 or self.small_radius <= 0:
            raise ValueError("bullet radius must be positive")
        if not 0 <= self.baseline_offset_ratio <= 1:
            raise ValueError(
                f"baseline_offset_ratio must be within [0, 1]: {self.baseline_offset_ratio}"
            )


@dataclass(frozen=True)
class SectionsConfig:
    force_new_page: dict[str, bool] = field(
        default_factory=lambda: dict(DEFAULT_FORCED_SECTIONS)
    )

    def forces_new_page(self, section: str) -> bool:
        return self.force_new_page.get(section, False)


@dataclass(frozen=True)
class SourceConfig:
    cv_data_url: str = "http://localhost:3000/api/cv-data"
    projects_url: str | None = "http://localhost:3000/api/admin/projects"
    timeout: float = 10

    def __post_init__(self) -> None:
        if self.timeout < 1:
            raise ValueError(f"source timeout must be >= 1: {self.timeout}")


@dataclass(frozen=True)
class OutputConfig:
    directory: str = "./output"

    @property
    def resolved_directory(self) -> Path:
        return Path(self.directory).expanduser()


@dataclass(frozen=True)
class AppConfig:
    page: PageConfig = field(default_factory=PageConfig)
    fonts: FontConfig = field(default_factory=FontConfig)
    bullets: BulletConfig = field(default_factory=BulletConfig)
    sections: SectionsConfig = field(default_factory=SectionsConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _sections_from_raw(raw: dict) -> SectionsConfig:
    flags = dict(DEFAULT_FORCED_SECTIONS)
    for name, value in (raw or {}).items():
        if isinstance(value, dict):
            value = value.get("force_new_page", False)
        flags[name] = bool(value)
    return SectionsConfig(force_new_page=flags)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        page=PageConfig(**raw.get("page", {})),
        fonts=FontConfig(**raw.get("fonts", {})),
        bullets=BulletConfig(**raw.get("bullets", {})),
        sections=_sections_from_raw(raw.get("sections", {})),
        source=SourceConfig(**raw.get("source", {})),
        output=OutputConfig(**raw.get("output", {})),
    )
