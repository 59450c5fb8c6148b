import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from cv_pdf.models.resume import ResumeDocument


class DocumentLoadError(ValueError):
    """Raised when a resume file cannot be read as a resume document."""


def load_document(file_path: str | Path) -> ResumeDocument:
    """Load a resume document from a JSON or YAML file."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")
    return parse_document(path.read_text(encoding="utf-8"), path.suffix)


def parse_document(raw: str | bytes, suffix: str = ".json") -> ResumeDocument:
    """Parse resume text in the format named by ``suffix``."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentLoadError(f"Could not parse resume file: {exc}") from exc
    suffix = suffix.lower()
    try:
        if suffix == ".json":
            data = json.loads(raw)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(raw)
        else:
            raise DocumentLoadError(f"Unsupported file format: {suffix}")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentLoadError(f"Could not parse resume file: {exc}") from exc

    if not isinstance(data, dict):
        raise DocumentLoadError("Resume file must contain a mapping at the top level")
    try:
        return ResumeDocument.model_validate(data)
    except ValidationError as exc:
        raise DocumentLoadError(f"Invalid resume data: {exc}") from exc
