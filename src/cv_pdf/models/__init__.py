"""Data models for the resume PDF exporter."""

from cv_pdf.models.resume import (
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    Project,
    ResumeDocument,
    Skills,
)

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "LanguageEntry",
    "PersonalInfo",
    "Project",
    "ResumeDocument",
    "Skills",
]
