"""Pydantic models for the resume document consumed by the PDF layout engine."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

HIGHLIGHT_MARKERS = ("•", "-")

STATUS_LABELS = {
    "completed": "Completed",
    "in-progress": "In Progress",
    "archived": "Archived",
}


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # The web API sends NULL columns as null; let field defaults apply.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class PersonalInfo(_Model):
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    github: str | None = Field(
        default=None, validation_alias=AliasChoices("github", "github_url", "githubUrl")
    )
    linkedin: str | None = Field(
        default=None,
        validation_alias=AliasChoices("linkedin", "linkedin_url", "linkedinUrl"),
    )

    @property
    def phone_is_link(self) -> bool:
        return bool(self.phone) and self.phone.startswith(("http://", "https://"))


class ExperienceEntry(_Model):
    title: str
    company: str = ""
    period: str = ""
    description: str = ""
    is_current: bool = Field(
        default=False,
        validation_alias=AliasChoices("isCurrent", "is_current", "current"),
    )

    @property
    def display_period(self) -> str:
        return f"{self.period} (Current)" if self.is_current else self.period


class EducationEntry(_Model):
    degree: str
    institution: str = ""
    period: str = ""
    description: str = ""


class Skills(_Model):
    frontend: list[str] = Field(default_factory=list)  # "Technologies"
    tools: list[str] = Field(default_factory=list)
    backend: list[str] = Field(default_factory=list)  # "Methodologies/Practices"

    def groups(self) -> list[tuple[str, list[str]]]:
        """Return the non-empty groups with their display titles, in print order."""
        named = [
            ("Technologies", self.frontend),
            ("Tools", self.tools),
            ("Methodologies/Practices", self.backend),
        ]
        return [(title, items) for title, items in named if items]


class LanguageEntry(_Model):
    language: str
    level: str = ""


class Project(_Model):
    title: str
    description: str = ""
    short_description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("short_description", "shortDescription"),
    )
    year: int | str = ""
    status: str = "completed"
    github_url: str | None = Field(
        default=None, validation_alias=AliasChoices("github_url", "githubUrl")
    )
    demo_url: str | None = Field(
        default=None, validation_alias=AliasChoices("demo_url", "demoUrl")
    )
    featured: bool = True

    @property
    def summary(self) -> str:
        return self.short_description or self.description

    @property
    def status_label(self) -> str:
        return STATUS_LABELS.get(self.status, self.status)


class ResumeDocument(_Model):
    personal_info: PersonalInfo = Field(
        default_factory=PersonalInfo,
        validation_alias=AliasChoices("personalInfo", "personal_info"),
    )
    about: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    languages: list[LanguageEntry] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)

    @property
    def highlights(self) -> list[str]:
        """Bulleted lines of ``about`` with the leading marker stripped."""
        items = []
        for line in self.about.splitlines():
            stripped = line.strip()
            if stripped.startswith(HIGHLIGHT_MARKERS):
                items.append(stripped[1:].lstrip())
        return items

    @property
    def featured_projects(self) -> list[Project]:
        return [p for p in self.projects if p.featured]
