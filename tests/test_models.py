"""Tests for the resume document models."""

from cv_pdf.models.resume import (
    ExperienceEntry,
    PersonalInfo,
    Project,
    ResumeDocument,
    Skills,
)


class TestResumeDocument:
    def test_parses_api_payload(self, jane_doe):
        assert jane_doe.personal_info.name == "Jane Doe"
        assert jane_doe.experience[0].is_current is True
        assert jane_doe.projects[0].summary.startswith("Personal site")
        assert jane_doe.projects[1].demo_url == "https://budget.janedoe.dev"

    def test_highlights_only_bulleted_lines(self, jane_doe):
        assert jane_doe.highlights == [
            "Built a PDF export used by thousands of visitors",
            "Maintains two open-source libraries",
        ]

    def test_snake_case_accepted(self):
        doc = ResumeDocument.model_validate(
            {"personal_info": {"name": "A", "title": "B", "email": "a@b.c"}}
        )
        assert doc.personal_info.name == "A"

    def test_nulls_fall_back_to_defaults(self):
        doc = ResumeDocument.model_validate(
            {
                "personalInfo": {"name": "A", "phone": None},
                "about": None,
                "experience": [{"title": "Dev", "company": None, "description": None}],
            }
        )
        assert doc.about == ""
        assert doc.experience[0].company == ""
        assert doc.experience[0].description == ""
        assert doc.personal_info.phone is None

    def test_featured_projects(self):
        doc = ResumeDocument(
            projects=[
                Project(title="A", featured=True),
                Project(title="B", featured=False),
                Project(title="C"),
            ]
        )
        assert [p.title for p in doc.featured_projects] == ["A", "C"]


def test_status_labels():
    assert Project(title="x", status="completed").status_label == "Completed"
    assert Project(title="x", status="in-progress").status_label == "In Progress"
    assert Project(title="x", status="archived").status_label == "Archived"
    assert Project(title="x", status="paused").status_label == "paused"


def test_current_period_suffix():
    entry = ExperienceEntry(title="Dev", period="2020 - 2024", isCurrent=True)
    assert entry.display_period == "2020 - 2024 (Current)"
    assert ExperienceEntry(title="Dev", period="2019").display_period == "2019"


def test_phone_link_detection():
    assert PersonalInfo(phone="https://wa.me/123").phone_is_link
    assert not PersonalInfo(phone="+1 555 0100").phone_is_link
    assert not PersonalInfo().phone_is_link


def test_skill_groups_skip_empty():
    skills = Skills(frontend=["React"], backend=["TDD"])
    assert skills.groups() == [
        ("Technologies", ["React"]),
        ("Methodologies/Practices", ["TDD"]),
    ]
