"""Tests for loading resume documents from files."""

import json

import pytest

from cv_pdf.parsers.document_loader import DocumentLoadError, load_document, parse_document


class TestLoadDocument:
    def test_json_file(self, jane_doe_path):
        document = load_document(jane_doe_path)
        assert document.personal_info.name == "Jane Doe"
        assert len(document.projects) == 2

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "resume.yaml"
        path.write_text(
            "personalInfo:\n"
            "  name: Max Mustermann\n"
            "  title: Backend Engineer\n"
            "languages:\n"
            "  - language: German\n"
            "    level: Native\n",
            encoding="utf-8",
        )
        document = load_document(path)
        assert document.personal_info.name == "Max Mustermann"
        assert document.languages[0].level == "Native"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Resume file not found"):
            load_document(tmp_path / "nope.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("name: x")
        with pytest.raises(DocumentLoadError, match="Unsupported file format"):
            load_document(path)


class TestParseDocument:
    def test_bytes_input(self, jane_doe_data):
        raw = json.dumps(jane_doe_data).encode("utf-8")
        assert parse_document(raw, ".json").personal_info.email == "jane@example.com"

    def test_suffix_case_insensitive(self):
        assert parse_document("about: hi", ".YML").about == "hi"

    def test_malformed_json(self):
        with pytest.raises(DocumentLoadError, match="Could not parse"):
            parse_document("{not json", ".json")

    def test_top_level_list(self):
        with pytest.raises(DocumentLoadError, match="mapping at the top level"):
            parse_document("- a\n- b\n", ".yaml")

    def test_invalid_fields(self):
        with pytest.raises(DocumentLoadError, match="Invalid resume data"):
            parse_document('{"skills": {"frontend": 5}}', ".json")

    def test_undecodable_bytes(self):
        with pytest.raises(DocumentLoadError, match="Could not parse"):
            parse_document(b'{"about": "\xff\xfe"}', ".json")

    def test_load_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_document("[]", ".json")
