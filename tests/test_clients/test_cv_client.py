"""Tests for CVClient (resume and projects endpoints)."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from cv_pdf.clients.cv_client import CVClient, DataFetchError
from cv_pdf.config import SourceConfig

CV_URL = "http://portfolio.test/api/cv-data"
PROJECTS_URL = "http://portfolio.test/api/admin/projects"


def _client(handler, projects_url: str | None = PROJECTS_URL) -> CVClient:
    return CVClient(
        cv_data_url=CV_URL,
        projects_url=projects_url,
        transport=httpx.MockTransport(handler),
    )


class TestFetchDocument:
    async def test_merges_projects_endpoint(self, jane_doe_data):
        projects = [
            {"title": "Live Project", "description": "From the admin API", "year": 2025, "featured": True},
            {"title": "Hidden", "featured": False},
        ]

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/projects"):
                return httpx.Response(200, json=projects)
            return httpx.Response(200, json=jane_doe_data)

        document = await _client(handler).fetch_document()

        assert document.personal_info.name == "Jane Doe"
        assert [p.title for p in document.projects] == ["Live Project", "Hidden"]
        assert [p.title for p in document.featured_projects] == ["Live Project"]

    async def test_projects_failure_keeps_embedded_projects(self, jane_doe_data):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/projects"):
                return httpx.Response(503)
            return httpx.Response(200, json=jane_doe_data)

        document = await _client(handler).fetch_document()
        assert [p.title for p in document.projects] == ["Portfolio", "Budget App"]

    async def test_without_projects_url_makes_one_request(self, jane_doe_data):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json=jane_doe_data)

        await _client(handler, projects_url=None).fetch_document()
        assert seen == ["/api/cv-data"]

    async def test_http_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="Internal Server Error")

        with pytest.raises(DataFetchError, match="Failed to fetch CV data"):
            await _client(handler, projects_url=None).fetch_document()

    async def test_invalid_json_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>not json</html>")

        with pytest.raises(DataFetchError, match="Failed to fetch CV data"):
            await _client(handler, projects_url=None).fetch_document()

    async def test_non_object_payload_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["not", "a", "document"])

        with pytest.raises(DataFetchError, match="expected a JSON object"):
            await _client(handler, projects_url=None).fetch_document()

    async def test_connection_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DataFetchError):
            await _client(handler, projects_url=None).fetch_document()

    async def test_invalid_document_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"experience": "not a list"})

        with pytest.raises(DataFetchError, match="Invalid resume data"):
            await _client(handler, projects_url=None).fetch_document()

    async def test_resume_failure_waits_for_projects_request(self):
        finished = []

        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/projects"):
                await asyncio.sleep(0.01)
                finished.append("projects")
                return httpx.Response(200, json=[])
            return httpx.Response(500)

        with pytest.raises(DataFetchError, match="Failed to fetch CV data"):
            await _client(handler).fetch_document()
        assert finished == ["projects"]


class TestFromConfig:
    def test_configured_url_merges_projects(self):
        source = SourceConfig(cv_data_url=CV_URL, projects_url=PROJECTS_URL, timeout=5)
        client = CVClient.from_config(source)
        assert client.cv_data_url == CV_URL
        assert client.projects_url == PROJECTS_URL
        assert client.timeout == 5

    def test_same_url_passed_explicitly_keeps_projects(self):
        source = SourceConfig(cv_data_url=CV_URL, projects_url=PROJECTS_URL)
        assert CVClient.from_config(source, CV_URL).projects_url == PROJECTS_URL

    def test_other_url_skips_projects(self):
        source = SourceConfig(cv_data_url=CV_URL, projects_url=PROJECTS_URL)
        client = CVClient.from_config(source, "https://elsewhere.test/api/cv-data")
        assert client.cv_data_url == "https://elsewhere.test/api/cv-data"
        assert client.projects_url is None
