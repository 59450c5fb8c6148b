"""Async HTTP client for the portfolio site's resume endpoints."""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import ValidationError

from cv_pdf.config import SourceConfig
from cv_pdf.models.resume import Project, ResumeDocument

logger = logging.getLogger(__name__)


class DataFetchError(RuntimeError):
    """Raised when the resume document cannot be fetched or parsed."""


class CVClient:
    """Fetches the resume document and, optionally, the full projects list."""

    def __init__(
        self,
        cv_data_url: str,
        projects_url: str | None = None,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.cv_data_url = cv_data_url
        self.projects_url = projects_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, source: SourceConfig, cv_data_url: str | None = None) -> CVClient:
        """Client for ``cv_data_url`` or the configured endpoint.

        The configured projects endpoint belongs to the configured site, so it
        is only merged in when the resume comes from the configured URL.
        """
        url = cv_data_url or source.cv_data_url
        projects_url = source.projects_url if url == source.cv_data_url else None
        return cls(cv_data_url=url, projects_url=projects_url, timeout=source.timeout)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def fetch_document(self) -> ResumeDocument:
        """Fetch the resume, merging in projects when that endpoint answers."""
        logger.info("Fetching resume data from %s", self.cv_data_url)
        async with self._client() as client:
            if self.projects_url:
                # Both requests finish before the client closes, even when one fails.
                cv_payload, projects = await asyncio.gather(
                    self._get_cv_payload(client),
                    self._get_projects(client),
                    return_exceptions=True,
                )
                for outcome in (cv_payload, projects):
                    if isinstance(outcome, BaseException):
                        raise outcome
            else:
                cv_payload = await self._get_cv_payload(client)
                projects = None

        try:
            document = ResumeDocument.model_validate(cv_payload)
        except ValidationError as exc:
            raise DataFetchError(f"Invalid resume data: {exc}") from exc

        if projects is not None:
            document = document.model_copy(update={"projects": projects})
        return document

    async def _get_cv_payload(self, client: httpx.AsyncClient) -> dict:
        try:
            response = await client.get(self.cv_data_url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Resume data fetch failed", exc_info=True)
            raise DataFetchError(f"Failed to fetch CV data: {exc}") from exc
        if not isinstance(payload, dict):
            raise DataFetchError("Failed to fetch CV data: expected a JSON object")
        return payload

    async def _get_projects(self, client: httpx.AsyncClient) -> list[Project] | None:
        """Projects are optional; any failure leaves the document's own list in place."""
        try:
            response = await client.get(self.projects_url)
            response.raise_for_status()
            payload = response.json()
            return [Project.model_validate(item) for item in payload]
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            logger.warning("Projects fetch failed, using embedded projects: %s", exc)
            return None
