"""Lightweight HTTP client for fetching word-search templates."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests

from ..core.exceptions import TemplateError
from .templates import PuzzleTemplate
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class TemplateAPIError(RuntimeError):
    """Raised when the template endpoint fails or answers with garbage."""


class TemplateClient:
    """Minimal read-only client around a template REST endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        url_env: str = "WORDSEARCH_TEMPLATE_URL",
        token_env: str = "WORDSEARCH_TEMPLATE_TOKEN",
        timeout_seconds: float = 10.0,
    ) -> None:
        self.base_url = (base_url or os.environ.get(url_env) or "").rstrip("/")
        self.url_env = url_env
        self.timeout_seconds = timeout_seconds
        self._token = os.environ.get(token_env)
        if not self.base_url:
            raise RuntimeError(
                f"Missing template endpoint; pass base_url or set {self.url_env}"
            )

    def fetch(self, template_id: str) -> PuzzleTemplate:
        """Download template ``template_id`` and parse it."""
        url = f"{self.base_url}/templates/{template_id}"
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout_seconds)
            response.raise_for_status()
            data: Any = response.json()
        except requests.RequestException as exc:
            raise TemplateAPIError(f"Template request failed: {exc}") from exc
        except ValueError as exc:
            raise TemplateAPIError(f"Template response is not JSON: {exc}") from exc

        try:
            template = PuzzleTemplate.from_document(data)
        except TemplateError as exc:
            LOGGER.warning("Template %s is not a word search: %s", template_id, exc)
            raise
        LOGGER.info("Fetched template %s (%s words)", template_id, len(template.words))
        return template
