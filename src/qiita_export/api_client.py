"""Qiita API v2 client wrapper."""

import logging
import re
from typing import Any

import httpx
from pydantic import ValidationError

from .config import PAGE, PER_PAGE, settings
from .models import ArticleSummary

logger = logging.getLogger(__name__)

# Qiita user names: letters, digits, underscore and hyphen
USER_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class QiitaClient:
    """Lists one author's articles from the Qiita items API."""

    def __init__(
        self,
        user_id: str | None = None,
        api_key: str | None = None,
        api_base: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.user_id = user_id if user_id is not None else settings.qiita_user_id
        if not self.user_id or not USER_ID_PATTERN.match(self.user_id):
            raise ValueError(f"Invalid Qiita user id: {self.user_id!r}")
        self.api_key = api_key if api_key is not None else settings.qiita_api_key
        self.api_base = (api_base or settings.qiita_api_base).rstrip("/")
        self.client = http_client or httpx.Client(
            timeout=timeout or settings.request_timeout_seconds
        )
        self.api_calls_made = 0

    def __enter__(self) -> "QiitaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    @property
    def items_url(self) -> str:
        return f"{self.api_base}/users/{self.user_id}/items"

    def _get_headers(self) -> dict[str, str]:
        """Bearer auth header when an API key is configured."""
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    def _parse_items(self, payload: Any) -> list[ArticleSummary]:
        """Validate raw items, skipping any that don't parse."""
        if not isinstance(payload, list):
            logger.warning(
                f"Qiita listing for {self.user_id}: expected a list, got {type(payload).__name__}"
            )
            return []

        articles = []
        for raw_item in payload:
            try:
                articles.append(ArticleSummary.model_validate(raw_item))
            except ValidationError as e:
                item_id = raw_item.get("id") if isinstance(raw_item, dict) else None
                logger.warning(f"Failed to parse Qiita item {item_id}: {e}")
        return articles

    def list_user_items(self) -> list[ArticleSummary]:
        """
        Fetch the first page of the author's articles.

        Returns:
            List of article summaries, newest first. Empty on any request failure.
        """
        params = {"per_page": PER_PAGE, "page": PAGE}
        try:
            response = self.client.get(
                self.items_url, params=params, headers=self._get_headers()
            )
            self.api_calls_made += 1

            if response.status_code != 200:
                logger.warning(
                    f"Qiita listing for {self.user_id} failed: HTTP {response.status_code}"
                )
                return []

            payload = response.json()
        except httpx.HTTPError as e:
            self.api_calls_made += 1
            logger.warning(f"Qiita listing for {self.user_id} failed: {e}")
            return []
        except ValueError as e:
            logger.warning(f"Qiita listing for {self.user_id} returned invalid JSON: {e}")
            return []

        articles = self._parse_items(payload)
        logger.info(f"Qiita returned {len(articles)} articles for {self.user_id}")
        return articles
