"""Social preview image lookup for article pages."""

import logging
import time
from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup

from .config import PREVIEW_META_TAGS, settings

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def _is_absolute_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def extract_preview_image(html: str, base_url: str | None = None) -> str | None:
    """
    Find the preview image advertised in a page's meta tags.

    Tags are checked in PREVIEW_META_TAGS order (og:image, then twitter:image)
    and the first one with non-blank content wins. Relative URLs are resolved
    against ``base_url``.

    Returns:
        Absolute http(s) image URL, or None if the page advertises none
    """
    if not html:
        return None

    soup = BeautifulSoup(html, "html.parser")
    for attr, value in PREVIEW_META_TAGS:
        for tag in soup.find_all("meta", attrs={attr: value}):
            content = (tag.get("content") or "").strip()
            if not content:
                continue
            if base_url:
                content = urljoin(base_url, content)
            if _is_absolute_http_url(content):
                return content
            logger.debug(f"Ignoring non-URL {value} content: {content!r}")
    return None


class PreviewResolver:
    """Fetches article pages one at a time and extracts their preview image."""

    def __init__(
        self,
        delay_seconds: float | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.delay_seconds = (
            delay_seconds if delay_seconds is not None else settings.preview_delay_seconds
        )
        self.client = http_client or httpx.Client(
            timeout=timeout or settings.request_timeout_seconds,
            follow_redirects=True,
        )
        self.previews_resolved = 0
        self.previews_missing = 0

    def __enter__(self) -> "PreviewResolver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def _is_html(self, response: httpx.Response) -> bool:
        content_type = response.headers.get("content-type", "")
        # No header at all: give the parser a chance
        if not content_type:
            return True
        return any(kind in content_type.lower() for kind in HTML_CONTENT_TYPES)

    def _missing(self, url: str, reason: str) -> None:
        self.previews_missing += 1
        logger.warning(f"No preview image for {url}: {reason}")
        return None

    def resolve(self, url: str) -> str | None:
        """
        Fetch an article page and return its preview image URL.

        Returns:
            Image URL, or None when the page can't be fetched or has no preview tag
        """
        try:
            response = self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._missing(url, f"request failed: {e}")

        if response.status_code != 200:
            return self._missing(url, f"HTTP {response.status_code}")

        if not self._is_html(response):
            return self._missing(
                url, f"not an HTML page ({response.headers.get('content-type')})"
            )

        image_url = extract_preview_image(response.text, base_url=str(response.url))
        if image_url is None:
            return self._missing(url, "no og:image or twitter:image meta tag")

        self.previews_resolved += 1
        return image_url

    def resolve_with_delay(self, url: str) -> str | None:
        """Resolve with a polite pause before the next page request."""
        image_url = self.resolve(url)
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
        return image_url

    def get_stats(self) -> dict[str, int]:
        """Get resolution statistics."""
        return {
            "resolved": self.previews_resolved,
            "missing": self.previews_missing,
        }
