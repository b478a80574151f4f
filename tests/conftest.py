"""Pytest fixtures for Qiita export tests."""

from collections.abc import Callable

import httpx
import pytest

from src.qiita_export.models import ArticleSummary


def make_raw_item(item_id: str, tags: list[str] | None = None, **overrides) -> dict:
    """Build a raw item as returned by the Qiita items API."""
    raw = {
        "id": item_id,
        "title": f"Article {item_id}",
        "url": f"https://qiita.com/tasukuwatanabe/items/{item_id}",
        "created_at": "2024-12-14T10:00:00+09:00",
        "updated_at": "2024-12-15T08:30:00+09:00",
        "user": {
            "id": "tasukuwatanabe",
            "profile_image_url": "https://example.com/avatar.png",
            "name": "Tasuku Watanabe",
        },
        "tags": [{"name": name, "versions": []} for name in (tags or ["python"])],
        "likes_count": 3,
        "body": "# Heading\n\nBody text",
        "private": False,
    }
    raw.update(overrides)
    return raw


def html_page(meta: str = "") -> str:
    """Minimal article page with the given meta tags in the head."""
    return f"<html><head><title>Article</title>{meta}</head><body><p>Hi</p></body></html>"


@pytest.fixture
def raw_items() -> list[dict]:
    """Two raw API items, newest first."""
    return [
        make_raw_item("aaa111", tags=["go", "rust"]),
        make_raw_item("bbb222", tags=["python"]),
    ]


@pytest.fixture
def sample_summary() -> ArticleSummary:
    """A single validated article summary."""
    return ArticleSummary.model_validate(make_raw_item("abc123", tags=["go", "rust"]))


@pytest.fixture
def mock_http():
    """Factory for an httpx.Client that answers requests with a handler."""
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def make_item() -> Callable[..., dict]:
    """Factory for raw API items."""
    return make_raw_item


@pytest.fixture
def make_page() -> Callable[[str], str]:
    """Factory for article HTML pages."""
    return html_page
