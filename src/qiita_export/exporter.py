"""Reshape Qiita articles and write them to the site's data file."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from .models import ArticleSummary, EnrichedArticle

logger = logging.getLogger(__name__)


def to_enriched_article(summary: ArticleSummary, og_image: str | None) -> EnrichedArticle:
    """Flatten an article summary into the exported record."""
    return EnrichedArticle(
        id=summary.id,
        title=summary.title,
        url=summary.url,
        created_at=summary.created_at,
        updated_at=summary.updated_at,
        user_id=summary.user.id,
        user_icon=summary.user.profile_image_url,
        tags=summary.tag_names,
        likes_count=summary.likes_count,
        og_image=og_image,
        body=summary.body,
    )


def build_collection(
    summaries: Sequence[ArticleSummary],
    og_images: Sequence[str | None],
) -> list[EnrichedArticle]:
    """
    Pair each summary with its preview image, keeping listing order.

    Args:
        summaries: Articles in the order the API listed them
        og_images: One resolved image (or None) per summary, same order

    Returns:
        Enriched articles with duplicate ids removed (first one kept)
    """
    if len(summaries) != len(og_images):
        raise ValueError(
            f"Got {len(og_images)} preview results for {len(summaries)} articles"
        )

    seen_ids: set[str] = set()
    articles = []
    for summary, og_image in zip(summaries, og_images):
        if summary.id in seen_ids:
            logger.warning(f"Skipping duplicate Qiita article {summary.id}")
            continue
        seen_ids.add(summary.id)
        articles.append(to_enriched_article(summary, og_image))
    return articles


def render_json(articles: Sequence[EnrichedArticle]) -> str:
    """Serialize articles as a JSON array with two-space indentation."""
    records = [article.to_record() for article in articles]
    return json.dumps(records, indent=2, ensure_ascii=False)


def write_json(articles: Sequence[EnrichedArticle], filepath: Path) -> Path:
    """Write articles to filepath, replacing any previous export."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(render_json(articles))
    return filepath
