"""Export orchestrator: list articles, resolve previews, write the data file."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .api_client import QiitaClient
from .config import settings
from .exporter import build_collection, write_json
from .preview import PreviewResolver

logger = logging.getLogger(__name__)


@dataclass
class ExportStats:
    """Statistics from an export run."""

    articles_fetched: int = 0
    previews_resolved: int = 0
    previews_missing: int = 0
    articles_exported: int = 0
    output_path: Path | None = None


class QiitaExportPipeline:
    """Runs the export as one sequential pass, one HTTP request at a time."""

    def __init__(
        self,
        api_client: QiitaClient,
        resolver: PreviewResolver,
        output_path: Path | None = None,
    ):
        self.api_client = api_client
        self.resolver = resolver
        self.output_path = Path(output_path or settings.output_path)

    def run(self) -> ExportStats:
        """
        Fetch, enrich and export the author's articles.

        Listing and preview failures are logged and degrade to empty results.
        Filesystem errors while writing propagate.

        Returns:
            ExportStats with results
        """
        stats = ExportStats(output_path=self.output_path)

        summaries = self.api_client.list_user_items()
        stats.articles_fetched = len(summaries)
        logger.info(f"Resolving preview images for {len(summaries)} articles")

        before = self.resolver.get_stats()
        og_images = []
        for summary in summaries:
            logger.debug(f"Resolving preview image: {summary.url}")
            og_images.append(self.resolver.resolve_with_delay(summary.url))
        after = self.resolver.get_stats()
        stats.previews_resolved = after["resolved"] - before["resolved"]
        stats.previews_missing = after["missing"] - before["missing"]

        articles = build_collection(summaries, og_images)
        write_json(articles, self.output_path)
        stats.articles_exported = len(articles)

        logger.info(
            f"Fetched and saved {stats.articles_exported} Qiita articles to {self.output_path}"
        )
        return stats


def run_export() -> ExportStats:
    """Run the export with clients built from settings."""
    api_client = QiitaClient(
        user_id=settings.qiita_user_id,
        api_key=settings.qiita_api_key,
        api_base=settings.qiita_api_base,
        timeout=settings.request_timeout_seconds,
    )
    resolver = PreviewResolver(
        delay_seconds=settings.preview_delay_seconds,
        timeout=settings.request_timeout_seconds,
    )
    with api_client, resolver:
        pipeline = QiitaExportPipeline(api_client, resolver, settings.output_path)
        return pipeline.run()
