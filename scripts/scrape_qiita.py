#!/usr/bin/env python3
"""Scrape Qiita articles into the site's build data.

Fetches the configured author's articles from the Qiita API, looks up each
article's social preview image, and writes src/data/qiita-articles.json.

Usage:
    uv run python scripts/scrape_qiita.py

Environment:
    QIITA_API_KEY       Optional access token (sent as a bearer token)
    QIITA_USER_ID       Author to export (default: tasukuwatanabe)
    QIITA_OUTPUT_PATH   Override the output file
    LOG_LEVEL           Logging level (default: INFO)
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.qiita_export.config import settings
from src.qiita_export.pipeline import run_export


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the script."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main() -> int:
    """Main entry point."""
    setup_logging(settings.log_level)
    run_export()
    return 0


if __name__ == "__main__":
    sys.exit(main())
