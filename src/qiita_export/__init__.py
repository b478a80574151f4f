"""Qiita article export for the blog's static site build."""

from .config import settings
from .models import ArticleSummary, EnrichedArticle

__all__ = ["settings", "ArticleSummary", "EnrichedArticle"]
