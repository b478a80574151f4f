"""Configuration settings for the Qiita export."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

DEFAULT_USER_ID = "tasukuwatanabe"

# Relative to the project root; the site build reads it from here
OUTPUT_RELATIVE_PATH = Path("src") / "data" / "qiita-articles.json"


def _project_root() -> Path:
    return Path(__file__).parent.parent.parent


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    qiita_api_key: str = Field(default_factory=lambda: os.getenv("QIITA_API_KEY", ""))
    qiita_user_id: str = Field(
        default_factory=lambda: os.getenv("QIITA_USER_ID", DEFAULT_USER_ID)
    )
    qiita_api_base: str = Field(
        default_factory=lambda: os.getenv("QIITA_API_BASE", "https://qiita.com/api/v2")
    )
    request_timeout_seconds: float = Field(
        default_factory=lambda: float(os.getenv("QIITA_REQUEST_TIMEOUT", "30"))
    )
    preview_delay_seconds: float = Field(
        default_factory=lambda: float(os.getenv("PREVIEW_DELAY_SECONDS", "0"))
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    project_root: Path = Field(default_factory=_project_root)
    output_path: Path = Field(
        default_factory=lambda: Path(
            os.getenv("QIITA_OUTPUT_PATH", str(_project_root() / OUTPUT_RELATIVE_PATH))
        )
    )

    model_config = ConfigDict(frozen=True)


# Single page only: authors with more than PER_PAGE articles lose the oldest ones
PER_PAGE: int = 100
PAGE: int = 1

# Checked in order, first non-empty content wins
PREVIEW_META_TAGS: tuple[tuple[str, str], ...] = (
    ("property", "og:image"),
    ("name", "twitter:image"),
)

settings = Settings()
