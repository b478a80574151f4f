"""Pydantic models for Qiita articles."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QiitaUser(BaseModel):
    """Author of an article as returned by the items API."""

    id: str
    profile_image_url: str | None = None


class QiitaTag(BaseModel):
    """Tag attached to an article. Only the name is kept."""

    name: str


class ArticleSummary(BaseModel):
    """Validated article summary from the Qiita items API."""

    id: str
    title: str
    url: str
    created_at: str
    updated_at: str
    user: QiitaUser
    tags: list[QiitaTag] = Field(default_factory=list)
    likes_count: int = 0
    body: str = ""

    @field_validator("body", mode="before")
    @classmethod
    def _null_body_is_empty(cls, value):
        return "" if value is None else value

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]


class EnrichedArticle(BaseModel):
    """Flat article record written to the site's data file.

    Field order here is the key order of the exported JSON objects.
    """

    id: str
    title: str
    url: str
    created_at: str
    updated_at: str
    user_id: str
    user_icon: str | None = None
    tags: list[str] = Field(default_factory=list)
    likes_count: int = 0
    og_image: str | None = Field(default=None, alias="ogImage")
    body: str = ""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("og_image", mode="before")
    @classmethod
    def _blank_image_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_record(self) -> dict:
        """Dump with the exported key names (``ogImage``)."""
        return self.model_dump(by_alias=True)
