"""Core data types for Quire posts."""

from datetime import UTC, date, datetime, time

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from quire.core.utils import dedupe

PostDate = date | datetime


def as_utc_datetime(value: PostDate) -> datetime:
    """Normalise a post date to an aware UTC datetime for ordering.

    Plain dates map to midnight; naive datetimes are assumed to be UTC.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class PostMetadata(BaseModel):
    """Frontmatter fields of a post, keyed by its slug.

    Field aliases are the camelCase frontmatter keys, so
    ``model_dump(by_alias=True)`` round-trips back to what the author wrote.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    slug: str = Field(min_length=1)
    title: StrictStr = Field(min_length=1)
    created_date: PostDate
    last_updated_date: PostDate
    categories: list[StrictStr]
    author: StrictStr
    estimated_reading_time_in_mins: StrictInt = Field(ge=0)

    @field_validator("created_date", "last_updated_date", mode="before")
    @classmethod
    def _parse_iso_string(cls, value: object) -> object:
        # A bare YYYY-MM-DD stays a date; anything longer must be a full timestamp.
        if isinstance(value, str):
            text = value.strip()
            if len(text) == len("YYYY-MM-DD"):
                return date.fromisoformat(text)
            return datetime.fromisoformat(text)
        if not isinstance(value, date):
            raise ValueError(f"expected an ISO 8601 date or timestamp, got {type(value).__name__}")
        return value

    @field_validator("categories", mode="before")
    @classmethod
    def _coerce_categories(cls, value: object) -> object:
        if isinstance(value, str):
            return [value]
        if value is None:
            return []
        return value

    @field_validator("categories")
    @classmethod
    def _unique_categories(cls, value: list[str]) -> list[str]:
        return dedupe(value)

    @property
    def created_at(self) -> datetime:
        return as_utc_datetime(self.created_date)

    def has_category(self, category: str) -> bool:
        return category in self.categories


class Post(PostMetadata):
    """A post with its rendered HTML body."""

    content: str

    @property
    def metadata(self) -> PostMetadata:
        return PostMetadata.model_validate(self.model_dump(exclude={"content"}))
