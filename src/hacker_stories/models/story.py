"""
Wire and domain models for Hacker News stories.

The search API returns hits with Algolia field names (``objectID``,
``num_comments``); the models accept those names and expose pythonic ones.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Story(BaseModel):
    """A single story returned by the search API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="objectID")
    title: str = Field(min_length=1)
    url: Optional[str] = None
    author: str = ""
    comment_count: int = Field(default=0, ge=0, alias="num_comments")
    points: int = Field(default=0, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        # Simulated sources often use integer ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("author", mode="before")
    @classmethod
    def null_author(cls, value):
        return "" if value is None else value

    @field_validator("comment_count", "points", mode="before")
    @classmethod
    def null_count(cls, value):
        return 0 if value is None else value


class SearchResponse(BaseModel):
    """Envelope of a ``/search`` response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    hits: List[Story]
    query: Optional[str] = None
    page: int = 0
    nb_pages: Optional[int] = Field(default=None, alias="nbPages")
    nb_hits: Optional[int] = Field(default=None, alias="nbHits")
    hits_per_page: Optional[int] = Field(default=None, alias="hitsPerPage")
