"""
Pydantic schemas for news headlines.

A headline has a store‑assigned ``id``, a ``title``, an optional
``imageUrl`` and a ``url`` that defaults to ``"#"``.  On the wire the
image field is spelled ``imageUrl``; in Python it is ``image_url``.

Whether ``imageUrl`` was supplied at all is significant: a headline
without one tells clients to use their fallback image, and an update
that carries ``imageUrl`` (even ``null`` or ``""``) replaces it.  That
presence is tracked through pydantic's set fields, and responses are
serialised with unset fields excluded.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HeadlineCreate(BaseModel):
    """Schema for creating a new headline.

    ``title`` is optional here so that a missing title is reported by
    the store as ``Title is required`` rather than as a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, description="Headline text; required and non-empty")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="Image to show with the headline")
    url: Optional[str] = Field(None, description="Link to the full story; defaults to '#'")


class HeadlineUpdate(BaseModel):
    """Schema for updating an existing headline.

    All fields are optional.  Empty ``title`` and ``url`` values are
    ignored; ``imageUrl`` is applied whenever it is present.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    url: Optional[str] = None


class Headline(BaseModel):
    """Schema for a stored headline."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    image_url: Optional[str] = Field(None, alias="imageUrl")
    url: str = "#"
