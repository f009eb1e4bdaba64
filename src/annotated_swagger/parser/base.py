"""Data models for parsed documentation comments.

The comment extractor turns source text into these models; the tag
translators and the file formatter consume them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TypeExpr(BaseModel):
    """An annotated type expression such as ``{Pet.model}`` or ``{Array.<Pet>}``."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None  # Pet / Pet.model / string
    expression: TypeExpr | None = None  # container of an applied type (Array)
    applications: list[TypeExpr] | None = None  # element types of an applied type
    elements: list[TypeExpr] | None = None  # members of a union (A|B)

    @property
    def is_applied(self) -> bool:
        return self.applications is not None


class CommentTag(BaseModel):
    """A single ``@title {type} name description`` directive."""

    model_config = ConfigDict(frozen=True)

    title: str
    name: str | None = None
    description: str | None = None
    type: TypeExpr | None = None


class CommentBlock(BaseModel):
    """One documentation comment: free text followed by its tags."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    tags: list[CommentTag] = []
    source: str = ""  # raw comment text, kept for error reports
