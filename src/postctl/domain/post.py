"""Post record: front-matter fields plus the opaque body text.

Attributes map 1:1 to the schema keys in :mod:`postctl.domain.types`.
Keys outside the schema are kept verbatim in ``extra`` so that nothing an
external generator relies on (``date``, ``permalink``, ``tags``) is lost.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from postctl.domain.types import FIELD_SCHEMA


class Post(BaseModel):
    """One parsed content file."""

    model_config = {"frozen": True}

    layout: str
    title: str
    author: str | None = None
    categories: list[str] = Field(default_factory=list)
    image: str | None = None
    featured: bool = False
    hidden: bool = False
    body: str = ""
    extra: dict[str, Any] = Field(default_factory=dict)
    path: Path | None = None

    def to_frontmatter(self) -> dict[str, Any]:
        """Return front-matter keys in canonical order.

        Schema fields come first in :data:`FIELD_SCHEMA` order, then extra
        keys alphabetically. Schema fields that are ``None``, empty or false
        are omitted since they equal the parse defaults. Extra keys are kept
        as they are, ``null`` included.
        """
        fm: dict[str, Any] = {}
        for spec in FIELD_SCHEMA:
            value = getattr(self, spec.name)
            if value is None or value is False or value == []:
                continue
            fm[spec.name] = list(value) if isinstance(value, list) else value
        for key in sorted(self.extra):
            fm[key] = self.extra[key]
        return fm

    def summary(self) -> dict[str, Any]:
        """Compact listing view used by ``list_posts``."""
        return {
            "path": str(self.path) if self.path else None,
            "title": self.title,
            "layout": self.layout,
            "author": self.author,
            "categories": list(self.categories),
            "featured": self.featured,
            "hidden": self.hidden,
        }
