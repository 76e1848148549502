"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, postctl.toml only contains
overrides. A fresh site needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# --- postctl.toml sections ---


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    name: str = "my-blog"
    default_layout: str = "post"
    default_author: str | None = None


class PostsConfig(BaseModel):
    """[posts] section."""

    model_config = {"frozen": True}

    dir: str = "_posts"
    extensions: list[str] = Field(default_factory=lambda: [".md", ".markdown"])

    @field_validator("extensions")
    @classmethod
    def _dotted(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]


class AssetsConfig(BaseModel):
    """[assets] section."""

    model_config = {"frozen": True}

    dir: str = "assets"


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    workers: int = Field(default=1, ge=1)

