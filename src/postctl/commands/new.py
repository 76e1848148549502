"""Command: scaffold a new post file."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    cls=PostCommand,
    examples="""\
  postctl new "Compositional data analysis in R"
  postctl new "CLR and PCoA" --author ap --category microbiome --category R
  postctl new "Draft notes" --hidden --date 2021-03-04""",
)
@click.argument("title")
@click.option("--layout", default=None, help="Layout name (default: [site] default_layout).")
@click.option("--author", default=None, help="Author identifier.")
@click.option("--category", "categories", multiple=True, help="Category (repeatable).")
@click.option("--image", default=None, help="Header image path, relative to the site.")
@click.option("--featured", is_flag=True, help="Mark the post as featured.")
@click.option("--hidden", is_flag=True, help="Hide the post from listings.")
@click.option(
    "--date",
    "published",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Publish date for the filename (default: today).",
)
@click.pass_obj
def new(
    app: AppContext,
    title: str,
    layout: str | None,
    author: str | None,
    categories: tuple[str, ...],
    image: str | None,
    featured: bool,
    hidden: bool,
    published: datetime | None,
) -> None:
    """Create a new post named YYYY-MM-DD-slug.md from TITLE."""
    from postctl.services.posts import PostService

    app.emit(
        PostService(app.store).create_post(
            title,
            layout=layout,
            author=author,
            categories=categories,
            image=image,
            featured=featured,
            hidden=hidden,
            published=published.date() if published else None,
        )
    )
