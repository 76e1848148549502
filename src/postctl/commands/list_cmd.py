"""Command: list post files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    "list",
    cls=PostCommand,
    examples="""\
  postctl list
  postctl -q list
  postctl --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every post in the posts directory."""
    from postctl.services.posts import PostService

    app.emit(PostService(app.store).list_posts())
