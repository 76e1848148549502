"""Command: validate every post."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    cls=PostCommand,
    examples="""\
  postctl check
  postctl check --strict
  postctl --json check""",
)
@click.option("--strict", is_flag=True, help="Exit with status 1 if any post is invalid.")
@click.pass_obj
def check(app: AppContext, strict: bool) -> None:
    """Parse and validate all posts, reporting the invalid ones."""
    from postctl.services.posts import PostService

    result = PostService(app.store).check()
    app.emit(result)
    if strict and not result.data.get("healthy", True):
        raise SystemExit(1)
