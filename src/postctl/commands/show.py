"""Command: parse one post and print its record."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    cls=PostCommand,
    examples="""\
  postctl show _posts/2021-03-04-microbiome-clr.md
  postctl show 2021-03-04-microbiome-clr.md --body
  postctl --json show _posts/2021-03-04-microbiome-clr.md""",
)
@click.argument("path")
@click.option("--body", is_flag=True, help="Include the post body in the output.")
@click.pass_obj
def show(app: AppContext, path: str, body: bool) -> None:
    """Parse PATH and show its front matter."""
    from postctl.services.posts import PostService

    result = PostService(app.store).get_post(path)
    app.emit(result, verbose=body or app.settings.verbose)
