"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from postctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from postctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["path"]) for item in items if item.get("path"))

    if result.op == "check":
        return "\n".join(str(issue["path"]) for issue in result.data.get("issues", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="post.ok")
    op = Text(f"  {result.op}", style="post.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="post.key")
    if key == "path":
        v = Text(str(value), style="post.path")
    elif key == "title":
        v = Text(str(value), style="post.title")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":"), default=str))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _flags(item: dict[str, Any]) -> str:
    return " ".join(name for name in ("featured", "hidden") if item.get(name))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="post.error")
    op = Text(f"  {result.op}", style="post.op")
    code = Text(f"  [{err.code}]" if err else "", style="post.field")
    console.print(label, op, code, Text(f"  {msg}"))

    if err and err.detail:
        for k, v in err.detail.items():
            console.print(f"    {k}: {escape(str(v))}")


# ── Post renderers ────────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_posts as a table, invalid posts flagged."""
    items = result.data.get("items", [])
    if not items:
        console.print("No posts found.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Path", style="post.path", no_wrap=True)
    table.add_column("Title", style="post.title")
    table.add_column("Layout")
    table.add_column("Author")
    table.add_column("Categories")
    if verbose:
        table.add_column("Flags", style="post.flag")

    for item in items:
        if not item.get("valid", True):
            row = [str(item.get("path", "")), Text("invalid", style="post.error"), "", "", ""]
        else:
            row = [
                str(item.get("path", "")),
                Text(str(item.get("title", ""))),
                Text(str(item.get("layout", ""))),
                Text(str(item.get("author") or "")),
                Text(", ".join(item.get("categories", []))),
            ]
        if verbose:
            row.append(Text(_flags(item)))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} posts")


def _render_post(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get_post as a panel of front-matter fields, body on request."""
    d = result.data
    lines: list[str] = []
    for key in ("layout", "author", "image"):
        if d.get(key):
            lines.append(f"[post.key]{key}:[/post.key] {escape(str(d[key]))}")
    if d.get("categories"):
        lines.append(f"[post.key]categories:[/post.key] {escape(', '.join(d['categories']))}")
    lines.append(f"[post.key]featured:[/post.key] {str(d.get('featured', False)).lower()}")
    lines.append(f"[post.key]hidden:[/post.key] {str(d.get('hidden', False)).lower()}")
    for key, value in sorted((d.get("extra") or {}).items()):
        lines.append(f"[post.key]{key}:[/post.key] {escape(str(value))}")

    console.print(Text(str(d.get("title", "")), style="post.title"))
    if d.get("path"):
        console.print(Text(str(d["path"]), style="post.path"))
    console.print(Panel("\n".join(lines), border_style="dim", expand=False))
    if verbose and d.get("body"):
        console.print()
        console.print(d["body"], markup=False)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results: one line per invalid post, then totals."""
    issues = result.data.get("issues", [])
    checked = result.data.get("checked", 0)
    site = (result.meta or {}).get("site")
    if site:
        console.print(Text(str(site), style="post.title"))

    if not issues:
        console.print(f"[post.ok]OK[/post.ok]  {checked} posts checked, no issues found.")
        return

    for issue in issues:
        field = f" [post.field]{issue['field']}[/post.field]" if issue.get("field") else ""
        console.print(
            f"[post.error]{issue.get('severity', 'error')}[/post.error] "
            f"[post.path]{issue.get('path', '')}[/post.path] "
            f"{issue.get('code', '')}{field}: {escape(str(issue.get('message', '')))}",
        )

    if verbose:
        console.print()
        for post in result.data.get("posts", []):
            console.print(f"  [post.ok]ok[/post.ok] [post.path]{post.get('path', '')}[/post.path]")

    console.print(
        f"\n{result.data.get('valid_count', 0)} valid, "
        f"{result.data.get('invalid_count', len(issues))} invalid of {checked} posts"
    )


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create_post results."""
    _status_line(console, result)
    for key in ("path", "title", "layout", "author", "categories"):
        if result.data.get(key):
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_posts": _render_list,
    "get_post": _render_post,
    "check": _render_check,
    "create_post": _render_mutation,
}
