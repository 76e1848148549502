"""Pure parsing and rendering of post files.

A post file is a ``---`` line, a YAML mapping, a closing ``---`` line,
then the markdown body. The body is never parsed or executed; fenced code
blocks inside it (R, shell, anything else) are opaque text.

No file I/O happens here. :mod:`postctl.infrastructure.filesystem` reads
and writes files and calls into this module (infrastructure -> domain).
"""

from __future__ import annotations

from collections.abc import Mapping, Set as AbstractSet
from datetime import datetime
from io import StringIO
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import TaggedScalar
from ruamel.yaml.error import YAMLError

from postctl.domain.errors import MalformedFrontMatter
from postctl.domain.post import Post
from postctl.domain.types import SCHEMA_FIELDS, validate_fields

FRONTMATTER_DELIMITER = "---"

_BOM = "\ufeff"


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object keeps emitter state between calls, so each
    operation gets its own instance.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    return y


def _plain(value: Any) -> Any:
    """Convert ruamel round-trip containers and scalars to builtin types.

    Custom tags (``!foo bar``) are dropped and their value kept, so every
    front-matter value serializes to JSON.
    """
    if isinstance(value, TaggedScalar):
        return _plain(value.value)
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, AbstractSet)):
        return [_plain(v) for v in value]
    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, datetime):
        return datetime(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tzinfo=value.tzinfo,
        )
    return value


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


def split_frontmatter(content: str) -> tuple[str, str]:
    """Split *content* into ``(yaml_block, body)``.

    Delimiter lines may end in ``\\r\\n`` and the file may start with a BOM.
    The YAML block comes back with ``\\n`` line endings; the body is sliced
    from the original text, line endings included. One blank line directly
    after the closing delimiter is dropped.

    Raises:
        MalformedFrontMatter: the file does not start with the delimiter,
            or the opening delimiter is never closed.
    """
    lines = content.removeprefix(_BOM).split("\n")
    if lines[0].strip() != FRONTMATTER_DELIMITER:
        raise MalformedFrontMatter("File does not start with a front-matter block")

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        raise MalformedFrontMatter("Front-matter block is not terminated")

    yaml_block = "\n".join(line.removesuffix("\r") for line in lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])
    for blank in ("\r\n", "\n"):
        if body.startswith(blank):
            body = body[len(blank) :]
            break
    return yaml_block, body


def load_frontmatter(yaml_block: str) -> dict[str, Any]:
    """Parse a YAML block into a plain mapping.

    An empty block is an empty mapping. Anything that is not a mapping
    (a list, a bare scalar) is malformed.
    """
    try:
        data = _new_yaml().load(yaml_block)
    except YAMLError as exc:
        msg = f"Front matter is not valid YAML: {exc}"
        raise MalformedFrontMatter(msg) from exc

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        msg = f"Front matter must be a key-value mapping, got {type(data).__name__}"
        raise MalformedFrontMatter(msg)
    return _plain(data)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML front matter and body from markdown *content*."""
    yaml_block, body = split_frontmatter(content)
    return load_frontmatter(yaml_block), body


# ---------------------------------------------------------------------------
# Post construction
# ---------------------------------------------------------------------------


def decode(raw: bytes | str) -> str:
    """Decode raw file bytes as UTF-8."""
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"File is not valid UTF-8: {exc.reason} at byte {exc.start}"
        raise MalformedFrontMatter(msg) from exc


def build_post(fm: Mapping[str, Any], body: str, *, path: Path | None = None) -> Post:
    """Validate a front-matter mapping and assemble a :class:`Post`."""
    fields = validate_fields(fm)
    extra = {k: v for k, v in fm.items() if k not in SCHEMA_FIELDS}
    return Post(**fields, body=body, extra=extra, path=path)


def parse_post(raw: bytes | str, *, path: Path | None = None) -> Post:
    """Parse raw file content into a validated :class:`Post`.

    Raises:
        MalformedFrontMatter: missing, unterminated, or non-mapping front matter.
        MissingRequiredField: ``layout`` or ``title`` is absent.
        TypeMismatch: a schema field has the wrong value shape.
    """
    fm, body = parse_frontmatter(decode(raw))
    return build_post(fm, body, path=path)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_frontmatter(frontmatter: Mapping[str, Any], body: str) -> str:
    """Render a front-matter mapping and body text into markdown.

    Keys are emitted in the order given. A blank line separates the closing
    delimiter from a non-empty body, which :func:`split_frontmatter` drops
    again on the way back in.
    """
    buf = StringIO()
    _new_yaml().dump(dict(frontmatter), buf)
    yaml_text = buf.getvalue()

    parts = [FRONTMATTER_DELIMITER, "\n", yaml_text, FRONTMATTER_DELIMITER, "\n"]
    if body:
        parts.extend(["\n", body])
    return "".join(parts)


def render_post(post: Post) -> str:
    """Serialize *post* back to file text in canonical key order."""
    return render_frontmatter(post.to_frontmatter(), post.body)
