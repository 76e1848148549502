"""Front-matter value kinds and the per-field schema.

Values in YAML front matter can take any shape. The store narrows them to
a tagged variant (string | boolean | sequence-of-string) and checks each
known field against :data:`FIELD_SCHEMA`. Mismatches are rejected, never
coerced.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from postctl.domain.errors import MissingRequiredField, TypeMismatch


class FieldKind(StrEnum):
    """Value shapes a schema field may take."""

    STRING = "string"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"


_KIND_LABELS: dict[FieldKind, str] = {
    FieldKind.STRING: "a string",
    FieldKind.BOOLEAN: "a boolean",
    FieldKind.STRING_LIST: "a sequence of strings",
}


@dataclass(frozen=True)
class FieldSpec:
    """Schema entry for one front-matter key."""

    name: str
    kind: FieldKind
    required: bool = False


# Canonical order: also the order keys are written back out.
FIELD_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("layout", FieldKind.STRING, required=True),
    FieldSpec("title", FieldKind.STRING, required=True),
    FieldSpec("author", FieldKind.STRING),
    FieldSpec("categories", FieldKind.STRING_LIST),
    FieldSpec("image", FieldKind.STRING),
    FieldSpec("featured", FieldKind.BOOLEAN),
    FieldSpec("hidden", FieldKind.BOOLEAN),
)

SCHEMA_FIELDS: frozenset[str] = frozenset(spec.name for spec in FIELD_SCHEMA)
REQUIRED_FIELDS: tuple[str, ...] = tuple(spec.name for spec in FIELD_SCHEMA if spec.required)


def describe(value: Any) -> str:
    """Short, human-readable name for the shape of *value*."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, str):
        return "a string"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, Mapping):
        return "a mapping"
    if isinstance(value, (list, tuple)):
        return "a sequence"
    return type(value).__name__


def check_value(spec: FieldSpec, value: Any) -> str | bool | list[str]:
    """Return *value* narrowed to ``spec.kind`` or raise :class:`TypeMismatch`.

    Examples:
        >>> check_value(FieldSpec("categories", FieldKind.STRING_LIST), ["a", "b"])
        ['a', 'b']
        >>> check_value(FieldSpec("featured", FieldKind.BOOLEAN), True)
        True
    """
    expected = _KIND_LABELS[spec.kind]
    if spec.kind is FieldKind.STRING:
        if isinstance(value, str):
            return str(value)
    elif spec.kind is FieldKind.BOOLEAN:
        if isinstance(value, bool):
            return bool(value)
    elif spec.kind is FieldKind.STRING_LIST:
        if isinstance(value, (list, tuple)):
            items = list(value)
            for item in items:
                if not isinstance(item, str):
                    raise TypeMismatch(spec.name, expected, f"a sequence containing {describe(item)}")
            return [str(item) for item in items]
    raise TypeMismatch(spec.name, expected, describe(value))


def validate_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a parsed front-matter mapping against :data:`FIELD_SCHEMA`.

    Required fields are checked first, in schema order, so a post missing
    both ``layout`` and ``title`` reports ``layout``. Optional fields set to
    ``null`` are treated as absent. Returns only the schema fields that are
    present, narrowed to their kinds.
    """
    for name in REQUIRED_FIELDS:
        if raw.get(name) is None:
            raise MissingRequiredField(name)

    checked: dict[str, Any] = {}
    for spec in FIELD_SCHEMA:
        if spec.name not in raw or raw[spec.name] is None:
            continue
        checked[spec.name] = check_value(spec, raw[spec.name])
    return checked
