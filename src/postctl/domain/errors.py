"""Post error taxonomy.

Every condition is detected at parse time and is local to one file.
Services catch these per file and convert them into issues, so a bad
post never stops processing of the others.
"""

from __future__ import annotations

from pathlib import Path


class PostError(Exception):
    """Base class for all post parsing and validation failures."""

    code = "PostError"

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    @property
    def field(self) -> str | None:
        return None

    def with_path(self, path: Path) -> PostError:
        """Attach the source file path and return ``self``."""
        self.path = path
        return self

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedFrontMatter(PostError):
    """Front matter is missing, unterminated, or not a key-value mapping."""

    code = "MalformedFrontMatter"


class MissingRequiredField(PostError):
    """A required front-matter key (``layout`` or ``title``) is absent."""

    code = "MissingRequiredField"

    def __init__(self, field: str, *, path: Path | None = None) -> None:
        super().__init__(f"Missing required field {field!r}", path=path)
        self._field = field

    @property
    def field(self) -> str:
        return self._field


class TypeMismatch(PostError):
    """A front-matter value does not match its schema kind."""

    code = "TypeMismatch"

    def __init__(
        self,
        field: str,
        expected: str,
        actual: str,
        *,
        path: Path | None = None,
    ) -> None:
        super().__init__(
            f"Field {field!r} must be {expected}, got {actual}",
            path=path,
        )
        self._field = field
        self.expected = expected
        self.actual = actual

    @property
    def field(self) -> str:
        return self._field
