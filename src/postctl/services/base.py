"""BaseService: foundation for postctl services.

Every service receives a :class:`PostStore` at construction time and does
all file access through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from postctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from postctl.domain.errors import PostError
    from postctl.infrastructure.store import PostStore


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PostService(BaseService):
            def get_post(self, path: str) -> ServiceResult:
                post = self._store.read(self._store.resolve(path))
                ...
    """

    def __init__(self, store: PostStore) -> None:
        self._store = store

    def _error_detail(self, exc: PostError) -> dict[str, Any]:
        """Issue fields shared by error results and check reports."""
        detail: dict[str, Any] = {}
        if exc.path is not None:
            detail["path"] = self._store.relative(exc.path)
        if exc.field is not None:
            detail["field"] = exc.field
        return detail

    def _fail(self, op: str, exc: PostError) -> ServiceResult:
        """Convert a post error into a failed result."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=exc.code,
                message=exc.message,
                detail=self._error_detail(exc),
            ),
        )
