"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from postctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="list_posts", data={"count": 0})
        assert result.ok is True
        assert result.data == {"count": 0}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="TypeMismatch", message="bad", detail={"field": "categories"})
        result = ServiceResult(ok=False, op="get_post", error=error)
        assert result.error is not None
        assert result.error.code == "TypeMismatch"
        assert result.error.detail["field"] == "categories"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"healthy": True})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["healthy"] is True

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
