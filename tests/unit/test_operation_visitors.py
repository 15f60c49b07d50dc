"""Unit tests for built-in operation visitor factories."""

from __future__ import annotations

import pytest

from openapi_postprocessing.core.models import HttpMethod, VisitResult
from openapi_postprocessing.core.traversal import traverse_document
from openapi_postprocessing.errors import ValidationError
from openapi_postprocessing.visitors import drop_deprecated, drop_methods, drop_paths, drop_tagged
from tests.helpers import make_operation


def test_drop_deprecated_matches_flagged_operations():
    visitor = drop_deprecated()
    assert visitor(make_operation("old", deprecated=True), HttpMethod.GET, "/old") == VisitResult.DELETE
    assert visitor(make_operation("new"), HttpMethod.GET, "/new") is None
    assert visitor({"deprecated": "yes"}, HttpMethod.GET, "/odd") is None


def test_drop_tagged_matches_any_tag():
    visitor = drop_tagged("internal", "admin")
    assert visitor(make_operation("a", tags=["pets", "admin"]), HttpMethod.DELETE, "/pets") == "delete"
    assert visitor(make_operation("b", tags=["pets"]), HttpMethod.GET, "/pets") is None
    assert visitor(make_operation("c"), HttpMethod.GET, "/untagged") is None


def test_drop_paths_uses_glob_patterns():
    visitor = drop_paths("/internal/*", "/debug")
    assert visitor(make_operation("a"), HttpMethod.GET, "/internal/health") == VisitResult.DELETE
    assert visitor(make_operation("b"), HttpMethod.GET, "/debug") == VisitResult.DELETE
    assert visitor(make_operation("c"), HttpMethod.GET, "/debug/vars") is None
    assert visitor(make_operation("d"), HttpMethod.GET, "/pets") is None


def test_drop_methods_accepts_any_case():
    visitor = drop_methods("HEAD", " options ")
    assert visitor(make_operation("a"), HttpMethod.HEAD, "/pets") == VisitResult.DELETE
    assert visitor(make_operation("b"), HttpMethod.OPTIONS, "/pets") == VisitResult.DELETE
    assert visitor(make_operation("c"), HttpMethod.GET, "/pets") is None


def test_drop_methods_rejects_unknown_method():
    with pytest.raises(ValidationError, match="Unknown HTTP method"):
        drop_methods("get", "trace")


def test_factories_compose_in_one_traversal(document):
    traverse_document(
        document,
        operation_visitors=[drop_deprecated(), drop_tagged("internal")],
    )

    assert list(document["paths"]) == ["/pets", "/pets/{petId}", "/shared"]
    assert "delete" not in document["paths"]["/pets/{petId}"]
    assert "get" in document["paths"]["/pets/{petId}"]


@pytest.mark.parametrize("tags", ["internal", None, {"internal": True}, ["pets", {"name": "internal"}]])
def test_drop_tagged_ignores_malformed_tags(tags):
    visitor = drop_tagged("internal", "i")
    assert visitor({"operationId": "odd", "tags": tags}, HttpMethod.GET, "/odd") is None
