"""Unit tests for visitor contracts and node helpers."""

from __future__ import annotations

import pytest

from openapi_postprocessing.core.models import HttpMethod, VisitResult, is_reference


class TestIsReference:
    """Reference marker detection."""

    def test_ref_mapping(self):
        assert is_reference({"$ref": "#/components/pathItems/Shared"})
        assert is_reference({"$ref": "#/x", "summary": "with siblings"})

    def test_inline_nodes(self):
        assert not is_reference({"get": {}})
        assert not is_reference({})

    def test_non_mappings(self):
        assert not is_reference("$ref")
        assert not is_reference(["$ref"])
        assert not is_reference(None)


def test_http_method_parse_is_case_insensitive():
    assert HttpMethod.parse(" PATCH ") is HttpMethod.PATCH


def test_http_method_parse_rejects_unknown():
    with pytest.raises(ValueError):
        HttpMethod.parse("trace")


def test_delete_result_equals_plain_string():
    assert VisitResult.DELETE == "delete"
