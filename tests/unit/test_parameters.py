"""Unit tests for parameters.py module.

Tests the MethodParameterSet default suppression and query serialization.
"""

import pytest
from datetime import datetime, timezone

from tumblrclient.parameters import MethodParameterSet, serialize_value
from tumblrclient.models import PostFilter


class TestMethodParameterSet:
    """Test cases for the MethodParameterSet class."""

    def test_add_without_default_includes_value(self):
        """Test a parameter without default is included when non-null."""
        params = MethodParameterSet()
        params.add("tag", "cats")

        assert dict(params) == {"tag": "cats"}

    def test_add_without_default_skips_none_and_empty(self):
        """Test None and empty strings are never included."""
        params = MethodParameterSet()
        params.add("tag", None)
        params.add("before", "")

        assert len(params) == 0
        assert "tag" not in params

    def test_add_with_default_value_is_omitted(self):
        """Test a value equal to its default is omitted."""
        params = MethodParameterSet()
        params.add("offset", 0, 0)
        params.add("limit", 20, 20)
        params.add("reblog_info", False, False)
        params.add("filter", "html", "html")

        assert len(params) == 0

    def test_add_with_non_default_value_is_included(self):
        """Test a value different from its default keeps its exact value."""
        params = MethodParameterSet()
        params.add("offset", 40, 0)
        params.add("limit", 5, 20)
        params.add("notes_info", True, False)

        assert params["offset"] == 40
        assert params["limit"] == 5
        assert params["notes_info"] is True

    def test_bool_is_not_default_of_int(self):
        """Test False is not treated as equal to an integer default of 0."""
        params = MethodParameterSet()
        params.add("flag", False, 0)

        assert params["flag"] is False

    def test_insertion_order_preserved(self):
        """Test parameters keep insertion order."""
        params = MethodParameterSet()
        params.add("b", 1)
        params.add("a", 2)
        params.add("c", 3)

        assert list(params) == ["b", "a", "c"]

    def test_construction_is_idempotent(self):
        """Test identical inputs produce identical parameter sets."""
        def build():
            params = MethodParameterSet()
            params.add("offset", 10, 0)
            params.add("limit", 20, 20)
            params.add("tag", "dogs")
            return params

        assert build() == build()
        assert build().to_query() == {"offset": "10", "tag": "dogs"}

    def test_re_adding_default_removes_key(self):
        """Test adding a key again with its default value removes it."""
        params = MethodParameterSet()
        params.add("limit", 5, 20)
        params.add("limit", 20, 20)

        assert "limit" not in params

    def test_empty_key_rejected(self):
        """Test an empty parameter name is rejected."""
        with pytest.raises(ValueError, match="Parameter name cannot be empty"):
            MethodParameterSet().add("", 1)

    def test_add_returns_self(self):
        """Test add supports chaining."""
        params = MethodParameterSet()
        assert params.add("a", 1).add("b", 2) is params


class TestSerializeValue:
    """Test cases for query value serialization."""

    def test_bool_serialization(self):
        assert serialize_value(True) == "true"
        assert serialize_value(False) == "false"

    def test_int_serialization(self):
        assert serialize_value(20) == "20"

    def test_enum_serialization_lower_case(self):
        assert serialize_value(PostFilter.TEXT) == "text"

    def test_datetime_serialization_epoch_seconds(self):
        moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert serialize_value(moment) == "1704067200"

    def test_naive_datetime_taken_as_utc(self):
        assert serialize_value(datetime(2024, 1, 1)) == "1704067200"

    def test_to_query_serializes_all_values(self):
        params = MethodParameterSet()
        params.add("reblog_info", True, False)
        params.add("before", datetime(2024, 1, 1, tzinfo=timezone.utc))

        assert params.to_query() == {"reblog_info": "true", "before": "1704067200"}
