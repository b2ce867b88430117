"""Unit tests for dotted-path nesting."""

from cloudlog.domain.services.path_nester import deep_merge, nest_fields, split_key


class TestSplitKey:
    """Tests for split_key."""

    def test_splits_and_normalizes(self) -> None:
        """Test that each dotted segment is camelCased."""
        assert split_key("http_request.request_method") == [
            "httpRequest",
            "requestMethod",
        ]

    def test_skips_empty_segments(self) -> None:
        """Test that doubled, leading and trailing dots are ignored."""
        assert split_key(".a..b.") == ["a", "b"]

    def test_key_without_segments_is_kept_whole(self) -> None:
        """Test that a key made only of dots is not dropped."""
        assert split_key("..") == [".."]


class TestNestFields:
    """Tests for nest_fields."""

    def test_shared_prefix_merges(self) -> None:
        """Test that keys with a common prefix share one object."""
        result = nest_fields(
            [("http_request.request_method", "GET"), ("http_request.status", 200)]
        )

        assert result == {"httpRequest": {"requestMethod": "GET", "status": 200}}

    def test_later_scalar_wins(self) -> None:
        """Test last-write-wins for conflicting scalars."""
        assert nest_fields([("a", 1), ("a", 2)]) == {"a": 2}

    def test_scalar_replaces_object(self) -> None:
        """Test that a later scalar replaces an earlier object."""
        assert nest_fields([("a.b", 1), ("a", 5)]) == {"a": 5}

    def test_object_replaces_scalar(self) -> None:
        """Test that a later object replaces an earlier scalar."""
        assert nest_fields([("a", 5), ("a.b", 1)]) == {"a": {"b": 1}}

    def test_mapping_value_merges_with_dotted_path(self) -> None:
        """Test that a nested mapping and a dotted key land in one object."""
        result = nest_fields([("db", {"host_name": "h"}), ("db.port", 5432)])

        assert result == {"db": {"hostName": "h", "port": 5432}}

    def test_nested_mapping_keys_are_not_split(self) -> None:
        """Test that dots inside nested mapping keys are kept literally."""
        result = nest_fields([("meta", {"some_key.with_dot": 1})])

        assert result == {"meta": {"someKey.withDot": 1}}

    def test_tuples_become_lists(self) -> None:
        """Test that sequences are rendered as JSON arrays."""
        result = nest_fields([("tags", ("a", {"k_1": 1}))])

        assert result == {"tags": ["a", {"k1": 1}]}

    def test_input_values_are_not_mutated(self) -> None:
        """Test that nesting copies mapping values."""
        value = {"inner_key": 1}
        nest_fields([("outer", value), ("outer.other", 2)])

        assert value == {"inner_key": 1}

    def test_insertion_order_is_preserved(self) -> None:
        """Test that output keys follow first insertion."""
        result = nest_fields([("b", 1), ("a", 2), ("b", 3)])

        assert list(result) == ["b", "a"]


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_merges_recursively(self) -> None:
        """Test that nested objects are unioned and source wins conflicts."""
        target = {"a": {"x": 1, "y": 1}, "b": 1}

        deep_merge(target, {"a": {"y": 2, "z": 3}, "c": 4})

        assert target == {"a": {"x": 1, "y": 2, "z": 3}, "b": 1, "c": 4}
