"""Unit tests for scope chain projection."""

import pytest

from cloudlog.domain.models.scope import Scope
from cloudlog.domain.services.scope_projector import project_scopes


class TestProjectScopes:
    """Tests for project_scopes."""

    def test_no_scopes_no_span(self) -> None:
        """Test that an empty chain produces no span."""
        assert project_scopes(()) is None

    def test_innermost_name_and_field_win(self) -> None:
        """Test A -> B -> C each with x: name C, x from C."""
        scopes = (
            Scope("A", {"x": "a"}),
            Scope("B", {"x": "b"}),
            Scope("C", {"x": "c"}),
        )

        assert project_scopes(scopes) == {"name": "C", "x": "c"}

    def test_fields_fall_back_to_ancestors(self) -> None:
        """Test that a field absent in C comes from B, then A."""
        scopes = (
            Scope("A", {"x": "a", "y": "a"}),
            Scope("B", {"y": "b"}),
            Scope("C", {"z": "c"}),
        )

        assert project_scopes(scopes) == {"name": "C", "x": "a", "y": "b", "z": "c"}

    def test_fields_nest_and_camel_case(self) -> None:
        """Test that scope fields follow the nesting rules."""
        scopes = (Scope("query", {"db.statement_text": "SELECT 1", "db.row_count": 1}),)

        assert project_scopes(scopes) == {
            "name": "query",
            "db": {"statementText": "SELECT 1", "rowCount": 1},
        }

    def test_name_field_does_not_replace_span_name(self) -> None:
        """Test that a scope field called name is ignored."""
        scopes = (Scope("outer", {"name": "shadow", "k": 1}),)

        assert project_scopes(scopes) == {"name": "outer", "k": 1}


class TestScope:
    """Tests for the Scope model."""

    def test_empty_name_rejected(self) -> None:
        """Test that scopes must be named."""
        with pytest.raises(ValueError):
            Scope("")

    def test_with_fields_returns_copy(self) -> None:
        """Test that recording fields leaves the original untouched."""
        scope = Scope("s", {"a": 1})

        updated = scope.with_fields(a=2, b=3)

        assert dict(scope.fields) == {"a": 1}
        assert dict(updated.fields) == {"a": 2, "b": 3}
        assert updated.name == "s"
