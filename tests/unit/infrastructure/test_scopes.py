"""Unit tests for the log scope stack."""

import asyncio
import threading

import pytest

from cloudlog.domain.errors.scope import NoActiveScopeError
from cloudlog.infrastructure.observability.scopes import (
    current_scopes,
    log_scope,
    record_scope_fields,
    scoped,
)


class TestLogScope:
    """Tests for log_scope and current_scopes."""

    def test_no_scope_by_default(self) -> None:
        """Test that the chain starts empty."""
        assert current_scopes() == ()

    def test_nesting_oldest_first(self) -> None:
        """Test that nested scopes chain outer to inner."""
        with log_scope("outer", a=1):
            with log_scope("inner", b=2) as inner:
                chain = current_scopes()

        assert [scope.name for scope in chain] == ["outer", "inner"]
        assert chain[-1] is inner
        assert dict(inner.fields) == {"b": 2}

    def test_chain_restored_on_exit(self) -> None:
        """Test that exiting a scope restores the parent chain."""
        with log_scope("outer"):
            with log_scope("inner"):
                pass
            assert [scope.name for scope in current_scopes()] == ["outer"]
        assert current_scopes() == ()

    def test_chain_restored_on_error(self) -> None:
        """Test that an exception inside a scope still pops it."""
        with pytest.raises(RuntimeError):
            with log_scope("failing"):
                raise RuntimeError("boom")

        assert current_scopes() == ()

    def test_snapshot_is_immutable(self) -> None:
        """Test that a snapshot is unaffected by later scope changes."""
        with log_scope("outer"):
            snapshot = current_scopes()
            with log_scope("inner"):
                pass

        assert [scope.name for scope in snapshot] == ["outer"]


class TestRecordScopeFields:
    """Tests for record_scope_fields."""

    def test_records_on_innermost(self) -> None:
        """Test that fields go to the innermost scope only."""
        with log_scope("outer", a=1):
            with log_scope("inner"):
                record_scope_fields(user_id=42)
                outer, inner = current_scopes()

        assert dict(outer.fields) == {"a": 1}
        assert dict(inner.fields) == {"user_id": 42}

    def test_later_value_replaces(self) -> None:
        """Test that recording an existing field replaces it."""
        with log_scope("s", status="pending"):
            record_scope_fields(status="done")
            (scope,) = current_scopes()

        assert scope.fields["status"] == "done"

    def test_without_scope_raises(self) -> None:
        """Test that recording with no active scope is an error."""
        with pytest.raises(NoActiveScopeError, match="user_id"):
            record_scope_fields(user_id=1)


class TestScopedDecorator:
    """Tests for the scoped decorator."""

    def test_sync_function(self) -> None:
        """Test that a sync function runs inside its scope."""

        @scoped("work", job="sync")
        def work() -> tuple[str, ...]:
            return tuple(scope.name for scope in current_scopes())

        assert work() == ("work",)
        assert current_scopes() == ()

    def test_default_name_is_qualname(self) -> None:
        """Test that the scope name defaults to the function's qualname."""

        @scoped()
        def helper() -> str:
            return current_scopes()[-1].name

        assert helper() == helper.__wrapped__.__qualname__  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_async_function(self) -> None:
        """Test that a coroutine runs inside its scope across awaits."""

        @scoped("fetch", attempt=1)
        async def fetch() -> str:
            await asyncio.sleep(0)
            return current_scopes()[-1].name

        assert await fetch() == "fetch"
        assert current_scopes() == ()


class TestIsolation:
    """Tests for per-task and per-thread isolation."""

    @pytest.mark.asyncio
    async def test_context_isolation_between_tasks(self) -> None:
        """Test that concurrent tasks see only their own scopes."""
        results: dict[str, list[str]] = {}

        async def task(name: str) -> None:
            with log_scope(name):
                await asyncio.sleep(0.01)  # Allow context switch
                with log_scope(f"{name}-child"):
                    await asyncio.sleep(0.01)
                    results[name] = [scope.name for scope in current_scopes()]

        await asyncio.gather(task("task1"), task("task2"), task("task3"))

        assert results["task1"] == ["task1", "task1-child"]
        assert results["task2"] == ["task2", "task2-child"]
        assert results["task3"] == ["task3", "task3-child"]

    def test_threads_do_not_share_scopes(self) -> None:
        """Test that a new thread starts with an empty chain."""
        seen: list[tuple[object, ...]] = []

        with log_scope("main"):
            thread = threading.Thread(target=lambda: seen.append(current_scopes()))
            thread.start()
            thread.join()

        assert seen == [()]
