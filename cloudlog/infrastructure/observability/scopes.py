"""Log scope stack using contextvars.

This module keeps the chain of active log scopes in a ContextVar holding an
immutable tuple, so every thread and asyncio task sees its own chain and the
formatter always reads a consistent snapshot.

Usage:
    # Around a unit of work
    with log_scope("handle_request", request_id="r-1"):
        record_scope_fields(user_id=42)
        log.info("processing")   # span: {"name": "handle_request", ...}

    # As a decorator
    @scoped("sync_orders", batch=3)
    async def sync_orders() -> None:
        ...
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, TypeVar

from cloudlog.domain.errors.scope import NoActiveScopeError
from cloudlog.domain.models.scope import Scope

F = TypeVar("F", bound=Callable[..., Any])

# Oldest scope first; empty tuple when nothing is entered
_scope_chain: ContextVar[tuple[Scope, ...]] = ContextVar("log_scope_chain", default=())


def current_scopes() -> tuple[Scope, ...]:
    """Get the active scope chain, oldest first.

    Returns:
        The chain as an immutable tuple (empty if no scope is active).
    """
    return _scope_chain.get()


@contextmanager
def log_scope(name: str, **fields: Any) -> Iterator[Scope]:
    """Enter a named scope for the duration of the block.

    The previous chain is restored on exit, even when the block raises.

    Args:
        name: Scope name.
        **fields: Initial scope fields.

    Yields:
        The entered Scope.
    """
    scope = Scope(name=name, fields=fields)
    token = _scope_chain.set(_scope_chain.get() + (scope,))
    try:
        yield scope
    finally:
        _scope_chain.reset(token)


def record_scope_fields(**fields: Any) -> None:
    """Add fields to the innermost active scope.

    Fields recorded this way replace earlier values of the same name and are
    visible to events fired later inside the scope.

    Raises:
        NoActiveScopeError: If no scope is active.
    """
    chain = _scope_chain.get()
    if not chain:
        raise NoActiveScopeError(list(fields))
    _scope_chain.set(chain[:-1] + (chain[-1].with_fields(**fields),))


def scoped(name: str | None = None, **fields: Any) -> Callable[[F], F]:
    """Decorator running a function inside a log scope.

    Works for both regular and ``async def`` functions.

    Args:
        name: Scope name; defaults to the function's qualified name.
        **fields: Scope fields.
    """

    def decorator(func: F) -> F:
        scope_name = name or func.__qualname__

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with log_scope(scope_name, **fields):
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with log_scope(scope_name, **fields):
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
