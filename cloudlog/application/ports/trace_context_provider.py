"""Port definition for trace context resolution.

How a trace id reaches the process (W3C traceparent, X-Cloud-Trace-Context,
an OpenTelemetry SDK) is not the formatter's concern. A provider resolves
whatever is current for the scope chain of the event being formatted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from cloudlog.domain.models.scope import Scope
from cloudlog.domain.models.trace_context import TraceContext


class TraceContextProvider(ABC):
    """Resolves the trace context active for an event."""

    @abstractmethod
    def current_trace_context(self, scopes: Sequence[Scope]) -> TraceContext | None:
        """Return the active trace context, or None if there is none.

        Args:
            scopes: Scope chain of the event, oldest first.
        """
        ...
