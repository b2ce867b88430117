"""Unit tests for trace correlation fields."""

import pytest

from cloudlog.config.formatter_config import CloudTraceConfig
from cloudlog.domain.models.trace_context import TraceContext
from cloudlog.domain.services.trace_enricher import enrich_trace, trace_resource_name

TRACE = "logging.googleapis.com/trace"
SPAN_ID = "logging.googleapis.com/spanId"
SAMPLED = "logging.googleapis.com/trace_sampled"


class TestEnrichTrace:
    """Tests for enrich_trace."""

    def test_resource_name(self) -> None:
        """Test the projects/<p>/traces/<id> format."""
        result = enrich_trace(TraceContext("0679686673a"), CloudTraceConfig("demo"))

        assert result[TRACE] == "projects/demo/traces/0679686673a"

    def test_field_order_and_defaults(self) -> None:
        """Test trace, spanId, trace_sampled order; zero span when absent."""
        result = enrich_trace(TraceContext("abc"), CloudTraceConfig("demo"))

        assert list(result) == [TRACE, SPAN_ID, SAMPLED]
        assert result[SPAN_ID] == "0000000000000000"
        assert result[SAMPLED] is False

    def test_integer_ids_are_hex_padded(self) -> None:
        """Test OpenTelemetry-style integer ids."""
        trace = TraceContext(trace_id=0x1F, span_id=0xAB, sampled=True)

        result = enrich_trace(trace, CloudTraceConfig("p"))

        assert result[TRACE] == "projects/p/traces/" + "0" * 30 + "1f"
        assert result[SPAN_ID] == "00000000000000ab"
        assert result[SAMPLED] is True

    def test_disabled_emits_nothing(self) -> None:
        """Test that no project means no correlation fields."""
        assert enrich_trace(TraceContext("abc"), None) == {}

    def test_no_trace_emits_nothing(self) -> None:
        """Test that no active trace means no correlation fields."""
        assert enrich_trace(None, CloudTraceConfig("demo")) == {}

    @pytest.mark.parametrize("trace_id", ["", "   ", "0" * 32, 0])
    def test_invalid_trace_emits_nothing(self, trace_id: str | int) -> None:
        """Test that empty or all-zero trace ids are ignored."""
        assert enrich_trace(TraceContext(trace_id), CloudTraceConfig("demo")) == {}

    def test_trace_resource_name_helper(self) -> None:
        """Test the resource name helper directly."""
        assert trace_resource_name("demo", "t1") == "projects/demo/traces/t1"


class TestTraceContext:
    """Tests for the TraceContext model."""

    def test_string_ids_are_normalized(self) -> None:
        """Test that hex strings are trimmed, lowercased and span-padded."""
        trace = TraceContext(" ABCDEF ", span_id="1A")

        assert trace.trace_id_hex == "abcdef"
        assert trace.span_id_hex == "000000000000001a"
