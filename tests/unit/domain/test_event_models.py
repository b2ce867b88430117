"""Unit tests for the Event, SourceLocation and HttpRequest models."""

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from ipaddress import IPv4Address

import pytest

from cloudlog.domain.models.event import Event, SourceLocation, coerce_field_value
from cloudlog.domain.models.http_request import HttpRequest, format_latency
from cloudlog.domain.models.severity import Level


class Color(Enum):
    RED = "red"


class TestCoerceFieldValue:
    """Tests for coerce_field_value."""

    def test_scalars_pass_through(self) -> None:
        """Test that JSON scalars are unchanged."""
        assert coerce_field_value("s") == "s"
        assert coerce_field_value(3) == 3
        assert coerce_field_value(1.5) == 1.5
        assert coerce_field_value(True) is True
        assert coerce_field_value(None) is None

    def test_non_finite_float_becomes_string(self) -> None:
        """Test that NaN and infinity are not emitted as numbers."""
        assert coerce_field_value(float("inf")) == "inf"
        assert coerce_field_value(float("nan")) == "nan"

    def test_enum_uses_value(self) -> None:
        """Test that enum members are unwrapped."""
        assert coerce_field_value(Color.RED) == "red"

    def test_dates_become_iso_strings(self) -> None:
        """Test date and datetime rendering."""
        assert coerce_field_value(date(2024, 1, 2)) == "2024-01-02"
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert coerce_field_value(moment) == "2024-01-02T03:04:05+00:00"

    def test_sequences_become_tuples(self) -> None:
        """Test that lists are coerced element-wise into tuples."""
        assert coerce_field_value([1, Color.RED, [2]]) == (1, "red", (2,))

    def test_bytes_are_decoded(self) -> None:
        """Test lossy UTF-8 decoding of bytes."""
        assert coerce_field_value(b"ok\xff") == "ok\ufffd"

    def test_exceptions_are_kept(self) -> None:
        """Test that errors stay errors until rendering."""
        error = ValueError("bad")
        assert coerce_field_value(error) is error

    def test_unknown_objects_use_str(self) -> None:
        """Test the str() fallback."""
        assert coerce_field_value(IPv4Address("10.0.0.1")) == "10.0.0.1"


class TestEvent:
    """Tests for the Event model."""

    def test_naive_timestamp_rejected(self) -> None:
        """Test that timestamps must be timezone-aware."""
        with pytest.raises(ValueError):
            Event(level=Level.INFO, timestamp=datetime(2024, 1, 1))

    def test_fields_are_read_only(self) -> None:
        """Test that the field mapping cannot be mutated."""
        event = Event(level=Level.INFO, fields={"a": 1})

        with pytest.raises(TypeError):
            event.fields["b"] = 2  # type: ignore[index]

    def test_fields_keep_insertion_order(self) -> None:
        """Test that field order is preserved."""
        event = Event(level=Level.INFO, fields={"z": 1, "a": 2, "m": 3})

        assert list(event.fields) == ["z", "a", "m"]

    def test_default_timestamp_is_utc(self) -> None:
        """Test that events are stamped in UTC by default."""
        event = Event(level=None)

        assert event.timestamp.tzinfo is not None
        assert event.timestamp.utcoffset() == timedelta(0)


class TestSourceLocation:
    """Tests for SourceLocation rendering."""

    def test_line_is_rendered_as_string(self) -> None:
        """Test the int64-as-string schema rule."""
        location = SourceLocation("app.py", 42, "handler")

        assert location.to_document() == {
            "file": "app.py",
            "line": "42",
            "function": "handler",
        }

    def test_missing_parts_are_omitted(self) -> None:
        """Test that unknown line and function are left out."""
        assert SourceLocation("app.py").to_document() == {"file": "app.py"}


class TestHttpRequest:
    """Tests for the HttpRequest model."""

    def test_unset_attributes_are_omitted(self) -> None:
        """Test that only set attributes render."""
        assert HttpRequest(request_url="/x").as_mapping() == {"request_url": "/x"}

    def test_value_shapes(self) -> None:
        """Test rendering of each attribute type."""
        request = HttpRequest(
            request_method="get",
            request_size=10,
            remote_ip=IPv4Address("10.0.0.1"),
            cache_hit=False,
            latency=timedelta(seconds=2),
            protocol="HTTP/2",
        )

        assert request.as_mapping() == {
            "request_method": "GET",
            "request_size": 10,
            "remote_ip": "10.0.0.1",
            "latency": "2s",
            "cache_hit": False,
            "protocol": "HTTP/2",
        }

    def test_negative_size_rejected(self) -> None:
        """Test size validation."""
        with pytest.raises(ValueError):
            HttpRequest(response_size=-1)

    @pytest.mark.parametrize(
        ("latency", "expected"),
        [
            (timedelta(0), "0s"),
            (timedelta(milliseconds=230), "0.23s"),
            (timedelta(seconds=1, microseconds=5), "1.000005s"),
            (timedelta(minutes=2), "120s"),
        ],
    )
    def test_format_latency(self, latency: timedelta, expected: str) -> None:
        """Test exact Duration rendering."""
        assert format_latency(latency) == expected
