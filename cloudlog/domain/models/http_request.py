"""Typed HTTP request description for the ``httpRequest`` document field.

Producers can log request details as dotted fields
(``http_request.request_method="GET"``), or hand over an HttpRequest, which
renders itself through the structured-value capability:

    log.info("served", http_request=HttpRequest(request_method="GET", status=200))

Both forms land in the same ``httpRequest`` object.

Reference:
    https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry#HttpRequest
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import timedelta
from ipaddress import IPv4Address, IPv6Address
from typing import Any


@dataclass(frozen=True)
class HttpRequest:
    """Request/response metadata for one HTTP exchange.

    Every attribute is optional; unset attributes are left out of the
    rendered mapping.

    Attributes:
        request_method: HTTP method (``"GET"`` or an ``http.HTTPMethod``).
        request_url: Full request URL.
        request_size: Request size in bytes, including headers and body.
        response_size: Response size in bytes, including headers and body.
        status: Response status code (int or ``http.HTTPStatus``).
        user_agent: User agent sent by the client.
        remote_ip: Client IP address.
        server_ip: IP address of the server the request was sent to.
        referer: Referer URL.
        latency: Time from request received to response sent.
        cache_lookup: Whether a cache lookup was attempted.
        cache_hit: Whether the entity was served from cache.
        cache_validated_with_origin_server: Whether the cached response was
            validated with the origin before being served.
        cache_fill_bytes: Response bytes inserted into cache.
        protocol: Protocol used (``"HTTP/1.1"``, ``"HTTP/2"``, ``"websocket"``).
    """

    request_method: str | None = None
    request_url: str | None = None
    request_size: int | None = None
    response_size: int | None = None
    status: int | None = None
    user_agent: str | None = None
    remote_ip: str | IPv4Address | IPv6Address | None = None
    server_ip: str | IPv4Address | IPv6Address | None = None
    referer: str | None = None
    latency: timedelta | None = None
    cache_lookup: bool | None = None
    cache_hit: bool | None = None
    cache_validated_with_origin_server: bool | None = None
    cache_fill_bytes: int | None = None
    protocol: str | None = None

    def __post_init__(self) -> None:
        for name in ("request_size", "response_size", "cache_fill_bytes"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def as_mapping(self) -> dict[str, Any]:
        """Render the set attributes with their schema value shapes.

        Sizes and flags are passed through; method, URLs and addresses are
        rendered as strings; status as a plain integer; latency as a
        seconds string such as ``"0.23s"``.
        """
        rendered: dict[str, Any] = {}
        for attribute in fields(self):
            value = getattr(self, attribute.name)
            if value is None:
                continue
            rendered[attribute.name] = _render(attribute.name, value)
        return rendered


def _render(name: str, value: Any) -> Any:
    if name == "latency":
        return format_latency(value)
    if name == "status":
        return int(value)
    if name == "request_method":
        return str(getattr(value, "value", value)).upper()
    if isinstance(value, (bool, int)):
        return value
    return str(value)


def format_latency(latency: timedelta) -> str:
    """Render a latency as a Duration string (``"1.234s"``).

    Uses the exact microsecond count, so no float rounding creeps in.
    """
    total = (latency.days * 86_400 + latency.seconds) * 1_000_000 + latency.microseconds
    sign = "-" if total < 0 else ""
    seconds, micros = divmod(abs(total), 1_000_000)
    if not micros:
        return f"{sign}{seconds}s"
    return f"{sign}{seconds}.{micros:06d}".rstrip("0") + "s"
