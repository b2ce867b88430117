"""Formatter configuration.

Settings are resolved once, when the pipeline is built, and are immutable
afterwards. Every setting has a default and an environment variable
override for deployment tuning.

Environment Variables:
- CLOUDLOG_SOURCE_LOCATION: Include logging.googleapis.com/sourceLocation (default: true)
- CLOUDLOG_PROJECT_ID: Enable Cloud Trace correlation for this project
  (falls back to GOOGLE_CLOUD_PROJECT; unset disables correlation)
- CLOUDLOG_INCLUDE_TARGET: Emit the producer identifier as ``target`` (default: false)
- CLOUDLOG_RAISE_ON_WRITE_ERROR: Re-raise failed writes at the log call (default: false)
- LOG_LEVEL: Minimum level for the structlog pipeline (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from cloudlog.domain.errors.configuration import ConfigurationError
from cloudlog.domain.models.severity import Level

DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognised.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_str_env(*keys: str) -> str | None:
    """Get the first non-blank value among several environment variables."""
    for key in keys:
        value = os.environ.get(key, "").strip()
        if value:
            return value
    return None


@dataclass(frozen=True)
class CloudTraceConfig:
    """Cloud Trace correlation settings.

    Attributes:
        project_id: Google Cloud project that owns the traces; used to build
            ``projects/<project_id>/traces/<trace_id>``.
    """

    project_id: str

    def __post_init__(self) -> None:
        if not self.project_id or not self.project_id.strip():
            raise ConfigurationError("project_id", "must be a non-empty string")
        if "/" in self.project_id:
            raise ConfigurationError(
                "project_id", f"must not contain '/', got {self.project_id!r}"
            )


@dataclass(frozen=True)
class FormatterConfig:
    """Configuration for document formatting and delivery.

    Attributes:
        include_source_location: Emit the callsite as
            logging.googleapis.com/sourceLocation. Default: True.
        cloud_trace: Trace correlation settings; None disables correlation.
        include_target: Emit the producer identifier as ``target``.
            Default: False.
        raise_on_write_error: Re-raise failed writes at the log call instead
            of reporting and dropping the event. Default: False.
        log_level: Minimum level name for the structlog pipeline.
            Default: INFO.
    """

    include_source_location: bool = True
    cloud_trace: CloudTraceConfig | None = None
    include_target: bool = False
    raise_on_write_error: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if Level.from_name(self.log_level) is None:
            raise ConfigurationError(
                "log_level", f"unknown level name {self.log_level!r}"
            )

    @property
    def trace_correlation_enabled(self) -> bool:
        """Whether trace correlation fields are emitted."""
        return self.cloud_trace is not None

    @property
    def level(self) -> Level:
        """The minimum level as a Level."""
        level = Level.from_name(self.log_level)
        return level if level is not None else Level.INFO

    def with_cloud_trace(self, project_id: str) -> FormatterConfig:
        """Return a copy with trace correlation enabled for ``project_id``."""
        return replace(self, cloud_trace=CloudTraceConfig(project_id=project_id))

    def without_cloud_trace(self) -> FormatterConfig:
        """Return a copy with trace correlation disabled."""
        return replace(self, cloud_trace=None)

    @classmethod
    def from_environment(cls) -> FormatterConfig:
        """Create config from environment variables with defaults.

        Unrecognised values fall back to the defaults rather than failing
        startup.

        Returns:
            FormatterConfig with values from environment or defaults.
        """
        project_id = _get_str_env("CLOUDLOG_PROJECT_ID", "GOOGLE_CLOUD_PROJECT")
        cloud_trace = None
        if project_id is not None and "/" not in project_id:
            cloud_trace = CloudTraceConfig(project_id=project_id)

        log_level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if Level.from_name(log_level) is None:
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            include_source_location=_get_bool_env("CLOUDLOG_SOURCE_LOCATION", True),
            cloud_trace=cloud_trace,
            include_target=_get_bool_env("CLOUDLOG_INCLUDE_TARGET", False),
            raise_on_write_error=_get_bool_env("CLOUDLOG_RAISE_ON_WRITE_ERROR", False),
            log_level=log_level,
        )


# Pre-defined configurations for common use cases

# Default production config: source locations on, no trace correlation
DEFAULT_FORMATTER_CONFIG = FormatterConfig()

# Testing config: deterministic documents without callsite noise
TEST_FORMATTER_CONFIG = FormatterConfig(
    include_source_location=False,
    raise_on_write_error=True,
    log_level="DEBUG",
)
