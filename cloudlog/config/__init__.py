"""Configuration module for cloudlog.

Available Configurations:
- FormatterConfig: formatting and delivery settings
- CloudTraceConfig: Cloud Trace correlation settings
"""

from cloudlog.config.formatter_config import (
    DEFAULT_FORMATTER_CONFIG,
    TEST_FORMATTER_CONFIG,
    CloudTraceConfig,
    FormatterConfig,
)

__all__ = [
    "CloudTraceConfig",
    "FormatterConfig",
    "DEFAULT_FORMATTER_CONFIG",
    "TEST_FORMATTER_CONFIG",
]
