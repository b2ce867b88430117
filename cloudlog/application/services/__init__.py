"""Application services for cloudlog."""

from cloudlog.application.services.document_assembler import (
    DocumentAssembler,
    format_timestamp,
)

__all__: list[str] = ["DocumentAssembler", "format_timestamp"]
