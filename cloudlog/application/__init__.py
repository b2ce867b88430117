"""Application layer for cloudlog: ports and the document assembler."""
