"""Results writing exports."""

from .document_writer import render_document, write_document

__all__ = ["render_document", "write_document"]
