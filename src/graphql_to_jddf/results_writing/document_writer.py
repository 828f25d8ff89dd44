"""JSON rendering of emitted JDDF documents."""

from __future__ import annotations

import json
from pathlib import Path

from graphql_to_jddf.schema_emission.document_assembly import JddfDocument


def render_document(document: JddfDocument, indent: int | None = 2) -> str:
    """Serialize the document; `indent=None` yields compact single-line JSON."""
    if indent is None:
        return json.dumps(document.to_json_dict(), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(document.to_json_dict(), indent=indent, ensure_ascii=False)


def write_document(document: JddfDocument, output_path: Path | str, indent: int | None = 2) -> Path:
    """Write the rendered document followed by a newline and return the resolved path."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_document(document, indent) + "\n", encoding="utf-8")
    return destination.resolve()
