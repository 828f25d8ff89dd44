"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "graphql-to-jddf.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Settings template for graphql-to-jddf.
# Every key is optional. Command line options override the values below.

source:
  # Choose at most one introspection source. Without one, standard input is read.
  # file: "introspection.json"
  # endpoint:
  #   url: "https://example.com/graphql"
  #   # Bearer token; prefer token_env over an inline token.
  #   token_env: "GRAPHQL_TOKEN"
  #   timeout_seconds: 30

conversion:
  # List nesting rendered precisely before falling back to the empty schema.
  max_list_depth: 3
  # Also emit definitions for the mutation and subscription root types.
  include_operation_roots: false
  # Also emit definitions for object-like types not reachable from any root.
  include_unreferenced_types: false

output:
  # path: "schema.jddf.json"
  # Use null for compact single-line JSON.
  indent: 2
"""


def build_placeholder_configuration() -> str:
    """Build the commented YAML settings template."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
