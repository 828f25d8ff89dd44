"""Introspection document acquisition: standard input, local files and endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TextIO

import requests

from graphql_to_jddf.configuration.runtime_settings import EndpointSettings

_LOGGER = logging.getLogger(__name__)

# ofType is requested eight levels deep; deeper chains arrive truncated.
INTROSPECTION_QUERY = """
query IntrospectionQuery {
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types {
      ...FullType
    }
  }
}

fragment FullType on __Type {
  kind
  name
  fields(includeDeprecated: true) {
    name
    type {
      ...TypeRef
    }
  }
  inputFields {
    name
    type {
      ...TypeRef
    }
  }
  interfaces {
    ...TypeRef
  }
  enumValues(includeDeprecated: true) {
    name
  }
  possibleTypes {
    ...TypeRef
  }
}

fragment TypeRef on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
            ofType {
              kind
              name
              ofType {
                kind
                name
              }
            }
          }
        }
      }
    }
  }
}
"""


class IntrospectionSourceError(Exception):
    """Raised when the introspection document cannot be obtained."""


def read_introspection_text(stream: TextIO) -> str:
    """Read the whole introspection document from an open text stream."""
    try:
        return stream.read()
    except OSError as exc:
        raise IntrospectionSourceError(f"Failed to read introspection input: {exc}") from exc


def load_introspection_file(path: Path | str) -> str:
    """Read an introspection document stored on disk."""
    source_path = Path(path)
    if not source_path.exists():
        raise IntrospectionSourceError(f"Introspection file not found: {source_path}")
    try:
        return source_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise IntrospectionSourceError(f"Failed to read {source_path}: {exc}") from exc


def fetch_introspection(settings: EndpointSettings) -> Any:
    """POST the standard introspection query and return the decoded JSON body.

    Args:
      settings: Endpoint URL, optional bearer token and request timeout.

    Returns:
      The decoded response body. Shape validation is left to the document reader.

    Raises:
      IntrospectionSourceError: On transport failures, non-2xx statuses or a body
        that is not JSON.
    """
    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if settings.token:
        headers["Authorization"] = f"Bearer {settings.token}"

    _LOGGER.debug("Requesting introspection from %s", settings.url)
    try:
        response = requests.post(
            settings.url,
            json={"query": INTROSPECTION_QUERY},
            headers=headers,
            timeout=settings.timeout_seconds,
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        raise IntrospectionSourceError(
            f"Introspection request to {settings.url} failed: {exc}"
        ) from exc

    try:
        return response.json()
    except ValueError as exc:
        raise IntrospectionSourceError(
            f"Introspection response from {settings.url} is not JSON: {exc}"
        ) from exc
