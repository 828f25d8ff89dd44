"""Translate GraphQL introspection results into JDDF schemas."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
