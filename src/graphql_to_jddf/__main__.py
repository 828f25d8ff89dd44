"""Module entry point for `python -m graphql_to_jddf`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
