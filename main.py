"""CLI entry point for linting SQL scripts against DBA house rules.

Equivalent to the ``sqldbalint`` console script and ``python -m sqldbalint``.
"""

from sqldbalint.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
