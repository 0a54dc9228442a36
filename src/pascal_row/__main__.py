"""Package entry point.

Preferred invocation is via the installed console script:

    pascal-row row 6

For convenience we also support:

    python -m pascal_row row 6
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m pascal_row`."""

    app()


if __name__ == "__main__":
    main()
