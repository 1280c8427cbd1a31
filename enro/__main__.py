#!/usr/bin/env python3
"""
Entry point for ``python -m enro`` and the ``enro`` console script
"""

from collections.abc import Sequence

from enro.cli_main import cli


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the enro CLI and return its exit code instead of exiting.

    Args:
        argv: Arguments to parse; ``sys.argv[1:]`` when omitted
    """
    try:
        cli.main(args=list(argv) if argv is not None else None, prog_name="enro")
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
