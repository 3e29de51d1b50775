"""
pw — a dumb password manager over a plain-text passfile.

Each line of the passfile is `MARKER NAME LINK USERNAME PASSWORD`, where
MARKER is + (current), - (inactive) or * (needs changing).

Usage examples:
    python -m pwfile check ~/.passfile
    python -m pwfile gen
    python -m pwfile get gmail '%U %P'
    python -m pwfile ls mail
"""

import sys

from .cli import build_parser, setup_logging
from .errors import PwError


def main(argv: list[str] | None = None, default_store: str | None = None) -> int:
    parser = build_parser(default_store)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        args.func(args)
    except PwError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted by user.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
