"""Entry point for the ``convert`` command."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from baseconvert.conversion import InvalidTokenError, convert
from baseconvert.params import HelpRequested, NothingToDo, UsageError, parse_arguments


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_arguments(argv)
    except HelpRequested as request:
        print(request.text)
        return 0
    except UsageError as error:
        print(error, file=sys.stderr)
        return 1
    except NothingToDo:
        return 0

    try:
        for line in convert(settings.base, settings.start, settings.finish, sys.stdin):
            print(line, flush=True)
    except InvalidTokenError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())