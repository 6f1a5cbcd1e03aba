"""Command-line argument validation for the base converter."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

MINIMUM_BASE = 2
MAXIMUM_BASE = 36
DEFAULT_BASE = 16

USAGE = (
    "Usage: convert [-b BASE] [-r START FINISH]\n"
    "       1 < BASE < 37\n"
    "       START and FINISH are long integers"
)

_HELP_LINES = (
    "convert - Number Base Conversion Utility",
    "Version: v1.0.0",
    "",
    "Convert is a command line utility that allows users to perform decimal",
    "conversion to other bases. The user can specify a certain base from 2 to",
    "36 to convert to binary, octal, hexidecimal, etc. Users can also include",
    "an optional range of numbers to convert, or simply enter numbers as input.",
    "",
    "The defualt base for conversion is 16.",
    "If no range is specified, the program will take user input until EOF.",
    "If a range is specified, it will convert each number from START to FINISH.",
    "",
    "Usage:",
    "    convert [-b BASE] [-r START FINISH]",
    "    convert [--help]",
    "",
    "Arguments:",
    "    -b BASE            The base for number conversion (between 2 and 36).",
    "    -r START FINISH    Specifies a range of numbers to be converted.",
    "    --help             Displays this help message.",
    "",
    "Usage Examples:",
    "    convert -b 16           Converts user input to base 16.",
    "    convert -b 2 -r -3 3    Converts numbers from -3 to 3 into binary.",
)

_SPACE = "[ \t\n\v\f\r]"
_LONG_LITERAL = re.compile(f"{_SPACE}*[+-]?[0-9]+")
_LEADING_LONG = re.compile(f"{_SPACE}*([+-]?[0-9]+)")


class UsageError(Exception):
    """The arguments do not follow the documented usage."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


class HelpRequested(Exception):
    """The user asked for the help text."""

    def __init__(self, text: str | None = None) -> None:
        super().__init__(text if text is not None else help_message())

    @property
    def text(self) -> str:
        return str(self)


class NothingToDo(Exception):
    """The requested range is empty because START equals FINISH."""


@dataclass(frozen=True)
class Settings:
    """Validated conversion settings."""

    base: int = DEFAULT_BASE
    start: int = 0
    finish: int = 0


def help_message() -> str:
    """Return the full help text."""
    return "\n".join(_HELP_LINES)


def is_long_literal(text: str) -> bool:
    """Return True if the whole of ``text`` reads as a base-10 integer.

    Leading whitespace and a sign are allowed; an empty string is accepted.
    """
    return text == "" or _LONG_LITERAL.fullmatch(text) is not None


def _leading_long(text: str) -> int:
    """Read the integer at the start of ``text``, or 0 if there is none."""
    match = _LEADING_LONG.match(text)
    return int(match.group(1)) if match else 0


def _check_trailing(args: Sequence[str]) -> None:
    # After a leading -b, the only thing allowed to follow the base is -r START FINISH.
    if len(args) > 2 and args[0][1:2] == "b":
        if args[2][1:2] != "r" or len(args) != 5:
            raise UsageError()


def parse_arguments(argv: Sequence[str]) -> Settings:
    """Validate the arguments that follow the program name.

    Raises HelpRequested for ``--help``, UsageError for malformed
    arguments and NothingToDo when the range's ends are equal.
    """
    args = list(argv)
    if not args:
        return Settings()
    if args[0] == "--help":
        raise HelpRequested()

    base, start, finish = DEFAULT_BASE, 0, 0
    pos = 0
    while pos < len(args):
        arg = args[pos]
        if arg.startswith("-"):
            flag = arg[1:2]
            if flag == "b":
                pos += 1
                if pos >= len(args):
                    raise UsageError()
                value = _leading_long(args[pos])
                if not MINIMUM_BASE <= value <= MAXIMUM_BASE:
                    raise UsageError()
                base, start, finish = value, 0, 0
            elif flag == "r":
                if len(args) != pos + 3 or not is_long_literal(args[pos + 1]):
                    raise UsageError()
                start = _leading_long(args[pos + 1])
                finish = _leading_long(args[pos + 2])
                pos += 2
                if start == finish:
                    raise NothingToDo()
            else:
                raise UsageError()
        _check_trailing(args)
        pos += 1
    return Settings(base, start, finish)