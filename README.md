# baseconvert

`baseconvert` is a small command-line utility that converts decimal integers into another base, from 2 up to 36. The default base is 16.

## Installation

    pip install .

This installs the `convert` command.

## Usage

    convert [-b BASE] [-r START FINISH]
    convert [--help]

Options:

- `-b BASE` sets the base to convert to. It must be between 2 and 36.
- `-r START FINISH` converts every integer from START to FINISH inclusive. It must be the last option given.
- `--help` prints the help message and exits. It is recognised only as the first argument.

Without a range, `convert` reads whitespace-separated integers from standard input until the input ends. It prints each number converted, one per line.

If a token is not an integer, the numbers before it are still printed. The program then writes `Error: Non-long-int token encountered.` to standard error and exits with status 1.

With a range:

- Nothing is printed when START and FINISH are equal.
- Nothing is printed when FINISH is smaller than START.

Invalid options or values print a usage message to standard error and exit with status 1.

## Digits

Digits 0 to 9 are written as themselves. Upper-case letters (`A` to `Z`) are used for digit values above 9 only in base 16 and base 36. In any other base above 10, digits with a value of 10 or more are left out of the output.

Negative numbers are written with a leading `-`.

## Examples

Convert numbers from standard input to hexadecimal:

    $ echo "255 16 0" | convert
    FF
    10
    0

Print the numbers from -3 to 3 in binary:

    $ convert -b 2 -r -3 3
    -11
    -10
    -1
    0
    1
    10
    11

## Library use

The conversion functions can also be called from Python:

    from baseconvert.conversion import to_base, convert_range, convert_stream

    to_base(255, 16)                      # "FF"
    list(convert_range(2, 0, 3))          # ["0", "1", "10", "11"]
    list(convert_stream(16, "255 16"))    # ["FF", "10"]

- `to_base` raises `ValueError` for a base outside 2 to 36.
- `convert_stream` accepts a string or an iterable of string chunks, such as an open file. On a non-integer token it raises `baseconvert.conversion.InvalidTokenError`.
- `convert(base, start, finish, text)` picks between the two. It reads `text` when both `start` and `finish` are 0, and converts the range otherwise.

`baseconvert.params.parse_arguments` turns the arguments that follow the command name into a `Settings` value with `base`, `start` and `finish`. Where the command would stop early, it raises one of these exceptions instead:

- `UsageError` for malformed arguments.
- `HelpRequested` for `--help`. The help text is available as `.text`.
- `NothingToDo` when the range's ends are equal.

`baseconvert.cli.main(argv)` runs the command and returns its exit status.