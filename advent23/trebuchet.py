"""Calibration values hidden in lines of text, with or without spelled-out digits."""

from __future__ import annotations

import argparse
import sys

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

_PLAIN_TOKENS = {str(n): n for n in range(1, 10)}
_SPELLED_TOKENS = {**_PLAIN_TOKENS, **{word: n for n, word in enumerate(_WORDS, start=1)}}


def calibration_value(line: str) -> int:
    """Combine the first and last ASCII digit of ``line`` into a two-digit number."""
    digits = [int(ch) for ch in line if ch in "0123456789"]
    if not digits:
        raise ValueError(f"no digit in line {line!r}")
    return digits[0] * 10 + digits[-1]


def spelled_calibration_value(line: str) -> int:
    """Like :func:`calibration_value`, but words such as ``one`` count as digits too."""
    firsts = [
        (index, value)
        for token, value in _SPELLED_TOKENS.items()
        if (index := line.find(token)) != -1
    ]
    if not firsts:
        raise ValueError(f"no digit in line {line!r}")
    lasts = [
        (line.rfind(token), value)
        for token, value in _SPELLED_TOKENS.items()
        if token in line
    ]
    return min(firsts)[1] * 10 + max(lasts)[1]


def _line_value(line: str, spelled: bool) -> int:
    return spelled_calibration_value(line) if spelled else calibration_value(line)


def sum_calibration(text: str, spelled: bool = False) -> int:
    """Sum the calibration values of every non-empty line of ``text``."""
    return sum(_line_value(line, spelled) for line in text.splitlines() if line)


def main(argv: list[str] | None = None) -> None:
    """Print the calibration sum of an input file."""
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("file", nargs="?", default=None)
    parser.add_argument("--spelled", action="store_true", help="accept spelled-out digits")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    path = args.file or ("input2.txt" if args.spelled else "input1.txt")
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError:
        print(f"Cannot read '{path}'")
        return

    total = 0
    for line in content.splitlines():
        if line:
            value = _line_value(line, args.spelled)
            print(f"N == {value}")
            total += value
    print(f"Sum == {total}")


if __name__ == "__main__":
    main()