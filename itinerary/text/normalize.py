"""Whitespace, line-break and blank-line clean-up.

These helpers know nothing about tokens. They run after substitution and
shape the final document.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

# Control characters and their backslash spellings, mapped to a newline
_LINE_BREAKS = re.compile(r"\v|\f|\r|\\v|\\f|\\r")
_NON_ASCII = re.compile(r"[^\x00-\x7f]+")


def normalize(line: str) -> str:
    """Clean one line after token substitution.

    Trims surrounding whitespace, turns vertical tabs, form feeds and
    carriage returns (raw or written as ``\\v``, ``\\f``, ``\\r``) into
    newlines, then drops every non-ASCII character.
    """
    line = line.strip()
    line = _LINE_BREAKS.sub("\n", line)
    return _NON_ASCII.sub("", line)


def collapse_blank_runs(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines, keeping only the first blank line of each run."""
    previous_blank = False
    for line in lines:
        blank = line == ""
        if blank and previous_blank:
            continue
        previous_blank = blank
        yield line


def reduce_empty_lines(text: str) -> str:
    """Reduce the whole document to single blank-line separators.

    Runs of empty lines become one empty line, and a trailing empty line
    (including the one left by a final newline) is dropped. A document
    without any newline comes back unchanged. Applying the function to
    its own output changes nothing.
    """
    lines = text.split("\n")
    if len(lines) == 1:
        return text

    reduced = list(collapse_blank_runs(lines))
    if reduced and reduced[-1] == "":
        reduced.pop()
    return "\n".join(reduced)
