"""
Passfile entries.

One entry per line:

    MARKER NAME LINK USERNAME PASSWORD [anything else is ignored]

MARKER is "+" (current), "-" (inactive) or "*" (needs changing).
Blank lines and lines starting with "#" are skipped.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .errors import (InvalidMarker, MissingLink, MissingMarker, MissingName,
                     MissingPassword, MissingUsername)


class Status(enum.Enum):
    ACTIVE = "+"
    INACTIVE = "-"
    PENDING_CHANGE = "*"


@dataclass(frozen=True)
class Entry:
    status: Status
    name: str
    link: str
    username: str
    password: str = field(repr=False)
    line: int = 0


# Field order on a line, with the error raised when the field is absent.
FIELDS = (
    ("name", MissingName),
    ("link", MissingLink),
    ("username", MissingUsername),
    ("password", MissingPassword),
)


def parse_entry(line: int, tokens: Sequence[str]) -> Entry:
    if not tokens:
        raise MissingMarker(line)
    try:
        status = Status(tokens[0])
    except ValueError:
        raise InvalidMarker(line, tokens[0]) from None

    values = {}
    for pos, (name, missing) in enumerate(FIELDS, start=1):
        if pos >= len(tokens):
            raise missing(line)
        values[name] = tokens[pos]
    return Entry(status=status, line=line, **values)


def is_skipped(text: str) -> bool:
    stripped = text.strip()
    return not stripped or stripped.startswith("#")


def parse(data: str) -> Iterator[Entry]:
    # Only "\n" ends a line; a trailing "\r" is whitespace to split().
    # Line numbers are 1-based and count skipped lines too.
    for num, text in enumerate(data.split("\n"), start=1):
        if is_skipped(text):
            continue
        yield parse_entry(num, text.split())
