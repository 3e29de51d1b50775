from typing import Iterable, Iterator, NamedTuple

from .entry import Entry, Status
from .errors import AmbiguousMatch, NoMatches


class Tally(NamedTuple):
    active: int
    inactive: int
    pending_change: int


def tally(entries: Iterable[Entry]) -> Tally:
    counts = {status: 0 for status in Status}
    for entry in entries:
        counts[entry.status] += 1
    return Tally(counts[Status.ACTIVE], counts[Status.INACTIVE], counts[Status.PENDING_CHANGE])


def get_entry(entries: Iterable[Entry], name: str) -> Entry:
    """Return the single current entry named exactly ``name``.

    Stops at the second match; until then every line is parsed, so a
    malformed line before that point still aborts the lookup.
    """
    matched = None
    for entry in entries:
        if entry.status is not Status.ACTIVE or entry.name != name:
            continue
        if matched is not None:
            raise AmbiguousMatch(name)
        matched = entry
    if matched is None:
        raise NoMatches(name)
    return matched


def search(entries: Iterable[Entry], query: str) -> Iterator[Entry]:
    # Lazy: matches come out as the file is parsed, in file order.
    needle = query.casefold()
    for entry in entries:
        if entry.status is Status.ACTIVE and needle in entry.name.casefold():
            yield entry
