"""Tests for pwfile.query — tally, exact lookup and search."""

import pytest

from pwfile.entry import parse
from pwfile.errors import AmbiguousMatch, MissingLink, MissingPassword, NoMatches
from pwfile.query import Tally, get_entry, search, tally

STORE = """\
+ Alice   site-a  alice  pa
- alice2  site-b  alice  pb
* Malice  site-c  mal    pc
+ bob     site-d  bob    pd
# + carol site-e carol pe
+ dup     site-f  one    pf
+ dup     site-g  two    pg
- only-inactive x y z
* only-pending  x y z
"""


def entries(text=STORE):
    return parse(text)


class TestTally:
    def test_counts_every_status(self):
        assert tally(entries()) == Tally(active=4, inactive=2, pending_change=2)

    def test_sums_to_entry_lines(self):
        counts = tally(entries())
        lines = [l for l in STORE.splitlines() if l.strip() and not l.strip().startswith("#")]
        assert sum(counts) == len(lines)

    def test_empty(self):
        assert tally(entries("")) == (0, 0, 0)

    def test_malformed_line_aborts(self):
        with pytest.raises(MissingPassword):
            tally(entries("+ a b c d\n- a b c\n"))


class TestGetEntry:
    def test_exact_match(self):
        found = get_entry(entries(), "bob")
        assert (found.link, found.username, found.password) == ("site-d", "bob", "pd")

    def test_case_sensitive(self):
        with pytest.raises(NoMatches):
            get_entry(entries(), "alice")

    def test_no_substring_match(self):
        with pytest.raises(NoMatches) as exc:
            get_entry(entries(), "bo")
        assert exc.value.query == "bo"
        assert str(exc.value) == "No matches found for bo"

    def test_ambiguous(self):
        with pytest.raises(AmbiguousMatch) as exc:
            get_entry(entries(), "dup")
        assert str(exc.value) == "Found more than 1 match for dup"

    def test_inactive_and_pending_ignored(self):
        with pytest.raises(NoMatches):
            get_entry(entries(), "only-inactive")
        with pytest.raises(NoMatches):
            get_entry(entries(), "only-pending")

    def test_inactive_duplicate_not_ambiguous(self):
        data = "+ x l u p1\n- x l u p2\n* x l u p3\n"
        assert get_entry(entries(data), "x").password == "p1"

    def test_malformed_line_after_match_aborts(self):
        with pytest.raises(MissingPassword):
            get_entry(entries("+ bob l u p\n+ later l u\n"), "bob")

    def test_second_match_stops_before_malformed_line(self):
        data = "+ dup l u p\n+ dup l u q\n+ broken\n"
        with pytest.raises(AmbiguousMatch):
            get_entry(entries(data), "dup")

    def test_malformed_line_before_second_match_aborts(self):
        data = "+ dup l u p\n+ broken\n+ dup l u q\n"
        with pytest.raises(MissingLink):
            get_entry(entries(data), "dup")


class TestSearch:
    def test_case_insensitive_substring(self):
        assert [e.name for e in search(entries(), "al")] == ["Alice"]

    def test_upper_case_query(self):
        assert [e.name for e in search(entries(), "ALI")] == ["Alice"]

    def test_empty_query_matches_all_active(self):
        names = [e.name for e in search(entries(), "")]
        assert names == ["Alice", "bob", "dup", "dup"]

    def test_no_results(self):
        assert list(search(entries(), "nothing")) == []

    def test_source_order(self):
        data = "+ zeta l u p\n+ alpha-z l u p\n+ mid-z l u p\n"
        assert [e.name for e in search(entries(data), "z")] == ["zeta", "alpha-z", "mid-z"]

    def test_streams_matches_before_malformed_line(self):
        results = search(entries("+ alice l u p\n+ broken l u\n"), "al")
        assert next(results).name == "alice"
        with pytest.raises(MissingPassword):
            next(results)

    def test_lazy(self):
        results = search(entries("+ a l u p\n"), "a")
        assert not isinstance(results, list)
        assert [e.name for e in results] == ["a"]
