r"""Hierarchical numbering for navigation entries.

Examples are numbered ``1.``, ``2.``... and their subexamples ``1.1``,
``1.2``... Two counters are threaded through a single pass over the entries in
document order; section dividers and plain links leave both counters alone and
receive an empty label.

Example
-------
>>> from example_browser.numbering import NavEntry, NavKind, labels
>>> entries = [
...     NavEntry(NavKind.EXAMPLE, order=0, title="Counter"),
...     NavEntry(NavKind.SUBEXAMPLE, order=1, title="Isomorphic"),
... ]
>>> labels(entries)
['1. ', '1.1 ']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import operator
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class NavKind(enum.StrEnum):
    """Kinds of navigation entry supplied by the host."""

    EXAMPLE = "example"
    SUBEXAMPLE = "subexample"
    SECTION = "section"
    PLAIN = "link"


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """One immutable navigation item.

    Attributes
    ----------
    kind : NavKind
        Whether the entry is an example, a subexample, a section divider, or a
        plain link.
    order : int
        Position of the entry in document order.
    title : str
        Visible link text.
    href : str or None
        Link target; section dividers usually have none.
    is_current : bool
        True for the entry describing the page currently shown.
    """

    kind: NavKind
    order: int
    title: str = ""
    href: str | None = None
    is_current: bool = False


@dc.dataclass(frozen=True, slots=True)
class CounterState:
    """Example and subexample counters for one traversal."""

    example_count: int = 0
    subexample_count: int = 0

    def advance(self, kind: NavKind) -> tuple[CounterState, str]:
        """Return the state after visiting an entry of ``kind`` and its label."""
        match kind:
            case NavKind.EXAMPLE:
                state = CounterState(self.example_count + 1, 0)
                return state, f"{state.example_count}. "
            case NavKind.SUBEXAMPLE:
                state = CounterState(self.example_count, self.subexample_count + 1)
                return state, f"{state.example_count}.{state.subexample_count} "
            case _:
                return self, ""


def _document_order(entries: cabc.Iterable[NavEntry]) -> list[NavEntry]:
    # sorted() is stable, so equal ``order`` values keep sequence order.
    return sorted(entries, key=operator.attrgetter("order"))


def label_pairs(entries: cabc.Iterable[NavEntry]) -> list[tuple[NavEntry, str]]:
    """Return ``(entry, label)`` pairs in document order, one per entry.

    Parameters
    ----------
    entries : Iterable[NavEntry]
        Navigation entries; traversed by ``order``.

    Returns
    -------
    list[tuple[NavEntry, str]]
        Fresh list pairing every entry with its label. Sections and plain
        links pair with ``""``. A subexample seen before any example is
        labelled ``"0.<n> "``; the input is never rejected, and equal entries
        each keep their own pair.
    """
    state = CounterState()
    pairs: list[tuple[NavEntry, str]] = []
    for entry in _document_order(entries):
        state, label = state.advance(entry.kind)
        pairs.append((entry, label))
    return pairs


def label_entries(entries: cabc.Iterable[NavEntry]) -> dict[NavEntry, str]:
    """Compute the display label of every entry as a mapping.

    Parameters
    ----------
    entries : Iterable[NavEntry]
        Navigation entries; traversed by ``order``.

    Returns
    -------
    dict[NavEntry, str]
        Fresh mapping from entry to label, in document order.

    Raises
    ------
    ValueError
        If two entries compare equal; a mapping cannot keep both labels. Use
        :func:`label_pairs` for such input.
    """
    result: dict[NavEntry, str] = {}
    for entry, label in label_pairs(entries):
        if entry in result:
            msg = f"Duplicate navigation entry {entry!r} cannot be keyed by entry."
            raise ValueError(msg)
        result[entry] = label
    return result


def labels(entries: cabc.Iterable[NavEntry]) -> list[str]:
    """Return one label per entry as a list in document order."""
    return [label for _, label in label_pairs(entries)]


__all__ = [
    "CounterState",
    "NavEntry",
    "NavKind",
    "label_entries",
    "label_pairs",
    "labels",
]
