"""
Persistent detail chain: the default detail store.

A ``DetailChain`` is an immutable, singly linked association list of
(key, value) details. Each node points at the node built before it, so the
head is always the most recent detail and the tail the earliest. Extending a
chain never touches existing nodes: ``push`` returns a new head whose parent
is the old chain, and any number of chains may share the same tail.

Two read models run over the one write-once structure:

- **lookup** walks head to tail and returns the first match, so a later
  detail with the same key shadows earlier ones ("last write wins").
- **render** walks head to tail too, but emits a line for every displayable
  entry, shadowed ones included. Nothing is deduplicated or sorted.

Manifesto:
    - **Immutable:** Frozen, slotted nodes; safe to share across threads
    - **Structural sharing:** Extending is O(1) and copies nothing
    - **Fail fast:** Unhashable keys are rejected when the node is built
    - **Typed keys:** ``1``, ``1.0`` and ``True`` are three different keys

Architecture:
    ::

        from_pairs([(k1, v1), (k2, v2), (k1, v3)])

        head                                   tail
        ┌──────────┐   ┌──────────┐   ┌──────────┐
        │ (k1, v3) │──▶│ (k2, v2) │──▶│ (k1, v1) │──▶ None
        └──────────┘   └──────────┘   └──────────┘

        lookup(k1) -> (v3, True)        render(): v3 line, v2 line, v1 line

Examples:
    >>> chain = DetailChain.from_pairs([("attempt", "1"), ("attempt", "2")])
    >>> chain.lookup("attempt")
    ('2', True)
    >>> chain.lookup("missing")
    (None, False)
    >>> chain.render()
    'attempt : 2\\nattempt : 1\\n'

Performance:
    - **push():** O(1)
    - **lookup():** O(n) worst case, n = number of details
    - **render():** O(n), recomputed on each call (pure)

Guardrails:
    ❌ DON'T: Use lists, dicts or sets as keys
    ✅ DO: Use hashable keys (str, Key, Label, enums, frozen dataclasses)

    ❌ DON'T: Expect render() to drop shadowed entries
    ✅ DO: Use lookup() when only the latest value matters

Tags:
    persistent-list, association-list, immutable, structural-sharing,
    detail-store, errdetails

Doc-Types:
    - API Reference
    - Data Structure Notes
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, NamedTuple

from errdetails.errors import InvalidKeyKindError
from errdetails.render import render_detail


class Detail(NamedTuple):
    """A single (key, value) annotation attached to an error."""

    key: Any
    value: Any = None


def ensure_comparable(key: Any) -> None:
    """Raise InvalidKeyKindError if ``key`` cannot be compared for equality."""
    try:
        hash(key)
    except TypeError as exc:
        raise InvalidKeyKindError(key) from exc


def keys_match(stored: Any, queried: Any) -> bool:
    """Typed key equality: same runtime type and equal values."""
    return type(stored) is type(queried) and (stored is queried or stored == queried)


def as_detail(pair: Any) -> Detail:
    """Normalize a 2-item pair (tuple, list, Detail) into a Detail."""
    if isinstance(pair, Detail):
        return pair
    key, value = pair
    return Detail(key, value)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class DetailChain:
    """
    Immutable node of a detail chain.

    ``head`` is the detail stored in this node, ``None`` for the empty
    chain. ``parent`` is the previously built chain, ``None`` at the tail.
    Build chains with ``from_pairs`` or ``push`` rather than the
    constructor.
    """

    head: Detail | None = None
    parent: DetailChain | None = None

    def __post_init__(self) -> None:
        if self.head is not None:
            ensure_comparable(self.head.key)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Any] = ()) -> DetailChain:
        """Build a chain; the first pair ends up at the tail, the last at the head."""
        chain = EMPTY_CHAIN
        for pair in pairs:
            chain = chain.push(*as_detail(pair))
        return chain

    @property
    def is_empty(self) -> bool:
        return self.head is None

    def push(self, key: Any, value: Any = None) -> DetailChain:
        """Return a new chain with ``(key, value)`` as its head."""
        return DetailChain(Detail(key, value), None if self.is_empty else self)

    def lookup(self, key: Any) -> tuple[Any, bool]:
        """Return ``(value, True)`` for the most recent match, else ``(None, False)``."""
        for detail in self:
            if keys_match(detail.key, key):
                return detail.value, True
        return None, False

    def get(self, key: Any, default: Any = None) -> Any:
        value, found = self.lookup(key)
        return value if found else default

    def render(self) -> str:
        """Render every displayable detail, most recent first, one per line."""
        lines = []
        for detail in self:
            line = render_detail(detail.key, detail.value)
            if line:
                lines.append(line + "\n")
        return "".join(lines)

    def pairs(self) -> list[Detail]:
        """Details in insertion order (tail first)."""
        return list(self)[::-1]

    def __iter__(self) -> Iterator[Detail]:
        node: DetailChain | None = self
        while node is not None and node.head is not None:
            yield node.head
            node = node.parent

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: Any) -> bool:
        return self.lookup(key)[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DetailChain):
            return NotImplemented
        mine, theirs = iter(self), iter(other)
        sentinel = object()
        while True:
            a, b = next(mine, sentinel), next(theirs, sentinel)
            if a is sentinel or b is sentinel:
                return a is b
            if not (keys_match(a.key, b.key) and (a.value is b.value or a.value == b.value)):
                return False

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        inner = ", ".join(f"({d.key!r}, {d.value!r})" for d in self.pairs())
        return f"DetailChain.from_pairs([{inner}])"


EMPTY_CHAIN = DetailChain()


__all__ = [
    "Detail",
    "DetailChain",
    "EMPTY_CHAIN",
    "as_detail",
    "ensure_comparable",
    "keys_match",
]
