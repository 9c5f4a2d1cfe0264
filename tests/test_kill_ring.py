from __future__ import annotations

import pytest

from yank_engine.killring import KillRing, PlainTextEntity


def fill(ring: KillRing, *texts: str) -> list[PlainTextEntity]:
    entities = [PlainTextEntity(text) for text in texts]
    for entity in entities:
        ring.push(entity)
    return entities


def test_empty_ring_returns_none() -> None:
    ring = KillRing()

    assert ring.get_top() is None
    assert ring.pop_next() is None
    assert len(ring) == 0


def test_get_top_is_idempotent() -> None:
    ring = KillRing()
    _, newest = fill(ring, "old", "new")

    assert ring.get_top() is newest
    assert ring.get_top() is newest


def test_pop_next_walks_toward_older_entries_and_wraps() -> None:
    ring = KillRing()
    fill(ring, "a", "b", "c")

    seen = [ring.pop_next().as_string() for _ in range(4)]  # type: ignore[union-attr]

    assert seen == ["b", "a", "c", "b"]


def test_get_top_follows_the_read_cursor() -> None:
    ring = KillRing()
    fill(ring, "a", "b")

    ring.pop_next()

    assert ring.get_top().as_string() == "a"  # type: ignore[union-attr]


def test_push_resets_the_read_cursor() -> None:
    ring = KillRing()
    fill(ring, "a", "b", "c")
    ring.pop_next()
    ring.pop_next()

    newest = PlainTextEntity("d")
    ring.push(newest)

    assert ring.get_top() is newest
    assert ring.pop_next().as_string() == "c"  # type: ignore[union-attr]


def test_pop_next_without_wrap_stops_at_oldest() -> None:
    ring = KillRing(wrap=False)
    oldest, _ = fill(ring, "a", "b")

    assert ring.pop_next() is oldest
    assert ring.pop_next() is None
    assert ring.get_top() is oldest


def test_capacity_evicts_oldest_silently() -> None:
    ring = KillRing(capacity=3)
    fill(ring, "first", "second", "third", "fourth")

    popped = [ring.pop_next() for _ in range(10)]
    reachable = {entity.as_string() for entity in popped if entity is not None}

    assert len(ring) == 3
    assert "first" not in reachable
    assert reachable == {"second", "third", "fourth"}


def test_entries_are_most_recent_first() -> None:
    ring = KillRing()
    fill(ring, "a", "b")

    assert [entity.as_string() for entity in ring.entries()] == ["b", "a"]

    ring.clear()
    assert ring.get_top() is None


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        KillRing(capacity=0)
