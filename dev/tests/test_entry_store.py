from __future__ import annotations

import pytest

from ini_editor.core.entry_store import EntryStore
from ini_editor.core.models import Entry


def _store(*rows):
    return EntryStore(Entry(*row) for row in rows)


def test_load_replaces_contents_in_order():
    store = _store(("Old", "k", "v"))
    store.set_draft("Draft", "k", "v")

    store.load([Entry("A", "x", "1"), Entry("B", "y", "2")])

    assert store.rows == [Entry("A", "x", "1"), Entry("B", "y", "2")]
    assert store.draft is None


def test_upsert_is_case_insensitive_on_section_and_key():
    store = EntryStore()

    store.upsert("Foo", "Bar", "v")
    store.upsert("foo", "bar", "w")

    assert store.rows == [Entry("Foo", "Bar", "w")]


def test_upsert_updates_first_match_only():
    store = _store(("S", "k", "1"), ("S", "k", "2"))

    index = store.upsert("s", "K", "new")

    assert index == 0
    assert store.rows == [Entry("S", "k", "new"), Entry("S", "k", "2")]


def test_upsert_appends_when_missing():
    store = _store(("S", "a", "1"))

    index = store.upsert("T", "a", "2")

    assert index == 1
    assert store[1] == Entry("T", "a", "2")


def test_upsert_ignores_draft_row():
    store = EntryStore()
    store.set_draft("S", "k", "draft")

    store.upsert("S", "k", "real")

    assert store.rows == [Entry("S", "k", "real")]
    assert store.draft == Entry("S", "k", "draft")


def test_repeated_upsert_sequence_is_idempotent():
    preset = [("S", "a", "1"), ("S", "b", "2")]
    store = _store(("S", "a", "0"))

    for _ in range(3):
        for section, key, value in preset:
            store.upsert(section, key, value)

    assert store.rows == [Entry("S", "a", "1"), Entry("S", "b", "2")]


def test_remove_and_duplicate():
    store = _store(("A", "x", "1"), ("B", "y", "2"), ("C", "z", "3"))

    new_index = store.duplicate(0)
    removed = store.remove(1)

    assert new_index == 3
    assert removed == Entry("B", "y", "2")
    assert store.rows == [Entry("A", "x", "1"), Entry("C", "z", "3"), Entry("A", "x", "1")]


def test_remove_out_of_range_raises():
    with pytest.raises(IndexError):
        EntryStore().remove(0)


def test_update_cell_and_commit_draft():
    store = EntryStore()
    store.add_row()
    store.update_cell(0, "section", "S")
    store.update_cell(0, "key", "k")
    store.set_draft("D", "dk", "dv")

    assert store.commit_draft() == 1
    assert store.rows == [Entry("S", "k", ""), Entry("D", "dk", "dv")]
    assert store.commit_draft() is None

    with pytest.raises(KeyError):
        store.update_cell(0, "comment", "x")


def test_normalize_trims_and_keeps_first_occurrence():
    store = _store(
        (" S ", " a ", " 1 "),
        ("s", "A", "2"),
        ("S", "b", "3"),
        ("T", "a", "4"),
        ("S", "a ", "5"),
    )

    removed = store.normalize()

    assert removed == 2
    assert store.rows == [Entry("S", "a", "1"), Entry("S", "b", "3"), Entry("T", "a", "4")]


def test_normalize_twice_removes_nothing_more():
    store = _store(("S", "a", "1"), ("S", "A", "2"), ("S", "b", "3"))

    assert store.normalize() == 1
    before = store.rows
    assert store.normalize() == 0
    assert store.rows == before


def test_filter_matches_any_field_without_mutating():
    store = _store(("Audio", "Volume", "0.5"), ("Video", "Width", "1920"), ("Net", "Port", "7777"))
    snapshot = store.rows

    assert [i for i, _ in store.filter(" audio ")] == [0]
    assert [i for i, _ in store.filter("WIDTH")] == [1]
    assert [i for i, _ in store.filter("77")] == [2]
    assert [i for i, _ in store.filter("")] == [0, 1, 2]
    assert [i for i, _ in store.filter(None)] == [0, 1, 2]
    assert store.filter("nothing") == []
    assert store.rows == snapshot


def test_enumerate_skips_blank_section_or_key_and_draft():
    store = _store(
        (" S ", " k ", " v "),
        ("", "global", "1"),
        ("S", "   ", "2"),
        ("   ", "k", "3"),
    )
    store.set_draft("D", "k", "v")

    assert store.enumerate() == [Entry("S", "k", " v ")]
