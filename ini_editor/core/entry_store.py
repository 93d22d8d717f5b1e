"""Editable ordered collection of entries backing a table-style editor."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .models import Entry, Signature

logger = logging.getLogger(__name__)


class EntryStore:
    """Ordered entry rows plus an optional uncommitted "new row" draft.

    Rows are kept exactly as edited (untrimmed, duplicates allowed).
    The draft mirrors the blank row an editor shows at the bottom of a
    grid; it is never part of lookups, normalization or enumeration
    until committed.
    """

    def __init__(self, entries: Optional[Iterable[Entry]] = None) -> None:
        self._rows: List[Entry] = list(entries or [])
        self._draft: Optional[Entry] = None

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._rows))

    def __getitem__(self, index: int) -> Entry:
        return self._rows[index]

    @property
    def rows(self) -> List[Entry]:
        return list(self._rows)

    @property
    def draft(self) -> Optional[Entry]:
        return self._draft

    # -- wholesale / structural edits -------------------------------------------------

    def load(self, entries: Iterable[Entry]) -> None:
        self._rows = list(entries)
        self._draft = None

    def clear(self) -> None:
        self.load([])

    def add_row(self, section: str = "", key: str = "", value: str = "") -> int:
        self._rows.append(Entry(section, key, value))
        return len(self._rows) - 1

    def set_row(self, index: int, entry: Entry) -> None:
        self._rows[index] = entry

    def update_cell(self, index: int, field: str, text: str) -> Entry:
        if field not in ("section", "key", "value"):
            raise KeyError(field)
        current = self._rows[index]
        values = current.as_dict()
        values[field] = text
        updated = Entry(**values)
        self._rows[index] = updated
        return updated

    def remove(self, index: int) -> Entry:
        return self._rows.pop(index)

    def duplicate(self, index: int) -> int:
        source = self._rows[index]
        self._rows.append(Entry(source.section, source.key, source.value))
        return len(self._rows) - 1

    # -- new row draft -----------------------------------------------------------------

    def set_draft(self, section: str = "", key: str = "", value: str = "") -> Entry:
        self._draft = Entry(section, key, value)
        return self._draft

    def discard_draft(self) -> None:
        self._draft = None

    def commit_draft(self) -> Optional[int]:
        if self._draft is None:
            return None
        self._rows.append(self._draft)
        self._draft = None
        return len(self._rows) - 1

    # -- semantic operations -----------------------------------------------------------

    def find(self, section: str, key: str) -> Optional[int]:
        target = ((section or "").lower(), (key or "").lower())
        for index, entry in enumerate(self._rows):
            if entry.signature() == target:
                return index
        return None

    def upsert(self, section: str, key: str, value: str) -> int:
        """Replace the value of the first matching row or append a new one."""
        index = self.find(section, key)
        if index is not None:
            current = self._rows[index]
            self._rows[index] = Entry(current.section, current.key, value)
            return index
        self._rows.append(Entry(section, key, value))
        return len(self._rows) - 1

    def normalize(self) -> int:
        """Trim every row and drop repeated section/key pairs, keeping the first.

        Returns the number of rows removed.
        """
        seen: Set[Signature] = set()
        kept: List[Entry] = []
        removed = 0
        for entry in self._rows:
            entry = entry.trimmed()
            signature = entry.signature()
            if signature in seen:
                removed += 1
                continue
            seen.add(signature)
            kept.append(entry)
        self._rows = kept
        if removed:
            logger.debug("Normalize removed %d duplicate rows", removed)
        return removed

    def filter(self, query: Optional[str]) -> List[Tuple[int, Entry]]:
        """Return (index, entry) for rows matching the query; never mutates."""
        needle = (query or "").strip().lower()
        return [
            (index, entry)
            for index, entry in enumerate(self._rows)
            if entry.matches(needle)
        ]

    def enumerate(self) -> List[Entry]:
        """Committed rows with a usable section and key, ready to save or export."""
        result: List[Entry] = []
        for entry in self._rows:
            section = (entry.section or "").strip()
            key = (entry.key or "").strip()
            if not section or not key:
                continue
            result.append(Entry(section, key, entry.value or ""))
        return result
