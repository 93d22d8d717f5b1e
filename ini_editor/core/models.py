"""Entry value type shared by the document, store and preset layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Signature = Tuple[str, str]


@dataclass(frozen=True)
class Entry:
    section: str = ""
    key: str = ""
    value: str = ""

    def signature(self) -> Signature:
        """Case-insensitive (section, key) identity used for upsert and dedupe."""
        return self.section.lower(), self.key.lower()

    def trimmed(self) -> "Entry":
        return Entry(self.section.strip(), self.key.strip(), self.value.strip())

    def matches(self, query: str) -> bool:
        # query is expected lowered and trimmed
        if not query:
            return True
        return (
            query in self.section.lower()
            or query in self.key.lower()
            or query in self.value.lower()
        )

    def as_dict(self) -> dict:
        return {"section": self.section, "key": self.key, "value": self.value}
