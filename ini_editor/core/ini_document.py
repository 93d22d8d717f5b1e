"""INI document parsing and canonical serialization.

The accepted dialect is deliberately narrow:

- blank lines and lines whose first non-blank character is ``;`` or ``#``
  are ignored,
- ``[Name]`` switches the current section (entries before any header
  belong to the global section ``""``),
- ``key=value`` splits on the first ``=``; lines without ``=`` or with an
  empty key are dropped silently.

Serialization groups entries by section (case-insensitive, first-seen
order) and is idempotent, but does not preserve comments or spacing.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List

from .models import Entry

logger = logging.getLogger(__name__)

_SECTION_RE = re.compile(r"^\[(.+)\]$")
_COMMENT_PREFIXES = (";", "#")
# Only CR, LF and CRLF end a line; other Unicode breaks stay inside values
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def parse_document(text: str) -> List[Entry]:
    entries: List[Entry] = []
    current_section = ""
    skipped = 0

    for line in _LINE_BREAK_RE.split(text or ""):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(_COMMENT_PREFIXES):
            continue

        header = _SECTION_RE.match(trimmed)
        if header:
            current_section = header.group(1).strip()
            continue

        eq = trimmed.find("=")
        if eq <= 0:
            skipped += 1
            continue

        key = trimmed[:eq].strip()
        value = trimmed[eq + 1:].strip()
        entries.append(Entry(current_section, key, value))

    logger.debug("Parsed %d entries (%d malformed lines dropped)", len(entries), skipped)
    return entries


def serialize_entries(entries: Iterable[Entry]) -> str:
    groups: Dict[str, List[Entry]] = {}
    names: Dict[str, str] = {}

    for entry in entries:
        section = entry.section or ""
        folded = section.lower()
        if folded not in groups:
            groups[folded] = []
            names[folded] = section
        groups[folded].append(entry)

    lines: List[str] = []
    for folded, group in groups.items():
        name = names[folded]
        if name:
            lines.append(f"[{name}]")
        for entry in group:
            lines.append(f"{entry.key}={entry.value or ''}")
        lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
