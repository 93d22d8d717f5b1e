"""Editing session: one document, one store, one loaded path.

Front ends (CLI, GUI adapters) drive this object instead of keeping
their own "current file" state. Every user-facing operation returns a
``Result`` and updates ``status`` with the message a status bar shows.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..core.entry_store import EntryStore
from ..core.models import Entry
from ..core.persistence import PersistenceManager, SaveReport
from ..core.preset_codec import decode_presets, encode_presets
from ..exceptions import DocumentNotFoundError, FileOperationError, ValidationError
from ..presets.catalog import Preset, apply_preset
from ..utils.result import Err, Ok, Result, capture, error_message, is_err, unwrap

logger = logging.getLogger(__name__)

READY_STATUS = "Ready"


class EditorSession:
    def __init__(
        self,
        persistence: Optional[PersistenceManager] = None,
        store: Optional[EntryStore] = None,
    ) -> None:
        self.persistence = persistence or PersistenceManager()
        self.store = store or EntryStore()
        self.loaded_path = ""
        self.status = READY_STATUS

    def _fail(self, result: Err, prefix: str) -> Err:
        self.status = f"{prefix}: {error_message(result)}"
        logger.warning(self.status)
        return result

    # -- document ----------------------------------------------------------------------

    def load(self, path: str) -> Result[int]:
        candidate = str(path or "").strip()
        if not candidate or not Path(candidate).is_file():
            return self._fail(Err(DocumentNotFoundError(file_path=candidate or None)), "Load failed")

        result = capture(self.persistence.load, candidate)
        if is_err(result):
            return self._fail(result, "Load failed")

        entries = unwrap(result)
        self.store.load(entries)
        self.loaded_path = candidate
        self.status = f"Loaded {len(entries)} entries from file."
        return Ok(len(entries))

    def save(self, path: str = "") -> Result[SaveReport]:
        if not self.loaded_path:
            guess = str(path or "").strip()
            if not guess:
                return self._fail(Err(ValidationError("No file path specified.", field_name="path")), "Save failed")
            self.loaded_path = guess

        entries = self.store.enumerate()
        result = capture(self.persistence.save, self.loaded_path, entries)
        if is_err(result):
            return self._fail(result, "Save failed")

        report = unwrap(result)
        backup_name = report.backup_path.name if report.backup_path else "none"
        self.status = f"Saved {report.entry_count} entries. Backup: {backup_name}"
        return result

    def backup(self) -> Result[Path]:
        if not self.loaded_path or not Path(self.loaded_path).is_file():
            return self._fail(Err(ValidationError("Load a file first.", field_name="path")), "Backup failed")

        result = capture(self.persistence.backup, self.loaded_path)
        if is_err(result):
            return self._fail(result, "Backup failed")

        self.status = f"Backup created: {unwrap(result).name}"
        return result

    # -- presets -----------------------------------------------------------------------

    def apply_entries(self, entries: Iterable[Entry]) -> int:
        applied = apply_preset(self.store, entries)
        self.status = "Preset applied (not saved yet)."
        return applied

    def apply_preset(self, preset: Preset) -> int:
        applied = apply_preset(self.store, preset)
        self.status = "Preset applied (not saved yet)."
        logger.debug("Applied preset %r (%d entries)", preset.name, applied)
        return applied

    def import_preset_file(self, path: str) -> Result[int]:
        file_path = Path(str(path or "").strip())
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            error = FileOperationError(f"Failed to import: {exc}", str(file_path), "read")
            return self._fail(Err(error), "Import failed")

        entries = decode_presets(text)
        if not entries:
            self.status = "No entries found in JSON."
            return Ok(0)

        self.apply_entries(entries)
        self.status = f"Imported {len(entries)} entries."
        return Ok(len(entries))

    def export_preset_file(self, path: str) -> Result[int]:
        file_path = Path(str(path or "").strip())
        entries = self.store.enumerate()
        try:
            file_path.write_text(encode_presets(entries), encoding="utf-8")
        except OSError as exc:
            error = FileOperationError(f"Failed to export: {exc}", str(file_path), "write")
            return self._fail(Err(error), "Export failed")

        self.status = "Exported current entries to JSON."
        return Ok(len(entries))

    # -- tools -------------------------------------------------------------------------

    def normalize(self) -> int:
        removed = self.store.normalize()
        self.status = f"Normalized. Removed {removed} duplicate rows."
        return removed

    def visible_rows(self, query: Optional[str]) -> List[Tuple[int, Entry]]:
        return self.store.filter(query)
