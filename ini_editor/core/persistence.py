"""Load, timestamped backup and atomic save of INI documents."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..exceptions import BackupExistsError, DocumentNotFoundError, FileOperationError, ValidationError
from .ini_document import parse_document, serialize_entries
from .models import Entry

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

BACKUP_INFIX = ".bak-"
TEMP_SUFFIX = ".tmp"
TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


@dataclass(frozen=True)
class SaveReport:
    path: Path
    backup_path: Optional[Path]
    entry_count: int


def backup_path_for(path: PathLike, moment: datetime) -> Path:
    return Path(f"{path}{BACKUP_INFIX}{moment.strftime(TIMESTAMP_FORMAT)}")


def temp_path_for(path: PathLike) -> Path:
    return Path(f"{path}{TEMP_SUFFIX}")


def _require_path(path: Optional[PathLike]) -> Path:
    raw = str(path or "").strip()
    if not raw:
        raise ValidationError("No file path specified.", field_name="path")
    return Path(raw)


class PersistenceManager:
    """File-system side of the editor.

    ``clock`` supplies the local time used for backup names; at most one
    backup per second can exist for a given file.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def load(self, path: PathLike) -> List[Entry]:
        file_path = _require_path(path)
        if not file_path.is_file():
            raise DocumentNotFoundError(file_path=str(file_path))
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileOperationError(f"Could not read {file_path}: {exc}", str(file_path), "load") from exc
        entries = parse_document(text)
        logger.info("Loaded %d entries from %s", len(entries), file_path)
        return entries

    def backup(self, path: PathLike) -> Path:
        """Copy the file to ``<path>.bak-<YYYYMMDD-HHMMSS>``, never overwriting."""
        file_path = _require_path(path)
        if not file_path.is_file():
            raise DocumentNotFoundError(file_path=str(file_path))

        target = backup_path_for(file_path, self._clock())
        try:
            with file_path.open("rb") as source, target.open("xb") as handle:
                shutil.copyfileobj(source, handle)
            shutil.copystat(file_path, target)
        except FileExistsError as exc:
            raise BackupExistsError(
                f"Backup already exists: {target.name}", str(target)
            ) from exc
        except OSError as exc:
            raise FileOperationError(f"Backup failed: {exc}", str(target), "backup") from exc

        logger.info("Backup created: %s", target)
        return target

    def save(self, path: PathLike, entries: Iterable[Entry]) -> SaveReport:
        file_path = _require_path(path)
        entries = list(entries)

        parent = file_path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileOperationError(f"Could not create folder {parent}: {exc}", str(parent), "mkdir") from exc

        backup_path: Optional[Path] = None
        if file_path.exists():
            backup_path = self.backup(file_path)

        temp_path = temp_path_for(file_path)
        content = serialize_entries(entries)
        try:
            # utf-8 codec never writes a BOM
            temp_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FileOperationError(f"Could not write {temp_path}: {exc}", str(temp_path), "write") from exc

        try:
            os.replace(temp_path, file_path)
        except OSError as exc:
            raise FileOperationError(f"Could not replace {file_path}: {exc}", str(file_path), "replace") from exc

        logger.info("Saved %d entries to %s", len(entries), file_path)
        return SaveReport(path=file_path, backup_path=backup_path, entry_count=len(entries))
