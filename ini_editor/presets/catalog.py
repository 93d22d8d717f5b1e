"""Named preset catalog.

Built-in presets ship as ``builtin_presets.yaml`` next to this module
(override with INI_EDITOR_PRESET_CATALOG). User catalogs may be YAML
files with the same layout or preset JSON files, which become a single
preset named after the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator

from ..core.entry_store import EntryStore
from ..core.models import Entry
from ..core.preset_codec import decode_presets
from ..exceptions import DocumentNotFoundError, FileOperationError

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "INI_EDITOR_PRESET_CATALOG"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class Preset:
    name: str
    entries: Tuple[Entry, ...]
    description: str = ""


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        # INI booleans are written True/False
        return "True" if value else "False"
    return str(value)


class PresetEntryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    section: str = ""
    key: str
    value: str = ""

    @field_validator("section", "key", "value", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> str:
        return _as_text(value)


class PresetModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    description: str = ""
    section: Optional[str] = None
    values: Dict[str, str] = Field(default_factory=dict)
    entries: List[PresetEntryModel] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_values(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {_as_text(k): _as_text(v) for k, v in value.items()}
        return value

    def to_preset(self) -> Preset:
        items: List[Entry] = [Entry(e.section, e.key, e.value) for e in self.entries]
        section = self.section or ""
        items.extend(Entry(section, key, value) for key, value in self.values.items())
        items = [entry for entry in items if entry.key.strip()]
        return Preset(name=self.name.strip(), entries=tuple(items), description=self.description)


def builtin_catalog_path() -> Path:
    override = os.environ.get(CATALOG_ENV_VAR, "").strip()
    if override:
        return Path(override)
    return Path(__file__).resolve().parent / "builtin_presets.yaml"


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise DocumentNotFoundError(f"Preset file not found: {path}", file_path=str(path))
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOperationError(f"Could not read preset file {path}: {exc}", str(path), "read") from exc


def _parse_catalog(raw: Any, source: Path) -> List[Preset]:
    if isinstance(raw, dict):
        items = raw.get("presets") or []
    elif isinstance(raw, list):
        items = raw
    else:
        logger.warning("Preset catalog %s has no presets", source)
        return []

    presets: List[Preset] = []
    for idx, item in enumerate(items):
        try:
            model = PresetModel.model_validate(item)
        except PydanticValidationError as exc:
            logger.warning("Skipping invalid preset #%d in %s: %s", idx, source, exc)
            continue
        presets.append(model.to_preset())
    return presets


def load_catalog_file(path: PathLike) -> List[Preset]:
    file_path = Path(path)
    raw = _read_text(file_path)

    if file_path.suffix.lower() == ".json":
        entries = decode_presets(raw)
        return [Preset(name=file_path.stem, entries=tuple(entries), description=str(file_path))]

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        logger.warning("Preset catalog %s is not valid YAML: %s", file_path, exc)
        return []
    return _parse_catalog(data, file_path)


class PresetCatalog:
    """Ordered name -> preset mapping with case-insensitive lookup."""

    def __init__(self, presets: Optional[Iterable[Preset]] = None) -> None:
        self._presets: Dict[str, Preset] = {}
        for preset in presets or []:
            self.add(preset)

    @classmethod
    def load_default(cls, extra_files: Optional[Iterable[PathLike]] = None) -> "PresetCatalog":
        catalog = cls(load_catalog_file(builtin_catalog_path()))
        for path in extra_files or []:
            try:
                catalog.extend(load_catalog_file(path))
            except FileOperationError as exc:
                logger.warning("Preset file skipped: %s", exc)
        return catalog

    def add(self, preset: Preset) -> None:
        folded = preset.name.lower()
        # same name replaces in place
        self._presets[folded] = preset

    def extend(self, presets: Iterable[Preset]) -> None:
        for preset in presets:
            self.add(preset)

    def names(self) -> List[str]:
        return [preset.name for preset in self._presets.values()]

    def get(self, name: str) -> Preset:
        try:
            return self._presets[(name or "").strip().lower()]
        except KeyError:
            raise KeyError(f"Unknown preset: {name}") from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._presets

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self):
        return iter(list(self._presets.values()))


def apply_preset(store: EntryStore, preset: Union[Preset, Iterable[Entry]]) -> int:
    """Upsert every preset entry into the store; returns the number applied."""
    entries = preset.entries if isinstance(preset, Preset) else list(preset)
    for entry in entries:
        store.upsert(entry.section, entry.key, entry.value)
    return len(entries)
