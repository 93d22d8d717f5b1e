from __future__ import annotations

from typing import Any, Dict, List, Optional, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_RECENT_FILES = 10


class _BaseConfigModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class EditorSettings(_BaseConfigModel):
    last_path: str = ""
    log_level: str = "INFO"
    log_json: bool = False
    log_dir: Optional[str] = None
    file_logging: bool = False
    preset_files: List[str] = Field(default_factory=list)
    recent_files: List[str] = Field(default_factory=list)
    max_recent: int = Field(default=MAX_RECENT_FILES, ge=1)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = str(value or "INFO").strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


def validate_settings(payload: Dict[str, Any]) -> EditorSettings:
    return cast(EditorSettings, EditorSettings.model_validate(payload or {}))


def remember_recent(settings: EditorSettings, path: str) -> EditorSettings:
    """Move ``path`` to the front of the recent list and record it as last path."""
    value = str(path or "").strip()
    if not value:
        return settings
    recent = [item for item in settings.recent_files if item != value]
    recent.insert(0, value)
    settings.recent_files = recent[: settings.max_recent]
    settings.last_path = value
    return settings
