"""Config I/O utilities."""

from __future__ import annotations

import json
import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .models import EditorSettings, validate_settings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "INI_EDITOR_CONFIG"

PathLike = Union[str, Path]


def get_config_path() -> str:
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return override
    return os.path.join(os.path.expanduser("~"), ".ini_editor", "config.json")


def load_config(config_path: Optional[PathLike] = None) -> Dict[str, Any]:
    if config_path is None:
        config_path = get_config_path()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Config could not be read from %s: %s", config_path, exc)
        return {}

    if not isinstance(data, dict):
        return {}
    try:
        validate_settings(data)
    except PydanticValidationError as exc:
        logger.warning("Config validation failed: %s", exc)
    return data


def load_settings(config_path: Optional[PathLike] = None) -> EditorSettings:
    """Validated settings; invalid fields fall back to defaults, the rest is kept."""
    data = load_config(config_path)
    try:
        return validate_settings(data)
    except PydanticValidationError as exc:
        invalid = {err["loc"][0] for err in exc.errors() if err.get("loc")}
        logger.warning("Config fields reset to defaults: %s", ", ".join(sorted(map(str, invalid))))
        cleaned = {key: value for key, value in data.items() if key not in invalid}
    try:
        return validate_settings(cleaned)
    except PydanticValidationError:
        return EditorSettings()


def save_config(config_data: Union[Dict[str, Any], EditorSettings], config_path: Optional[PathLike] = None) -> bool:
    if config_path is None:
        config_path = get_config_path()
    if isinstance(config_data, EditorSettings):
        data = config_data.model_dump()
    else:
        data = dict(config_data or {})
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return True
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Config could not be saved to %s: %s", config_path, exc)
        return False
