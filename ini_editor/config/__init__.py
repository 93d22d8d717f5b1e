"""Application settings: pydantic model plus JSON load/save helpers."""

from .models import EditorSettings, MAX_RECENT_FILES, remember_recent, validate_settings
from .io import CONFIG_ENV_VAR, get_config_path, load_config, load_settings, save_config

__all__ = [
    'CONFIG_ENV_VAR',
    'EditorSettings',
    'MAX_RECENT_FILES',
    'get_config_path',
    'load_config',
    'load_settings',
    'remember_recent',
    'save_config',
    'validate_settings',
]
