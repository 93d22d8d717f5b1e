"""Named preset catalog (built-in YAML plus user preset files)."""

from .catalog import (
    CATALOG_ENV_VAR,
    Preset,
    PresetCatalog,
    apply_preset,
    builtin_catalog_path,
    load_catalog_file,
)

__all__ = [
    "CATALOG_ENV_VAR",
    "Preset",
    "PresetCatalog",
    "apply_preset",
    "builtin_catalog_path",
    "load_catalog_file",
]
