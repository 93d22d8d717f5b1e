#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
INI Preset Editor

Edits sectioned key/value configuration files, applies reusable presets
and saves with a timestamped backup plus an atomic replace.
"""

from .version import __version__
from .core import (
    Entry,
    EntryStore,
    PersistenceManager,
    SaveReport,
    decode_presets,
    encode_presets,
    parse_document,
    serialize_entries,
)
from .app import EditorSession
from .presets import Preset, PresetCatalog, apply_preset

__all__ = [
    '__version__',
    'EditorSession',
    'Entry',
    'EntryStore',
    'PersistenceManager',
    'Preset',
    'PresetCatalog',
    'SaveReport',
    'apply_preset',
    'decode_presets',
    'encode_presets',
    'parse_document',
    'serialize_entries',
]
