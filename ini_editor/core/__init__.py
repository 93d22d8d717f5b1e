#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
INI Preset Editor - Core Package

Document parsing/serialization, the editable entry store, the preset
codec and crash-safe persistence.
"""

from .models import Entry
from .ini_document import parse_document, serialize_entries
from .entry_store import EntryStore
from .preset_codec import decode_presets, encode_presets
from .persistence import PersistenceManager, SaveReport, backup_path_for, temp_path_for

__all__ = [
# Document model
    'Entry',
    'parse_document',
    'serialize_entries',

# Editing
    'EntryStore',

# Presets
    'decode_presets',
    'encode_presets',

# Persistence
    'PersistenceManager',
    'SaveReport',
    'backup_path_for',
    'temp_path_for',
]
