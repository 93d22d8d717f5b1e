"""Preset JSON encode/decode.

Presets travel as a single-line JSON array of flat objects::

    [{"section":"S","key":"K","value":"V"}, ...]

The default decoder is a lenient pattern scan rather than a JSON parser:
braces are not nested, a ``}`` inside a value ends the object early and
only ``\\"`` and ``\\\\`` are unescaped. ``strict=True`` switches to a real
JSON parse validated with pydantic.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from ..exceptions import PresetFormatError
from .models import Entry

logger = logging.getLogger(__name__)

_ITEM_RE = re.compile(r"\{([^}]+)\}", re.MULTILINE)
_FIELD_RE = re.compile(r'"(section|key|value)"\s*:\s*"(.*?)"', re.IGNORECASE)


class PresetItemModel(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    section: str
    key: str
    value: str


def _escape(text: str) -> str:
    return (text or "").replace("\\", "\\\\").replace('"', '\\"')


def _unescape(text: str) -> str:
    return (text or "").replace('\\"', '"').replace("\\\\", "\\")


def encode_presets(entries: Iterable[Entry]) -> str:
    items = [
        '{"section":"%s","key":"%s","value":"%s"}'
        % (_escape(entry.section), _escape(entry.key), _escape(entry.value))
        for entry in entries
    ]
    return "[" + ",".join(items) + "]"


def decode_presets(json_text: str, strict: bool = False) -> List[Entry]:
    if strict:
        return _decode_strict(json_text)

    entries: List[Entry] = []
    try:
        for block in _ITEM_RE.finditer(json_text or ""):
            fields = {"section": "", "key": "", "value": ""}
            for match in _FIELD_RE.finditer(block.group(0)):
                fields[match.group(1).lower()] = _unescape(match.group(2))
            if fields["key"].strip():
                entries.append(Entry(fields["section"], fields["key"], fields["value"]))
    except Exception as exc:
        logger.debug("Preset decode stopped after %d entries: %s", len(entries), exc)
    return entries


def _decode_strict(json_text: str) -> List[Entry]:
    try:
        # encode_presets leaves control characters raw
        payload = json.loads(json_text, strict=False)
    except (TypeError, ValueError) as exc:
        raise PresetFormatError(f"Preset is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise PresetFormatError("Preset JSON must be an array of objects")

    entries: List[Entry] = []
    for index, item in enumerate(payload):
        try:
            model = PresetItemModel.model_validate(item)
        except PydanticValidationError as exc:
            raise PresetFormatError(f"Invalid preset item #{index}: {exc}", item_index=index) from exc
        if not model.key.strip():
            raise PresetFormatError(f"Preset item #{index} has an empty key", item_index=index)
        entries.append(Entry(model.section, model.key, model.value))
    return entries
