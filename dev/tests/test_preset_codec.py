from __future__ import annotations

import pytest

from ini_editor.core.models import Entry
from ini_editor.core.preset_codec import decode_presets, encode_presets
from ini_editor.exceptions import PresetFormatError

WELL_FORMED = (
    '[{"section":"S","key":"a","value":"1"},'
    '{"section":"S","key":"b","value":"2"},'
    '{"section":"T","key":"c","value":"3"}]'
)


def test_encode_single_line_with_field_order():
    text = encode_presets([Entry("S", "k", "v"), Entry("", "g", "")])

    assert text == '[{"section":"S","key":"k","value":"v"},{"section":"","key":"g","value":""}]'
    assert "\n" not in text


def test_encode_escapes_backslash_and_quote_only():
    text = encode_presets([Entry("S", "path", 'C:\\Games\\"x"\ttab')])

    assert text == '[{"section":"S","key":"path","value":"C:\\\\Games\\\\\\"x\\"\ttab"}]'


def test_encode_empty():
    assert encode_presets([]) == "[]"


def test_decode_well_formed():
    assert decode_presets(WELL_FORMED) == [
        Entry("S", "a", "1"),
        Entry("S", "b", "2"),
        Entry("T", "c", "3"),
    ]


def test_decode_is_lenient_about_layout_and_case():
    text = """
    [
      { "KEY" : "k", "Section": "S", "extra": "ignored", "value": "v" },
      {"section": "S", "value": "no key"},
      {"section": "S", "key": "   ", "value": "blank key"}
    ]
    """

    assert decode_presets(text) == [Entry("S", "k", "v")]


def test_decode_missing_fields_default_to_empty():
    assert decode_presets('[{"key":"only"}]') == [Entry("", "only", "")]


def test_decode_unescapes_backslashes():
    encoded = encode_presets([Entry("S", "path", "C:\\Games\\Fortnite")])

    assert decode_presets(encoded) == [Entry("S", "path", "C:\\Games\\Fortnite")]


def test_decode_brace_inside_value_truncates_block():
    text = '[{"section":"S","value":"a}b","key":"k"}]'

    # the block ends at the first "}", before the key is reached
    assert decode_presets(text) == []


def test_decode_truncated_input_never_raises():
    truncated = WELL_FORMED[: WELL_FORMED.rindex("{") + 20]

    result = decode_presets(truncated)

    assert len(result) < 3
    assert all(entry.key.strip() for entry in result)


@pytest.mark.parametrize("garbage", ["", "not json", "[{", "}{", None, b"[]", 42])
def test_decode_garbage_returns_empty(garbage):
    assert decode_presets(garbage) == []


def test_strict_decode_accepts_well_formed():
    assert decode_presets(WELL_FORMED, strict=True) == decode_presets(WELL_FORMED)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"section":"S","key":"k","value":"v"}',
        '[{"section":"S","key":"k"}]',
        '[{"section":"S","key":"k","value":1}]',
        '[{"section":"S","key":" ","value":"v"}]',
        '["plain string"]',
    ],
)
def test_strict_decode_rejects_malformed(text):
    with pytest.raises(PresetFormatError):
        decode_presets(text, strict=True)


def test_strict_decode_handles_braces_inside_values():
    text = '[{"section":"S","key":"k","value":"a}b"}]'

    assert decode_presets(text, strict=True) == [Entry("S", "k", "a}b")]


def test_decode_stops_value_at_first_quote():
    encoded = encode_presets([Entry("S", "k", 'say "hi"')])

    assert decode_presets(encoded) == [Entry("S", "k", "say \\")]


def test_strict_decode_accepts_raw_control_characters_from_encoder():
    entries = [Entry("S", "k", "a\tb"), Entry("S", "n", "line\x01end")]

    assert decode_presets(encode_presets(entries), strict=True) == entries
