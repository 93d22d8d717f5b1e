from __future__ import annotations

import pytest

from ini_editor.exceptions import ValidationError
from ini_editor.utils.result import Err, Ok, capture, error_message, is_err, is_ok, unwrap, unwrap_or


def test_capture_wraps_expected_errors():
    def fails():
        raise ValidationError("No file path specified.")

    result = capture(fails)

    assert is_err(result)
    assert error_message(result) == "No file path specified."
    assert unwrap_or(result, 5) == 5
    with pytest.raises(ValidationError):
        unwrap(result)


def test_capture_wraps_os_errors():
    def fails():
        raise PermissionError("denied")

    assert isinstance(capture(fails).error, PermissionError)


def test_capture_passes_through_programming_errors():
    def fails():
        raise TypeError("bug")

    with pytest.raises(TypeError):
        capture(fails)


def test_ok_helpers():
    result = capture(lambda a, b: a + b, 1, b=2)

    assert result == Ok(3)
    assert is_ok(result)
    assert error_message(result) is None
    assert Err(ValueError("x")).message == "x"
