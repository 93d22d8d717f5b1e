"""Small shared helpers."""

from .result import Err, Ok, Result, error_message, is_err, is_ok, unwrap, unwrap_or

__all__ = ["Err", "Ok", "Result", "error_message", "is_err", "is_ok", "unwrap", "unwrap_or"]
