"""Lightweight Result types (Ok/Err) returned by the editor session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, Type, TypeGuard, TypeVar, Union

from ..exceptions import BaseError

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: Exception

    @property
    def message(self) -> str:
        return str(self.error)


Result = Union[Ok[T], Err]

# Failures a front end is expected to present rather than crash on
EXPECTED_ERRORS: Tuple[Type[Exception], ...] = (BaseError, OSError)


def is_ok(result: Result[T]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: Result[T]) -> TypeGuard[Err]:
    return isinstance(result, Err)


def unwrap(result: Result[T]) -> T:
    if isinstance(result, Ok):
        return result.value
    raise result.error


def unwrap_or(result: Result[T], default: T) -> T:
    if isinstance(result, Ok):
        return result.value
    return default


def error_message(result: Result[T]) -> Optional[str]:
    if isinstance(result, Err):
        return result.message
    return None


def capture(func: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Run ``func`` and wrap expected failures into ``Err``."""
    try:
        return Ok(func(*args, **kwargs))
    except EXPECTED_ERRORS as exc:
        logger.debug("%s failed: %s", getattr(func, "__name__", func), exc)
        return Err(exc)
