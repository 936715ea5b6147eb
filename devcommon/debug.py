"""Logging helpers that tag messages with the calling location."""

from __future__ import annotations

import logging
import os
import sys
from types import FrameType
from typing import Any, Optional

_logger = logging.getLogger(__name__)

_UNKNOWN = "???:0:???()"


def _setup() -> None:
    _logger.setLevel(logging.INFO)


def _sprint(args: tuple[Any, ...]) -> str:
    """Join values, putting a space only between two adjacent non-strings."""
    parts: list[str] = []
    previous_is_str = True
    for index, value in enumerate(args):
        is_str = isinstance(value, str)
        if index and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(value))
        previous_is_str = is_str
    return "".join(parts)


def _frame(depth: int) -> Optional[FrameType]:
    try:
        return sys._getframe(depth + 1)
    except ValueError:
        return None


def _describe(frame: Optional[FrameType]) -> tuple[str, int, str]:
    if frame is None:
        return "???", 0, "???"
    code = frame.f_code
    return os.path.basename(code.co_filename), frame.f_lineno, code.co_name


def log_i(*args: Any) -> None:
    """Log the joined arguments at info level."""
    _setup()
    _logger.info(_sprint(args))


def log_w(*args: Any) -> None:
    """Log the joined arguments at warning level."""
    _setup()
    _logger.warning(_sprint(args))


def log_d(*args: Any) -> None:
    """Log the joined arguments at debug level (suppressed at the fixed info level)."""
    _setup()
    _logger.debug(_sprint(args))


def log_e(*args: Any) -> None:
    """Log the caller's location, then the joined arguments, at error level."""
    _setup()
    _logger.error(get_line())
    _logger.error(_sprint(args))


def log_not_implement() -> None:
    """Report, as an error, that the calling function is not implemented."""
    filename, line, funcname = _describe(_frame(1))
    log_e("not implement ", filename, ":", line, ":", funcname, "()")


def get_line() -> str:
    """Return ``file:line:function()`` of the caller of the function calling this."""
    frame = _frame(2)
    if frame is None:
        return _UNKNOWN
    filename, line, funcname = _describe(frame)
    return f"{filename}:{line}:{funcname}()"


def new_error(msg: str) -> RuntimeError:
    """Build an error whose message carries the caller's location and ``msg``."""
    return RuntimeError(get_line() + " MSG:" + msg)