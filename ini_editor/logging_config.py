#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
Logging System for INI Preset Editor

Features:
- Compact per-level console format with optional colours
- Structured JSON output (argument or INI_EDITOR_LOG_JSON)
- Size-rotating main log plus a warnings-only error log
- Cached named loggers under the "ini_editor" namespace
"""

import logging
import logging.handlers
import os
import sys
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any, Union
from functools import lru_cache

# =====================================================================================================
# Constants
# =====================================================================================================

LOG_NAMESPACE = "ini_editor"
MAIN_LOG_FILENAME = "ini_editor.log"
ERROR_LOG_FILENAME = "errors.log"
JSON_ENV_VAR = "INI_EDITOR_LOG_JSON"

# =====================================================================================================
# Formatters
# =====================================================================================================

class FastFormatter(logging.Formatter):
    """Compact formatter with one pre-built format per level."""

    def __init__(self, enable_colors: bool = False):
        super().__init__()
        self.enable_colors = enable_colors

        self._formatters = {
            level: logging.Formatter(fmt, style='{', datefmt='%H:%M:%S')
            for level, fmt in {
                logging.ERROR: "[{asctime}] ERROR   [{name}] {message}",
                logging.WARNING: "[{asctime}] WARNING [{name}] {message}",
                logging.INFO: "[{asctime}] INFO    {message}",
                logging.DEBUG: "[{asctime}] DEBUG   {name}:{lineno} - {message}",
            }.items()
        }

# Simple Color Codes
        self.colors = {
            'ERROR': '\033[91m',     # Red
            'WARNING': '\033[93m',   # Yellow
            'INFO': '\033[92m',      # Green
            'DEBUG': '\033[94m',     # Blue
            'RESET': '\033[0m'       # Reset
        } if enable_colors else {}

    def format(self, record):
        formatter = self._formatters.get(record.levelno)
        if formatter is None:
            formatter = self._formatters[logging.ERROR if record.levelno > logging.ERROR else logging.INFO]
        text = formatter.format(record)
        color = self.colors.get(record.levelname)
        if color:
            return f"{color}{text}{self.colors['RESET']}"
        return text


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter (optional)."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "thread": record.threadName,
            "process": record.process,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

# =====================================================================================================
# Setup
# =====================================================================================================

def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
    enable_file_logging: bool = False,
    enable_console_logging: bool = True,
    structured_json: Optional[bool] = None,
    max_log_size: str = "5MB",
    backup_count: int = 3,
) -> Dict[str, Any]:
    """Configure the root logger and return the created loggers and handlers."""
    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)
    log_dir_path = Path(log_dir) if log_dir is not None else Path("logs")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

# Clear Existing Handlers
    for handler in root_logger.handlers[:]:
        try:
            handler.close()
        finally:
            root_logger.removeHandler(handler)

    handlers = {}
    use_json = structured_json if structured_json is not None else _env_bool(JSON_ENV_VAR)

    if enable_console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)

        enable_colors = (hasattr(sys.stderr, 'isatty') and
                         sys.stderr.isatty() and
                         os.environ.get('TERM') != 'dumb')

        console_handler.setFormatter(JsonFormatter() if use_json else FastFormatter(enable_colors=enable_colors))
        root_logger.addHandler(console_handler)
        handlers['console'] = console_handler

    if enable_file_logging:
        log_dir_path.mkdir(parents=True, exist_ok=True)
        size_bytes = _parse_size_string(max_log_size)

        main_handler = logging.handlers.RotatingFileHandler(
            str(log_dir_path / MAIN_LOG_FILENAME),
            maxBytes=size_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        main_handler.setLevel(numeric_level)
        main_handler.setFormatter(JsonFormatter() if use_json else FastFormatter())
        root_logger.addHandler(main_handler)
        handlers['main_file'] = main_handler

        error_handler = logging.handlers.RotatingFileHandler(
            str(log_dir_path / ERROR_LOG_FILENAME),
            maxBytes=size_bytes // 2,
            backupCount=backup_count,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(JsonFormatter() if use_json else FastFormatter())
        root_logger.addHandler(error_handler)
        handlers['error_file'] = error_handler

    loggers = {
        'main': logging.getLogger(LOG_NAMESPACE),
        'core': logging.getLogger(f"{LOG_NAMESPACE}.core"),
        'cli': logging.getLogger(f"{LOG_NAMESPACE}.cli"),
    }

    loggers['main'].debug(
        "Logging initialized (level=%s, file=%s, json=%s)",
        log_level, enable_file_logging, use_json,
    )

    return {
        'loggers': loggers,
        'handlers': handlers,
        'log_dir': log_dir_path
    }

# =====================================================================================================
# Utility functions
# =====================================================================================================

def _parse_size_string(size_str: str) -> int:
    """Parse size string into bytes."""
    size_str = size_str.upper().strip()

    multipliers = {
        'KB': 1024,
        'MB': 1024 ** 2,
        'GB': 1024 ** 3,
        'B': 1,
    }

    for suffix, multiplier in multipliers.items():
        if size_str.endswith(suffix):
            try:
                number = float(size_str[:-len(suffix)].strip())
                return int(number * multiplier)
            except ValueError:
                continue

# Try Parsing as Plain Number (Assume bytes)
    try:
        return int(float(size_str))
    except ValueError:
        pass

    return 5 * 1024 * 1024  # Default 5MB


@lru_cache(maxsize=32)
def get_logger(name: str) -> logging.Logger:
    """Get cached logger instance."""
    return logging.getLogger(f"{LOG_NAMESPACE}.{name}")


def cleanup_logging():
    """Close and detach all root handlers."""
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        try:
            handler.close()
        finally:
            root_logger.removeHandler(handler)

    get_logger.cache_clear()
