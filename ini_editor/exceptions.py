#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
INI Preset Editor - Consolidated Exception Classes

This module contains all exception classes used in the project,
centralized in one place so that front ends can present a single
human-readable message for any failure.
"""

from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """Base class for all project-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code or "ERROR"
        self.details = details or {}
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Converts the exception to a dictionary for structured logging."""
        return {
            'error_code': self.error_code,
            'message': str(self),
            'details': self.details,
            'timestamp': self.timestamp.isoformat()
        }


# =====================================================================================================
# Configuration and user input errors
# =====================================================================================================

class ConfigurationError(BaseError):
    """Base class for configuration errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        config_details = details or {}
        if file_path:
            config_details['file_path'] = file_path
        super().__init__(message, error_code or "CONFIG_ERROR", config_details)


class ValidationError(ConfigurationError):
    """Raised when user input is rejected before any file is touched."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 expected_type: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        validation_details = details or {}
        if field_name:
            validation_details['field_name'] = field_name
        if expected_type:
            validation_details['expected_type'] = expected_type
        super().__init__(message, "VALIDATION_ERROR", None, validation_details)


# =====================================================================================================
# IO and data errors
# =====================================================================================================

class DataError(BaseError):
    """Base class for data-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code or "DATA_ERROR", details)


class FileOperationError(DataError):
    """Raised when reading, copying or replacing a file fails."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 operation: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        file_details = details or {}
        if file_path:
            file_details['file_path'] = str(file_path)
        if operation:
            file_details['operation'] = operation
        super().__init__(message, "FILE_OP_ERROR", file_details)


class DocumentNotFoundError(FileOperationError):
    """Raised when a document to load does not exist."""

    def __init__(self, message: str = "File not found.", file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, file_path, "load", details)


class BackupExistsError(FileOperationError):
    """Raised when a backup with the same timestamp already exists."""

    def __init__(self, message: str, backup_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, backup_path, "backup", details)


class PresetFormatError(DataError):
    """Raised by the strict preset decoder for malformed preset JSON."""

    def __init__(self, message: str, item_index: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        preset_details = details or {}
        if item_index is not None:
            preset_details['item_index'] = item_index
        super().__init__(message, "PRESET_FORMAT_ERROR", preset_details)
