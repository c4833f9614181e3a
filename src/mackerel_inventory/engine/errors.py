# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
mackerel-inventory Error Classes.

All custom exceptions for clear error handling and exit codes.
Only configuration errors ever reach the process boundary; host source
failures are captured in a SourceResult and turned into empty documents.
"""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    KEYBOARD_INTERRUPT = 130


class MackerelInventoryError(Exception):
    """Base exception for all mackerel-inventory errors."""

    exit_code: int = ExitCode.GENERIC_ERROR

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigError(MackerelInventoryError):
    """Error in command line options, environment or config file."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        if file_path:
            message = f"{message} (in {file_path})"
        super().__init__(message)


class MissingCredentialError(ConfigError):
    """No Mackerel API key was supplied."""

    def __init__(self) -> None:
        super().__init__("mackerel-api-key is required")


class SourceUnavailableError(MackerelInventoryError):
    """The host source could not deliver a host list."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status: int | None = None,
        details: str | None = None,
    ) -> None:
        self.url = url
        self.status = status
        target = f" ({url})" if url else ""
        if status is not None:
            message = f"HTTP {status}: {message}"
        super().__init__(f"Host source unavailable{target}: {message}", details)
