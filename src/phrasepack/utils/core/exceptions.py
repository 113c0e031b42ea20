"""
Basic exception classes for phrasepack.

This module contains the error hierarchy raised by the translation pipeline.
It has no internal imports so every stage can use it without import cycles.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors raised by the pipeline stages."""

    DISCOVERY = "discovery"
    SOURCE = "source"
    CONFIGURATION = "configuration"
    OUTPUT = "output"
    UNKNOWN = "unknown"


class PhrasePackError(Exception):
    """Base exception class for phrasepack specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: object | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.context: object | None = context
        self.recoverable: bool = recoverable


class DiscoveryError(PhrasePackError):
    """A lookup root could not be read while searching for phrase sources."""

    def __init__(self, message: str, root: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.DISCOVERY,
            severity=ErrorSeverity.HIGH,
            context={"root": str(root)} if root is not None else None,
        )
        self.root: Path | None = root


class SourceLoadError(PhrasePackError):
    """A phrase source failed to read or parse."""

    def __init__(self, message: str, location: Path) -> None:
        super().__init__(
            message,
            category=ErrorCategory.SOURCE,
            severity=ErrorSeverity.HIGH,
            context={"location": str(location)},
        )
        self.location: Path = location


class ConfigurationError(PhrasePackError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.CRITICAL,
            context=context,
        )


class MergeConfigError(ConfigurationError):
    """The configured locale set is inconsistent (e.g. default not enabled)."""

    pass


class OutputError(PhrasePackError):
    """A bundle directory or artifact could not be written."""

    def __init__(
        self,
        message: str,
        package: str,
        locale: str | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.OUTPUT,
            severity=ErrorSeverity.HIGH,
            context={
                "package": package,
                "locale": locale,
                "path": str(path) if path is not None else None,
            },
        )
        self.package: str = package
        self.locale: str | None = locale
        self.path: Path | None = path
