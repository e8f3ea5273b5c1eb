#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the wechatmd library.

This module defines the exception classes raised by wechatmd. Most of the
rendering pipeline is designed to never raise on arbitrary Markdown input, so
the hierarchy is intentionally small and centred on configuration problems.

Exception Hierarchy
-------------------
- WechatMdError (base exception)

  - ValidationError (parameter/option validation)
    - ThemeValidationError (theme definition failed schema validation)
    - ThemeNotFoundError (unknown built-in theme identifier)

  - FileError (file access and I/O for the CLI)

  - TransformError (unexpected failure inside a pipeline pass)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class WechatMdError(Exception):
    """Base exception class for all wechatmd-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(WechatMdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


@dataclass(frozen=True)
class ThemeViolation:
    """A single offending field reported by theme validation.

    Parameters
    ----------
    path : str
        Dotted path to the offending field (e.g. ``tokens.color.primary``).
        Empty string when the problem concerns the whole object.
    message : str
        Description of what is wrong with the field

    """

    path: str
    message: str

    def __str__(self) -> str:
        """Format as ``path: message``."""
        return f"{self.path or '<root>'}: {self.message}"


class ThemeValidationError(ValidationError):
    """Exception raised when a theme definition fails schema validation.

    A theme that fails validation is rejected wholesale; no part of it is
    ever applied.

    Parameters
    ----------
    message : str
        Summary of the failure
    violations : list of ThemeViolation
        One entry per offending field
    original_error : Exception, optional
        The underlying schema validation error

    Examples
    --------
    >>> try:
    ...     validate_theme({"id": "broken"})
    ... except ThemeValidationError as exc:
    ...     print([v.path for v in exc.violations])
    ['version', 'metadata', 'tokens']

    """

    def __init__(
        self,
        message: str,
        violations: list[ThemeViolation] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize with the list of per-field violations."""
        self.summary = message
        self.violations: list[ThemeViolation] = list(violations or [])
        if self.violations:
            details = "; ".join(str(v) for v in self.violations)
            message = f"{message}: {details}"
        super().__init__(message, parameter_name="theme", original_error=original_error)

    @property
    def paths(self) -> list[str]:
        """Return the offending field paths in reporting order."""
        return [violation.path for violation in self.violations]


class ThemeNotFoundError(ValidationError):
    """Exception raised when a built-in theme identifier is unknown.

    Parameters
    ----------
    theme_id : str
        The identifier that was requested
    available : list of str, optional
        Identifiers that do exist

    """

    def __init__(self, theme_id: str, available: list[str] | None = None):
        """Initialize with the missing theme id and the known ids."""
        self.theme_id = theme_id
        self.available = list(available or [])
        message = f"Unknown theme: {theme_id!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message, parameter_name="theme", parameter_value=theme_id)


class FileError(WechatMdError):
    """Exception raised when an input or output file cannot be accessed.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path of the file that caused the error
    original_error : Exception, optional
        The underlying OS error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path information."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class TransformError(WechatMdError):
    """Exception raised when a pipeline pass fails unexpectedly.

    Parameters
    ----------
    message : str
        Description of the transformation error
    transform_name : str, optional
        Name of the pass that failed
    original_error : Exception, optional
        The original exception raised by the pass

    """

    def __init__(
        self,
        message: str,
        transform_name: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the transform error with the failing pass name."""
        super().__init__(message, original_error=original_error)
        self.transform_name = transform_name
