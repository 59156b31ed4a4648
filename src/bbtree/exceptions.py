#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the bbtree library.

This module defines the exception classes raised by bbtree. Malformed markup is
never an error: the bracket-tag parser degrades every unmatched construct to
literal text. The conditions below cover caller mistakes only.

Exception Hierarchy
-------------------
- BBTreeError (base exception)

  - ValidationError (parameter/option/collaborator validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - FormatError (unsupported source or target format)

  - RenderingError (output generation failures)

"""

from typing import Any


class BBTreeError(Exception):
    """Base exception class for all bbtree-specific errors.

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


class ValidationError(BBTreeError):
    """Exception raised for invalid input parameters, options or collaborators.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FormatError(BBTreeError):
    """Exception raised when a conversion is requested for an unsupported format.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format value as passed by the caller
    supported_formats : list[str], optional
        List of supported formats for reference
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    format_type : str or None
        The format that was not supported
    supported_formats : list[str] or None
        Available supported formats

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            message = f"Unsupported format: '{format_type}'"
            if supported_formats:
                message += f". Supported formats: {', '.join(supported_formats)}"
        super().__init__(message, original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class RenderingError(BBTreeError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


__all__ = [
    "BBTreeError",
    "ValidationError",
    "InvalidOptionsError",
    "FormatError",
    "RenderingError",
]
