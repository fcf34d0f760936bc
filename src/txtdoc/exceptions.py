#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the txtdoc library.

This module defines specialized exception classes for the error conditions
that can occur while loading document trees and rendering them to plain
text. These exceptions provide more specific error information than generic
built-ins.

Exception Hierarchy
-------------------
- TxtdocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ConfigError (invalid configuration files)

  - ParsingError (input document tree loading failures)
    - MalformedInputError (input is not a recognizable document tree)

  - RenderingError (output generation failures)
    - UnsupportedConstructError (math, captioned images, line blocks)
    - OutputWriteError (file write failures)

"""

from typing import Any


class TxtdocError(Exception):
    """Base exception class for all txtdoc-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(TxtdocError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(TxtdocError):
    """Exception raised when a configuration file cannot be read or is invalid.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error)
        self.config_path = config_path


class ParsingError(TxtdocError):
    """Exception raised when an input document tree cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the loading failure
    parsing_stage : str, optional
        The stage of loading where the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class MalformedInputError(ParsingError):
    """Exception raised when the input is not a recognizable document tree.

    Raised by the pandoc JSON loader for unknown node tags or node payloads
    with the wrong shape.

    Parameters
    ----------
    message : str
        Description of the problem
    node_type : str, optional
        The node tag that could not be loaded

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed input error."""
        super().__init__(message, parsing_stage="node_conversion", original_error=original_error)
        self.node_type = node_type


class RenderingError(TxtdocError):
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


class UnsupportedConstructError(RenderingError):
    """Exception raised when a document contains a construct plain text cannot express.

    Math, captioned images and line blocks are never approximated. Meeting
    one aborts the whole render, and no partial output is produced.

    Parameters
    ----------
    construct : str
        Name of the unsupported node type (e.g. ``"InlineMath"``)
    message : str, optional
        Custom error message

    Attributes
    ----------
    construct : str
        Name of the unsupported node type

    """

    def __init__(self, construct: str, message: str | None = None):
        """Initialize the unsupported construct error."""
        if message is None:
            message = f"{construct}: not supported in plain text output"
        super().__init__(message, rendering_stage="body")
        self.construct = construct


class OutputWriteError(RenderingError):
    """Exception raised when writing the rendered output fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "TxtdocError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "ParsingError",
    "MalformedInputError",
    "RenderingError",
    "UnsupportedConstructError",
    "OutputWriteError",
]
