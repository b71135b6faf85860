#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the prosetree library.

This module defines specialized exception classes for the error conditions
that can occur while building, serializing, parsing and rendering document
trees.

Exception Hierarchy
-------------------
- ProsetreeError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)
    - InvalidInputError (plain data that is not a mapping)

  - ContentNotAllowedError (child appended to a leaf-only node)

  - ParsingError (input document parsing failures)

  - RenderingError (output generation failures)

  - DependencyError (missing/incompatible packages)

Malformed HTML element shapes (an ``img`` without ``src``, a mention without
an id) are not errors: the importer omits them.

"""

from typing import Any


class ProsetreeError(Exception):
    """Base exception class for all prosetree-specific errors.

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


class ValidationError(ProsetreeError):
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


class InvalidInputError(ValidationError, TypeError):
    """Exception raised when plain node data is missing or not a mapping.

    Raised by :func:`prosetree.ast.serialization.from_plain` and
    :func:`prosetree.ast.serialization.parse_document`. It also derives from
    ``TypeError`` so callers treating it as a bad-argument error keep working.

    Parameters
    ----------
    message : str
        Description of the problem
    parameter_value : any, optional
        The rejected value

    """

    def __init__(self, message: str, parameter_value: Any = None):
        """Initialize the invalid input error."""
        super().__init__(message, parameter_name="data", parameter_value=parameter_value)


class ContentNotAllowedError(ProsetreeError, TypeError):
    """Exception raised when a child is appended to a node without a content slot.

    Image, horizontal rule and user mention nodes are leaves; appending to
    them is a programming error.

    Parameters
    ----------
    node_type : str
        The ``type`` of the node that rejected the child
    message : str, optional
        Custom error message

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the error for the rejecting node type."""
        if message is None:
            message = f"{node_type} nodes cannot have children"
        super().__init__(message)
        self.node_type = node_type


class ParsingError(ProsetreeError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(ProsetreeError):
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


class DependencyError(ProsetreeError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The import error raised while probing the package

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} format requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name.upper()} format has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            if all_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
