"""Error handling implementation for the JSON Linter."""

import logging
from typing import Any, Optional
from .types import (
    ErrorResponse,
    ErrorType,
    InputError,
    JSONLintError,
    ValidationError,
    ValidationResult,
)


class ErrorHandler:
    """
    Validation of pipeline arguments and reporting of pipeline failures.

    The pipeline stages only raise; this class is where a failure is logged
    and paired with a hint for the user.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: Any) -> ValidationResult:
        """
        Validate the raw text handed to the pipeline.

        Only the argument type is checked here; JSON syntax is the
        tokenizer's and parser's job.

        Args:
            input_data: Value to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(input_data, str):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message=f"JSON text must be a str, got {type(input_data).__name__}",
                location="input"
            ))
        elif not input_data.strip():
            warnings.append("JSON text is empty or whitespace only")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def validate_indent_width(self, indent_width: Any) -> ValidationResult:
        """
        Validate the indent width parameter.

        Args:
            indent_width: Spaces per nesting level

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if isinstance(indent_width, bool) or not isinstance(indent_width, int):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message=f"Indent width must be an int, got {type(indent_width).__name__}",
                location="indent_width"
            ))
        elif indent_width < 0:
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message="Indent width must be non-negative",
                location="indent_width"
            ))
        elif indent_width > 16:
            warnings.append(f"Indent width {indent_width} is unusually large")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_error(self, error: JSONLintError) -> ErrorResponse:
        """
        Log a pipeline failure and suggest what the user can do about it.

        Args:
            error: The first error raised by the pipeline

        Returns:
            ErrorResponse with the message and a suggested action
        """
        self.logger.error(f"{error.error_type.value.capitalize()} error: {error.message}")

        if error.error_type == ErrorType.LEXICAL:
            action = self._lexical_action(error)
        elif error.error_type == ErrorType.SYNTAX:
            action = ("Check brackets, commas and colons around the reported token. "
                      "Trailing commas are not allowed.")
        elif error.error_type == ErrorType.NESTING:
            action = "Reduce the nesting depth of the document."
        elif error.error_type == ErrorType.INPUT:
            action = "Pass the JSON text as a string and a non-negative indent width."
        else:
            action = "Unknown error type. Please check logs and retry."

        return ErrorResponse(message=error.message, suggested_action=action)

    def _lexical_action(self, error: JSONLintError) -> str:
        if "\\uXXXX" in error.message:
            return "Replace \\uXXXX escapes with the literal characters they stand for."
        if "end of input" in error.message:
            return "Close every string with '\"' and complete every literal."
        return ("Only true, false, null, integers, strings and structural characters "
                "are accepted; escape control characters inside strings.")

    def raise_for_validation(self, result: ValidationResult) -> None:
        """
        Raise the first validation error of a result, if any.

        Raises:
            InputError: If the result is not valid
        """
        for warning in result.warnings:
            self.logger.warning(warning)

        if not result.is_valid:
            first = result.errors[0]
            raise InputError(first.message)
