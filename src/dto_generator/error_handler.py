"""Error handling implementation for the DTO generator."""

import logging
from typing import TYPE_CHECKING, List, Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    Diagnostic,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils

if TYPE_CHECKING:
    from .config import GeneratorConfig


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for DTO generation runs.

    Validates the input document and run configuration up front, and
    collects the non-fatal diagnostics raised while a document is being
    inferred so that generation of the rest of the document can continue.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)
        self._diagnostics: List[Diagnostic] = []

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Diagnostics recorded since the last reset, in order."""
        return list(self._diagnostics)

    def reset(self) -> None:
        """Forget diagnostics from a previous run."""
        self._diagnostics = []

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_json_string(input_data)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def validate_config(self, config: 'GeneratorConfig') -> ValidationResult:
        """
        Validate a run configuration.

        Args:
            config: GeneratorConfig to validate

        Returns:
            ValidationResult combining namespace, casing and root-name checks
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        for result in (
            ValidationUtils.validate_namespace(config.namespace),
            ValidationUtils.validate_casing(config.casing),
            ValidationUtils.validate_root_name(config.root_name),
        ):
            errors.extend(result.errors)
            warnings.extend(result.warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def record_diagnostic(self, error_type: ErrorType, message: str, location: str) -> Diagnostic:
        """
        Record a recoverable problem.

        Args:
            error_type: Category of the problem
            message: Human-readable description
            location: Dotted path of the affected value, e.g. ``root.users[].name``

        Returns:
            The recorded Diagnostic
        """
        diagnostic = Diagnostic(type=error_type, message=message, location=location)
        self._diagnostics.append(diagnostic)
        self.logger.warning(f"{location}: {message}")
        return diagnostic

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle a fatal processing error and suggest what the caller can fix.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Provide a well-formed JSON object or array."
            )
        elif error.error_type == ErrorType.STRUCTURE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The root JSON value must be an object or an array."
            )
        elif error.error_type == ErrorType.NAMESPACE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Use a namespace made of identifier segments, e.g. App\\Data."
            )
        elif error.error_type == ErrorType.CASING:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Choose a casing mode from the supported list."
            )
        elif error.error_type == ErrorType.NAMING:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Use a root name that starts with a letter or underscore."
            )
        elif error.error_type == ErrorType.CIRCULAR:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Self-referencing shapes are typed as unknown; "
                                 "rename the nested keys to break the cycle."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )
