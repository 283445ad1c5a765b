"""Validation utilities for input documents, names and configuration values."""

import json
import re
from typing import Any, List, Union
from ..types import CaseMode, ErrorType, ValidationError, ValidationResult

# Same character classes the generated field names are allowed to use; matched whole
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_\u0080-\uffff][A-Za-z0-9_\u0080-\uffff]*")

NAMESPACE_SEGMENT_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

MAX_RECOMMENDED_DEPTH = 64


class ValidationUtils:
    """Utility class for validating input JSON, identifiers and namespaces."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string or not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = json.loads(json_string, parse_constant=ValidationUtils.reject_constant)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="JSON nesting is too deep to parse",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Validate structure
        structure_errors, structure_warnings = ValidationUtils._validate_json_structure(data)
        errors.extend(structure_errors)
        warnings.extend(structure_warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def reject_constant(name: str) -> Any:
        """``parse_constant`` hook refusing NaN and Infinity."""
        raise ValueError(f"non-finite number {name} is not valid JSON")

    @staticmethod
    def _validate_json_structure(data: Any) -> tuple[List[ValidationError], List[str]]:
        """Validate decoded JSON data structure."""
        errors = []
        warnings = []

        # Check for supported root types
        if not isinstance(data, (dict, list)):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Root element must be an object or array, got {type(data).__name__}",
                location="root"
            ))
            return errors, warnings

        # Check depth
        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > MAX_RECOMMENDED_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). "
                            "Inference recursion follows nesting depth.")

        return errors, warnings

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        max_child_depth = current_depth
        children = data.values() if isinstance(data, dict) else data

        for child in children:
            child_depth = ValidationUtils._calculate_max_depth(child, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth

    @staticmethod
    def is_valid_identifier(name: Any) -> bool:
        """Check whether a raw JSON key can become a field."""
        return isinstance(name, str) and bool(IDENTIFIER_PATTERN.fullmatch(name))

    @staticmethod
    def split_namespace(namespace: str) -> List[str]:
        """Split a ``\\``- or ``.``-separated namespace into segments."""
        stripped = namespace.strip().lstrip("\\")
        separator = "\\" if "\\" in stripped else "."
        return stripped.split(separator)

    @staticmethod
    def validate_namespace(namespace: str) -> ValidationResult:
        """
        Validate a target namespace such as ``App\\Data``.

        Args:
            namespace: Namespace to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []

        if not namespace or not namespace.strip().lstrip("\\"):
            errors.append(ValidationError(
                type=ErrorType.NAMESPACE,
                message="Namespace cannot be empty",
                location="namespace"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=[])

        for segment in ValidationUtils.split_namespace(namespace):
            if not NAMESPACE_SEGMENT_PATTERN.fullmatch(segment):
                errors.append(ValidationError(
                    type=ErrorType.NAMESPACE,
                    message=f"Invalid namespace segment '{segment}' in '{namespace}'",
                    location="namespace"
                ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=[])

    @staticmethod
    def validate_casing(casing: Union[CaseMode, str, None]) -> ValidationResult:
        """Validate a casing mode given as an enum member or its value."""
        if casing is None or isinstance(casing, CaseMode):
            return ValidationResult(is_valid=True, errors=[], warnings=[])

        valid_values = [mode.value for mode in CaseMode]
        if casing in valid_values:
            return ValidationResult(is_valid=True, errors=[], warnings=[])

        return ValidationResult(
            is_valid=False,
            errors=[ValidationError(
                type=ErrorType.CASING,
                message=f"Invalid casing '{casing}', must be one of: {', '.join(valid_values)}",
                location="casing"
            )],
            warnings=[]
        )

    @staticmethod
    def validate_root_name(root_name: str) -> ValidationResult:
        """Validate the name the root class is derived from."""
        if ValidationUtils.is_valid_identifier(root_name):
            return ValidationResult(is_valid=True, errors=[], warnings=[])

        return ValidationResult(
            is_valid=False,
            errors=[ValidationError(
                type=ErrorType.NAMING,
                message=f"Invalid root name '{root_name}'",
                location="root_name"
            )],
            warnings=[]
        )
