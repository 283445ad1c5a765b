"""JSON parser producing tagged value trees."""

import json
import logging
from typing import Any, Dict, Optional
from .types import InputError, ErrorType
from .error_handler import ErrorHandler
from .models.json_value import JsonValue, JsonArray, JsonObject, from_python
from .utils.validation import ValidationUtils


class JSONParser:
    """
    JSON parser with validation.

    The whole document is decoded and converted into a tagged JsonValue
    tree before any inference starts; nothing downstream inspects raw
    decoder output.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> JsonValue:
        """
        Parse JSON string into a tagged value tree.

        Args:
            json_string: JSON string to parse

        Returns:
            Root JsonValue, always a JsonObject or JsonArray

        Raises:
            InputError: If JSON is invalid or its root is a scalar
        """
        # Validate input
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise InputError(
                f"Invalid JSON input: {'; '.join(error_messages)}",
                validation_result.errors[0].type,
                context=validation_result.errors
            )

        try:
            data = json.loads(json_string, parse_constant=ValidationUtils.reject_constant)
            value = from_python(data)
        except RecursionError:
            raise InputError("JSON nesting is too deep to parse", ErrorType.STRUCTURE)

        self.logger.info(f"Parsed JSON with root type: {type(value).__name__}")
        return value

    def get_structure_statistics(self, value: JsonValue) -> Dict[str, Any]:
        """
        Get statistics about a parsed value tree.

        Args:
            value: Parsed value to analyze

        Returns:
            Dictionary with structure statistics
        """
        stats = {
            "max_depth": 0,
            "object_count": 0,
            "array_count": 0,
            "primitive_count": 0,
            "total_keys": 0,
            "total_items": 0,
        }

        self._count_elements(value, stats, 0)
        return stats

    def _count_elements(self, value: JsonValue, stats: Dict[str, Any], depth: int) -> None:
        """Recursively count different types of elements."""
        stats["max_depth"] = max(stats["max_depth"], depth)

        match value:
            case JsonObject():
                stats["object_count"] += 1
                stats["total_keys"] += len(value)
                for member in value.members.values():
                    self._count_elements(member, stats, depth + 1)
            case JsonArray(items=items):
                stats["array_count"] += 1
                stats["total_items"] += len(items)
                for item in items:
                    self._count_elements(item, stats, depth + 1)
            case _:
                stats["primitive_count"] += 1
