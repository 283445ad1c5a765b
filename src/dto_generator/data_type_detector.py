"""Value classification for tagged JSON trees."""

import logging
import re
from collections import Counter
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple
from .models.json_value import (
    JsonValue,
    JsonNull,
    JsonBool,
    JsonInt,
    JsonFloat,
    JsonString,
    JsonArray,
    JsonObject,
)
from .types import DataType, TypeKind

# Leading YYYY-MM-DD in ASCII digits; anything may follow (time, zone, ...)
DATE_PREFIX_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DataTypeDetector:
    """
    Data type detector for JSON values.

    Maps each tagged JSON value onto the element category used to pick an
    inference strategy, and onto the field type the value would produce.
    """

    def __init__(self, detect_dates: bool = False, logger: Optional[logging.Logger] = None):
        """
        Initialize the data type detector.

        Args:
            detect_dates: Classify strings with a leading date as DATE
            logger: Optional logger instance
        """
        self.detect_dates = detect_dates
        self.logger = logger or logging.getLogger(__name__)

    def detect_element_type(self, element: JsonValue) -> DataType:
        """
        Detect the category of a single element.

        Args:
            element: Element to analyze

        Returns:
            DataType enum indicating the element category
        """
        match element:
            case JsonObject():
                return DataType.OBJECT
            case JsonArray():
                return DataType.ARRAY
            case JsonNull() | JsonBool() | JsonInt() | JsonFloat() | JsonString():
                return DataType.PRIMITIVE
            case _:
                raise TypeError(f"Unsupported JSON value: {element!r}")

    def detect_scalar_type(self, value: JsonValue) -> TypeKind:
        """
        Detect the field type of a scalar value.

        Args:
            value: Scalar JSON value

        Returns:
            TypeKind for the value; null maps to UNKNOWN

        Raises:
            TypeError: If the value is an object or array
        """
        match value:
            case JsonNull():
                return TypeKind.UNKNOWN
            case JsonBool():
                return TypeKind.BOOL
            case JsonInt():
                return TypeKind.INT
            case JsonFloat():
                return TypeKind.FLOAT
            case JsonString(value=text):
                if self.detect_dates and self.looks_like_date(text):
                    return TypeKind.DATE
                return TypeKind.STRING
            case _:
                raise TypeError(f"Not a scalar JSON value: {type(value).__name__}")

    def detect_value_type(self, value: JsonValue) -> TypeKind:
        """Detect the type of any value, composite values included."""
        match value:
            case JsonObject():
                return TypeKind.OBJECT
            case JsonArray():
                return TypeKind.ARRAY
            case _:
                return self.detect_scalar_type(value)

    def detect_element_types(self, items: Iterable[JsonValue]) -> Tuple[TypeKind, ...]:
        """Unique scalar types of array elements, in first-seen order."""
        seen = []
        for item in items:
            kind = self.detect_scalar_type(item)
            if kind not in seen:
                seen.append(kind)
        return tuple(seen)

    @staticmethod
    def looks_like_date(text: str) -> bool:
        """Check whether a string starts with a ``YYYY-MM-DD`` date."""
        return bool(DATE_PREFIX_PATTERN.match(text))

    def analyze_list_patterns(self, items: Sequence[JsonValue]) -> Dict[str, Any]:
        """
        Analyze the element categories of an array.

        Args:
            items: Array elements to analyze

        Returns:
            Dictionary with pattern analysis results; ``mergeable`` is true
            when every non-null element is an object and there is at least one
        """
        if not items:
            return {
                "is_empty": True,
                "item_types": {},
                "null_count": 0,
                "has_composites": False,
                "mergeable": False,
                "homogeneous": True,
            }

        item_types = Counter()
        null_count = 0

        for item in items:
            match item:
                case JsonNull():
                    null_count += 1
            item_types[self.detect_element_type(item).value] += 1

        object_count = item_types.get(DataType.OBJECT.value, 0)
        array_count = item_types.get(DataType.ARRAY.value, 0)
        non_null_count = len(items) - null_count

        return {
            "is_empty": False,
            "item_types": dict(item_types),
            "null_count": null_count,
            "has_composites": object_count > 0 or array_count > 0,
            "mergeable": object_count > 0 and object_count == non_null_count,
            "homogeneous": len(item_types) == 1,
        }
