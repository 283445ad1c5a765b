"""Merger folding array elements into one representative object."""

import logging
from typing import Dict, List, Optional, Sequence
from ..data_type_detector import DataTypeDetector
from ..error_handler import ErrorHandler
from ..models import JsonArray, JsonNull, JsonObject, JsonValue
from ..types import ErrorType, TypeKind


class ShapeMerger:
    """
    Merges the object elements of an array into one synthetic object.

    The synthetic object has the first-seen-order union of every element's
    keys. Each key gets a representative value that drives further
    inference: null when no element has a non-null value for it, a value of
    the single type seen otherwise, and null plus a diagnostic when the
    elements disagree on the type.
    """

    def __init__(self, detector: Optional[DataTypeDetector] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the shape merger.

        Args:
            detector: Optional DataTypeDetector used to compare value types
            error_handler: Optional ErrorHandler collecting diagnostics
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.detector = detector or DataTypeDetector(logger=self.logger)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def merge(self, elements: Sequence[JsonObject], path: str = "root[]") -> JsonObject:
        """
        Merge object elements into one synthetic object.

        Args:
            elements: Objects found in one array
            path: Location of the elements, used in diagnostics

        Returns:
            New JsonObject whose keys are the union of all element keys
        """
        keys: List[str] = []
        values: Dict[str, List[JsonValue]] = {}

        for element in elements:
            for key, value in element.items():
                if key not in values:
                    keys.append(key)
                    values[key] = []
                if self.detector.detect_value_type(value) != TypeKind.UNKNOWN:
                    values[key].append(value)

        merged = {key: self._reconcile(key, values[key], path) for key in keys}

        self.logger.debug(f"Merged {len(elements)} elements at {path} into {len(merged)} keys")
        return JsonObject(merged)

    def _reconcile(self, key: str, values: List[JsonValue], path: str) -> JsonValue:
        """Pick the representative value for one key."""
        kinds: List[TypeKind] = []
        for value in values:
            kind = self.detector.detect_value_type(value)
            if kind not in kinds:
                kinds.append(kind)

        if not kinds:
            return JsonNull()

        if len(kinds) == 1:
            match kinds[0]:
                case TypeKind.OBJECT:
                    return self.merge(values, f"{path}.{key}")
                case TypeKind.ARRAY:
                    return JsonArray(tuple(item for value in values for item in value.items))
                case _:
                    return values[0]

        self.error_handler.record_diagnostic(
            ErrorType.AMBIGUOUS,
            f"Couldn't figure out type for '{key}': elements disagree "
            f"({', '.join(kind.value for kind in kinds)}); typed as unknown",
            f"{path}.{key}"
        )
        return JsonNull()
