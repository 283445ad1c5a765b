"""Schema inferencer: derives field types and class models from JSON values."""

import logging
from typing import List, Optional, Sequence
from ..data_type_detector import DataTypeDetector
from ..engines.class_model_builder import ClassModelBuilder
from ..engines.name_casing_engine import NameCasingEngine
from ..engines.shape_registry import ShapeRegistry
from ..error_handler import ErrorHandler
from ..models import (
    ClassModel,
    FieldSpec,
    JsonArray,
    JsonBool,
    JsonFloat,
    JsonInt,
    JsonNull,
    JsonObject,
    JsonString,
    JsonValue,
    Shape,
    ShapeKey,
    TypeDescriptor,
)
from ..types import DataType, ErrorType, InputError, RecursiveShapeError
from ..utils.validation import ValidationUtils
from .shape_merger import ShapeMerger


class SchemaInferencer:
    """
    Depth-first inference over a tagged JSON tree.

    Every object reached becomes (or resolves to) one class model in the
    shared registry. Arrays of objects are folded into one synthetic object
    by the merger and then inferred like any other object, so arrays of
    objects nest to any depth.
    """

    def __init__(self, registry: ShapeRegistry,
                 builder: ClassModelBuilder,
                 namespace: str,
                 merger: Optional[ShapeMerger] = None,
                 detector: Optional[DataTypeDetector] = None,
                 casing_engine: Optional[NameCasingEngine] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the schema inferencer.

        Args:
            registry: ShapeRegistry owned by the current run
            builder: ClassModelBuilder producing class models on registry misses
            namespace: Namespace new classes are created in
            merger: Optional ShapeMerger for arrays of objects
            detector: Optional DataTypeDetector for value classification
            casing_engine: Optional NameCasingEngine for class names and shape keys
            error_handler: Optional ErrorHandler collecting diagnostics
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.registry = registry
        self.builder = builder
        self.namespace = namespace
        self.error_handler = error_handler or ErrorHandler(self.logger)
        self.detector = detector or DataTypeDetector(logger=self.logger)
        self.merger = merger or ShapeMerger(self.detector, self.error_handler, self.logger)
        self.casing_engine = casing_engine or NameCasingEngine(logger=self.logger)

    def infer_root(self, value: JsonValue, root_name: str) -> ClassModel:
        """
        Infer the root class of a document.

        An array root is merged into one synthetic object first, so the
        root always yields exactly one class model.

        Args:
            value: Root of the parsed document
            root_name: Name the root class is derived from

        Returns:
            ClassModel of the root

        Raises:
            InputError: If the root is a scalar
        """
        match value:
            case JsonObject():
                return self.infer_object(value, root_name, "root")
            case JsonArray(items=items):
                merged = self._merge_elements(items, "root[]")
                return self.infer_object(merged or JsonObject({}), root_name, "root[]")
            case _:
                raise InputError(
                    f"Root element must be an object or array, got {type(value).__name__}",
                    ErrorType.STRUCTURE
                )

    def infer(self, value: JsonValue, field_key: str, path: str = "root") -> TypeDescriptor:
        """
        Infer the type of one value.

        Args:
            value: Value to classify
            field_key: Key the value was found under; names nested classes
            path: Dotted location of the value, used in diagnostics

        Returns:
            TypeDescriptor for the value
        """
        match value:
            case JsonNull():
                return TypeDescriptor.unknown()
            case JsonString() | JsonBool() | JsonInt() | JsonFloat():
                return TypeDescriptor.scalar(self.detector.detect_scalar_type(value))
            case JsonObject():
                model = self.infer_object(value, field_key, path)
                return TypeDescriptor.reference(model.ref)
            case JsonArray():
                return self._infer_array(value, field_key, path)
            case _:
                raise TypeError(f"Unsupported JSON value: {value!r}")

    def infer_object(self, obj: JsonObject, name: str, path: str) -> ClassModel:
        """
        Resolve an object to its class model, building it on first sight.

        Args:
            obj: Object to infer
            name: Key the object was found under
            path: Dotted location of the object

        Returns:
            ClassModel shared by every object with the same key set

        Raises:
            RecursiveShapeError: If the object's shape is still being built
                further up the same path
        """
        keys = self._accepted_keys(obj, path)
        shape_key = ShapeKey.from_names(keys, self.casing_engine.normalize_key)

        return self.registry.get_or_create(
            shape_key,
            self.namespace,
            self.casing_engine.class_name(name),
            lambda class_name: self._build_class(obj, keys, class_name, path, shape_key)
        )

    def _accepted_keys(self, obj: JsonObject, path: str) -> List[str]:
        """Keys that are valid identifiers; the others are reported and skipped."""
        keys = []
        for key in obj.keys():
            if ValidationUtils.is_valid_identifier(key):
                keys.append(key)
            else:
                self.error_handler.record_diagnostic(
                    ErrorType.NAMING,
                    f"Invalid property name '{key}'; skipped",
                    f"{path}.{key}"
                )
        return keys

    def _build_class(self, obj: JsonObject, keys: List[str], class_name: str,
                     path: str, shape_key: ShapeKey) -> ClassModel:
        fields = []

        for key in keys:
            field_path = f"{path}.{key}"
            try:
                field_type = self.infer(obj[key], key, field_path)
            except RecursiveShapeError as e:
                self.error_handler.record_diagnostic(ErrorType.CIRCULAR, str(e), field_path)
                field_type = TypeDescriptor.unknown()

            fields.append(FieldSpec(raw_key=key, identifier=key, type=field_type))

        shape = Shape(fields=tuple(fields), path=path)
        return self.builder.build(shape, self.namespace, class_name, shape_key=shape_key)

    def _infer_array(self, array: JsonArray, field_key: str, path: str) -> TypeDescriptor:
        """Type an array as scalar union, collection of a class, or opaque."""
        analysis = self.detector.analyze_list_patterns(array.items)

        if analysis["is_empty"]:
            return TypeDescriptor.opaque_array()

        if not analysis["has_composites"]:
            return TypeDescriptor.array_of(self.detector.detect_element_types(array.items))

        merged = self._merge_elements(array.items, f"{path}[]")
        if merged is None:
            return TypeDescriptor.opaque_array()

        model = self.infer_object(merged, field_key, f"{path}[]")
        return TypeDescriptor.collection(model.ref)

    def _merge_elements(self, items: Sequence[JsonValue], path: str) -> Optional[JsonObject]:
        """
        Merge the object elements of an array.

        Returns:
            Synthetic object, or None when the array is empty or holds
            anything besides objects and nulls
        """
        analysis = self.detector.analyze_list_patterns(items)

        if analysis["is_empty"]:
            return None

        if not analysis["mergeable"]:
            self.error_handler.record_diagnostic(
                ErrorType.STRUCTURE,
                f"Array elements cannot be merged into one shape "
                f"({', '.join(sorted(analysis['item_types']))}); typed as untyped array",
                path
            )
            return None

        objects = [item for item in items if self.detector.detect_element_type(item) == DataType.OBJECT]
        return self.merger.merge(objects, path)
