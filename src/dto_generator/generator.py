"""Main DTO generator implementation."""

import logging
import time
from typing import List, Optional
from .config import GeneratorConfig
from .data_type_detector import DataTypeDetector
from .engines import ClassModelBuilder, NameCasingEngine, ShapeRegistry
from .error_handler import ErrorHandler
from .models import ClassModel, JsonValue
from .parser import JSONParser
from .processors import SchemaInferencer, ShapeMerger
from .types import Diagnostic, ErrorType, GenerationResult, InputError, ProcessingError


class DtoGenerator:
    """
    Generates data-class models from sample JSON documents.

    Each run is an independent pass: a fresh registry and fresh inference
    components are created for it, and the class models it returns are
    ordered so that every class comes after the classes it references,
    with the root class last.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the DTO generator.

        Args:
            config: Optional GeneratorConfig; defaults are used when omitted
            logger: Optional logger instance
        """
        self.config = config or GeneratorConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)

    def generate(self, json_string: str) -> GenerationResult:
        """
        Generate class models from a JSON document.

        Args:
            json_string: JSON text whose root is an object or array

        Returns:
            GenerationResult; on a fatal input error ``success`` is False,
            ``classes`` is empty and ``errors`` explains why
        """
        try:
            classes = self.generate_or_raise(json_string)
        except ProcessingError as e:
            response = self.error_handler.handle_processing_error(e)
            return GenerationResult(
                success=False,
                classes=[],
                diagnostics=self.error_handler.diagnostics,
                errors=[str(e)],
                suggested_action=response.suggested_action
            )

        return GenerationResult(
            success=True,
            classes=classes,
            diagnostics=self.error_handler.diagnostics
        )

    def generate_or_raise(self, json_string: str) -> List[ClassModel]:
        """
        Generate class models, raising on fatal input errors.

        Args:
            json_string: JSON text whose root is an object or array

        Returns:
            Class models in emission order, root class last

        Raises:
            InputError: If the configuration or the document is invalid
        """
        self.error_handler.reset()
        self._validate_config()

        value = self.parser.parse(json_string)
        stats = self.parser.get_structure_statistics(value)
        self.logger.debug(
            f"Document has {stats['object_count']} objects, {stats['array_count']} arrays, "
            f"max depth {stats['max_depth']}"
        )

        return self._run(value)

    def generate_from_value(self, value: JsonValue) -> List[ClassModel]:
        """
        Generate class models from an already parsed value tree.

        Raises:
            InputError: If the configuration is invalid or the root is a scalar
        """
        self.error_handler.reset()
        self._validate_config()
        return self._run(value)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Diagnostics recorded by the most recent run."""
        return self.error_handler.diagnostics

    def _validate_config(self) -> None:
        validation = self.error_handler.validate_config(self.config)
        if not validation.is_valid:
            first = validation.errors[0]
            raise InputError(
                f"Invalid configuration: {'; '.join(error.message for error in validation.errors)}",
                first.type,
                context=validation.errors
            )

    def _run(self, value: JsonValue) -> List[ClassModel]:
        start_time = time.time()
        config = self.config
        namespace = config.normalized_namespace
        casing = config.casing_mode

        casing_engine = NameCasingEngine(casing, self.logger)
        detector = DataTypeDetector(detect_dates=config.dates, logger=self.logger)
        registry = ShapeRegistry(self.logger)
        builder = ClassModelBuilder(
            casing_engine=casing_engine,
            casing=casing,
            getters=config.getters,
            setters=config.setters,
            error_handler=self.error_handler,
            logger=self.logger
        )
        merger = ShapeMerger(detector, self.error_handler, self.logger)
        inferencer = SchemaInferencer(
            registry,
            builder,
            namespace,
            merger=merger,
            detector=detector,
            casing_engine=casing_engine,
            error_handler=self.error_handler,
            logger=self.logger
        )

        try:
            inferencer.infer_root(value, config.root_name)
        except RecursionError:
            raise InputError("JSON nesting is too deep to infer", ErrorType.STRUCTURE)

        classes = registry.models()
        elapsed = time.time() - start_time
        self.logger.info(
            f"Generated {len(classes)} classes in {namespace} "
            f"({len(self.error_handler.diagnostics)} diagnostics, {elapsed:.3f}s)"
        )
        return classes
