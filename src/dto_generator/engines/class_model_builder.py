"""Builder assembling class models from inferred shapes."""

import logging
from dataclasses import replace
from typing import List, Optional, Set
from ..error_handler import ErrorHandler
from ..models import ClassModel, FieldSpec, MethodDescriptor, Shape, ShapeKey
from ..types import CaseMode, ErrorType, MethodKind
from .name_casing_engine import NameCasingEngine


class ClassModelBuilder:
    """
    Builds the final ClassModel for one shape.

    Resolves each field's identifier through the casing engine, keeps the
    inferred types, derives the cross-namespace ``uses`` set from the field
    types, and synthesizes getter/setter descriptors when enabled.
    """

    def __init__(self, casing_engine: Optional[NameCasingEngine] = None,
                 casing: CaseMode = CaseMode.NONE,
                 getters: bool = False,
                 setters: bool = False,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the class model builder.

        Args:
            casing_engine: Optional NameCasingEngine instance
            casing: Casing mode for field identifiers
            getters: Synthesize a getter per field
            setters: Synthesize a setter per field
            error_handler: Optional ErrorHandler collecting diagnostics
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.casing_engine = casing_engine or NameCasingEngine(casing, self.logger)
        self.casing = casing
        self.getters = getters
        self.setters = setters
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def build(self, shape: Shape, namespace: str, name: str,
              shape_key: Optional[ShapeKey] = None) -> ClassModel:
        """
        Build a class model.

        Args:
            shape: Inferred shape; field identifiers may still be raw keys
            namespace: Namespace of the class
            name: Class name, already unique within the namespace
            shape_key: Dedup key the class is registered under

        Returns:
            ClassModel with resolved identifiers, uses and methods
        """
        fields = self._resolve_fields(shape, name)
        uses = sorted({
            spec.type.class_ref.qualified_name
            for spec in fields
            if spec.type.class_ref is not None and spec.type.class_ref.namespace != namespace
        })
        methods = self._build_methods(fields)

        self.logger.debug(f"Built {name} with {len(fields)} fields and {len(methods)} methods")

        return ClassModel(
            namespace=namespace,
            class_name=name,
            fields=tuple(fields),
            uses=tuple(uses),
            methods=tuple(methods),
            shape_key=shape_key
        )

    def _resolve_fields(self, shape: Shape, class_name: str) -> List[FieldSpec]:
        """Apply casing to every field, dropping identifier collisions."""
        fields = []
        seen: Set[str] = set()

        for spec in shape.fields:
            identifier = self.casing_engine.to_identifier(spec.raw_key, self.casing)

            if identifier in seen:
                self.error_handler.record_diagnostic(
                    ErrorType.NAMING,
                    f"Field '{spec.raw_key}' maps to identifier '{identifier}' "
                    f"already used in {class_name}; skipped",
                    f"{shape.path}.{spec.raw_key}"
                )
                continue

            seen.add(identifier)
            fields.append(replace(spec, identifier=identifier, nullable=True))

        return fields

    def _build_methods(self, fields: List[FieldSpec]) -> List[MethodDescriptor]:
        methods = []

        for spec in fields:
            suffix = self.casing_engine.to_pascal(spec.identifier) or spec.identifier

            if self.getters:
                methods.append(MethodDescriptor(
                    name=f"get{suffix}",
                    kind=MethodKind.GETTER,
                    field_name=spec.identifier,
                    type=spec.type
                ))

            if self.setters:
                methods.append(MethodDescriptor(
                    name=f"set{suffix}",
                    kind=MethodKind.SETTER,
                    field_name=spec.identifier,
                    type=spec.type
                ))

        return methods
