"""Class model: the language-neutral description of one generated class."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
from ..types import MethodKind
from .shape import FieldSpec, ShapeKey
from .type_descriptor import ClassRef, TypeDescriptor


@dataclass(frozen=True)
class MethodDescriptor:
    """
    Accessor method to synthesize for a field.

    Getters take no parameter and return the nullable field type. Setters
    take one nullable parameter of the field type and return the owning
    class so calls can be chained.
    """

    name: str
    kind: MethodKind
    field_name: str
    type: TypeDescriptor
    nullable: bool = True

    @property
    def parameter(self) -> Optional[str]:
        return self.field_name if self.kind == MethodKind.SETTER else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert method to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "field": self.field_name,
            "parameter": self.parameter,
            "type": self.type.describe(),
            "returnsSelf": self.kind == MethodKind.SETTER,
            "nullable": self.nullable,
        }


@dataclass(frozen=True)
class ClassModel:
    """
    One generated data class.

    A registered class model is never mutated; ``uses`` lists the
    qualified names of referenced classes living in other namespaces.
    """

    namespace: str
    class_name: str
    fields: Tuple[FieldSpec, ...]
    uses: Tuple[str, ...] = ()
    methods: Tuple[MethodDescriptor, ...] = ()
    shape_key: Optional[ShapeKey] = None

    def __post_init__(self):
        """Validate class model after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not self.class_name:
            raise ValueError("class_name cannot be empty")

        identifiers = [spec.identifier for spec in self.fields]
        if len(identifiers) != len(set(identifiers)):
            raise ValueError(f"duplicate field identifiers in {self.class_name}")

    @property
    def ref(self) -> ClassRef:
        return ClassRef(namespace=self.namespace, name=self.class_name)

    @property
    def qualified_name(self) -> str:
        return self.ref.qualified_name

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.identifier for spec in self.fields)

    def get_field(self, identifier: str) -> Optional[FieldSpec]:
        """Look up a field by its identifier."""
        for spec in self.fields:
            if spec.identifier == identifier:
                return spec
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert class model to dictionary for JSON serialization."""
        return {
            "namespace": self.namespace,
            "className": self.class_name,
            "fields": [spec.to_dict() for spec in self.fields],
            "uses": list(self.uses),
            "methods": [method.to_dict() for method in self.methods],
        }
