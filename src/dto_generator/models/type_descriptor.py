"""Inferred field type descriptors."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
from ..types import TypeKind

SCALAR_KINDS = (
    TypeKind.STRING,
    TypeKind.DATE,
    TypeKind.INT,
    TypeKind.FLOAT,
    TypeKind.BOOL,
    TypeKind.UNKNOWN,
)


@dataclass(frozen=True)
class ClassRef:
    """Reference to a generated class by namespace and name."""

    namespace: str
    name: str

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}\\{self.name}" if self.namespace else self.name


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Type of a single field.

    ``class_ref`` is set for OBJECT and COLLECTION kinds; ``element_types``
    holds the canonical-order union of scalar element types for a typed
    ARRAY and is empty for an opaque array.
    """

    kind: TypeKind
    class_ref: Optional[ClassRef] = None
    element_types: Tuple[TypeKind, ...] = ()

    def __post_init__(self):
        """Validate descriptor after initialization."""
        self._validate()

    def _validate(self) -> None:
        if self.kind in (TypeKind.OBJECT, TypeKind.COLLECTION) and self.class_ref is None:
            raise ValueError(f"{self.kind.value} type requires a class reference")

        if self.kind not in (TypeKind.OBJECT, TypeKind.COLLECTION) and self.class_ref is not None:
            raise ValueError(f"{self.kind.value} type cannot reference a class")

        if self.element_types and self.kind != TypeKind.ARRAY:
            raise ValueError("only array types carry element types")

        for element_type in self.element_types:
            if element_type not in SCALAR_KINDS:
                raise ValueError(f"array element type must be scalar, got {element_type.value}")

    @classmethod
    def unknown(cls) -> 'TypeDescriptor':
        return cls(TypeKind.UNKNOWN)

    @classmethod
    def scalar(cls, kind: TypeKind) -> 'TypeDescriptor':
        if kind not in SCALAR_KINDS:
            raise ValueError(f"{kind.value} is not a scalar type")
        return cls(kind)

    @classmethod
    def reference(cls, class_ref: ClassRef) -> 'TypeDescriptor':
        return cls(TypeKind.OBJECT, class_ref=class_ref)

    @classmethod
    def collection(cls, class_ref: ClassRef) -> 'TypeDescriptor':
        return cls(TypeKind.COLLECTION, class_ref=class_ref)

    @classmethod
    def array_of(cls, element_types: Iterable[TypeKind]) -> 'TypeDescriptor':
        """Build a typed array; element order in the input does not matter."""
        unique = set(element_types)
        ordered = tuple(kind for kind in SCALAR_KINDS if kind in unique)
        return cls(TypeKind.ARRAY, element_types=ordered)

    @classmethod
    def opaque_array(cls) -> 'TypeDescriptor':
        return cls(TypeKind.ARRAY)

    @property
    def is_opaque_array(self) -> bool:
        return self.kind == TypeKind.ARRAY and not self.element_types

    def describe(self) -> str:
        """
        Render a short language-neutral description of the type.

        Examples: ``int``, ``UserData``, ``array<string|int>``,
        ``collection<ItemData>``, ``array``.
        """
        if self.kind == TypeKind.OBJECT:
            return self.class_ref.name
        if self.kind == TypeKind.COLLECTION:
            return f"collection<{self.class_ref.name}>"
        if self.kind == TypeKind.ARRAY and self.element_types:
            members = "|".join(
                "null" if kind == TypeKind.UNKNOWN else kind.value
                for kind in self.element_types
            )
            return f"array<{members}>"
        return self.kind.value

    def to_dict(self) -> dict:
        """Convert descriptor to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "class": self.class_ref.qualified_name if self.class_ref else None,
            "elementTypes": [kind.value for kind in self.element_types],
            "description": self.describe(),
        }
