"""Shape model: the ordered fields of one object and its dedup key."""

import hashlib
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple
from .type_descriptor import TypeDescriptor


@dataclass(frozen=True)
class FieldSpec:
    """
    One field of a shape.

    ``identifier`` starts out equal to ``raw_key`` and is replaced by the
    cased identifier when the owning class model is built. Fields are
    always nullable: sample data can never prove a key is mandatory.
    """

    raw_key: str
    identifier: str
    type: TypeDescriptor
    nullable: bool = True

    def __post_init__(self):
        """Validate field after initialization."""
        if not self.identifier:
            raise ValueError("identifier cannot be empty")

        if not self.nullable:
            raise ValueError("inferred fields are always nullable")

    @property
    def map_name(self) -> Optional[str]:
        """Original JSON key when the identifier differs from it."""
        return self.raw_key if self.identifier != self.raw_key else None

    def to_dict(self) -> dict:
        """Convert field to dictionary for JSON serialization."""
        return {
            "name": self.identifier,
            "type": self.type.to_dict(),
            "nullable": self.nullable,
            "mapName": self.map_name,
        }


@dataclass(frozen=True)
class ShapeKey:
    """Deterministic hash over a shape's normalized field-name set."""

    names: Tuple[str, ...]
    digest: str

    @classmethod
    def from_names(cls, raw_names: Iterable[str],
                   normalize: Callable[[str], str]) -> 'ShapeKey':
        """
        Build a key from raw field names.

        Args:
            raw_names: Field names as they appear in the JSON
            normalize: Casing normalizer applied to each name

        Returns:
            ShapeKey over the sorted, de-duplicated normalized names
        """
        names = tuple(sorted({normalize(name) for name in raw_names}))
        digest = hashlib.md5("|".join(names).encode("utf-8")).hexdigest()
        return cls(names=names, digest=digest)

    def __str__(self) -> str:
        return f"{{{', '.join(self.names)}}}"


@dataclass(frozen=True)
class Shape:
    """Ordered sequence of fields describing one object's structure."""

    fields: Tuple[FieldSpec, ...]
    path: str = "root"

    @property
    def raw_keys(self) -> Tuple[str, ...]:
        return tuple(spec.raw_key for spec in self.fields)

    def __len__(self) -> int:
        return len(self.fields)
