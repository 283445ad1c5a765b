"""Core type definitions for the DTO generator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Sequence

if TYPE_CHECKING:
    from .models import ClassModel


class DataType(Enum):
    """Enumeration of JSON element categories."""
    OBJECT = "object"
    ARRAY = "array"
    PRIMITIVE = "primitive"


class TypeKind(Enum):
    """Enumeration of inferred field types."""
    UNKNOWN = "mixed"
    STRING = "string"
    DATE = "date"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    OBJECT = "object"
    ARRAY = "array"
    COLLECTION = "collection"


class CaseMode(Enum):
    """Enumeration of field casing modes."""
    NONE = "none"
    CAMEL = "camel"
    SNAKE = "snake"
    KEBAB = "kebab"
    PASCAL = "pascal"


class MethodKind(Enum):
    """Enumeration of accessor method kinds."""
    GETTER = "getter"
    SETTER = "setter"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    NAMESPACE = "namespace"
    CASING = "casing"
    NAMING = "naming"
    AMBIGUOUS = "ambiguous"
    CIRCULAR = "circular"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal problem recorded while inferring a document."""
    type: ErrorType
    message: str
    location: str

    def to_dict(self) -> dict:
        return {"type": self.type.value, "message": self.message, "location": self.location}


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


@dataclass
class GenerationResult:
    """Result of a generation run."""
    success: bool
    classes: List['ClassModel']
    diagnostics: List[Diagnostic] = field(default_factory=list)
    errors: Optional[List[str]] = None
    suggested_action: Optional[str] = None


@dataclass(frozen=True)
class RenderedClass:
    """One output artifact produced by a renderer."""
    path: str
    content: str


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class InputError(ProcessingError):
    """Fatal error in the input document or the run configuration."""


class RecursiveShapeError(ProcessingError):
    """Raised when a shape is reached again while it is still being built."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.CIRCULAR, context)


# Abstract base classes for interfaces

class RendererInterface(ABC):
    """Abstract interface for turning class models into output artifacts."""

    @abstractmethod
    def render(self, classes: Sequence['ClassModel']) -> Iterator[RenderedClass]:
        """Render each class model into exactly one artifact, in order."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def record_diagnostic(self, error_type: ErrorType, message: str, location: str) -> Diagnostic:
        """Record a recoverable problem and continue."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
