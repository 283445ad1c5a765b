"""
DTO Generator - Data-class model inference from sample JSON.

Infers typed, deduplicated class models from JSON documents and hands
them to a renderer for emission.
"""

__version__ = "1.0.0"

from .generator import DtoGenerator
from .config import GeneratorConfig
from .models import ClassModel, FieldSpec, MethodDescriptor, TypeDescriptor
from .types import Diagnostic, GenerationResult, InputError, ProcessingError, RecursiveShapeError

__all__ = [
    "DtoGenerator",
    "GeneratorConfig",
    "ClassModel",
    "FieldSpec",
    "MethodDescriptor",
    "TypeDescriptor",
    "Diagnostic",
    "GenerationResult",
    "InputError",
    "ProcessingError",
    "RecursiveShapeError",
]
