"""Naming, deduplication and class-building engines."""

from .name_casing_engine import NameCasingEngine
from .shape_registry import ShapeRegistry
from .class_model_builder import ClassModelBuilder

__all__ = ["NameCasingEngine", "ShapeRegistry", "ClassModelBuilder"]
