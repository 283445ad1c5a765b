"""Inference processors for JSON documents."""

from .shape_merger import ShapeMerger
from .schema_inferencer import SchemaInferencer

__all__ = ["ShapeMerger", "SchemaInferencer"]
