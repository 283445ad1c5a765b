"""Data models for the DTO generator."""

from .json_value import (
    JsonValue,
    JsonNull,
    JsonBool,
    JsonInt,
    JsonFloat,
    JsonString,
    JsonArray,
    JsonObject,
    from_python,
)
from .type_descriptor import ClassRef, TypeDescriptor
from .shape import FieldSpec, Shape, ShapeKey
from .class_model import ClassModel, MethodDescriptor

__all__ = [
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonInt",
    "JsonFloat",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "from_python",
    "ClassRef",
    "TypeDescriptor",
    "FieldSpec",
    "Shape",
    "ShapeKey",
    "ClassModel",
    "MethodDescriptor",
]
