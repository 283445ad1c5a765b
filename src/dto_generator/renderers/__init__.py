"""Renderers turning class models into output artifacts."""

from .namespace_resolver import NamespaceFolderResolver
from .json_renderer import JsonDescriptionRenderer

__all__ = ["NamespaceFolderResolver", "JsonDescriptionRenderer"]
