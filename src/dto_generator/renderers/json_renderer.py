"""JSON description renderer for class models."""

import json
import logging
from typing import Iterator, Optional, Sequence
from ..models import ClassModel
from ..types import RenderedClass, RendererInterface
from .namespace_resolver import NamespaceFolderResolver


class JsonDescriptionRenderer(RendererInterface):
    """
    Renders each class model as a JSON description.

    One artifact is produced per class model, in the order the models
    are given.
    """

    def __init__(self, resolver: Optional[NamespaceFolderResolver] = None,
                 indent: int = 2,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the renderer.

        Args:
            resolver: Optional NamespaceFolderResolver for artifact paths
            indent: JSON indentation
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = resolver or NamespaceFolderResolver(logger=self.logger)
        self.indent = indent

    def render(self, classes: Sequence[ClassModel]) -> Iterator[RenderedClass]:
        for model in classes:
            path = self.resolver.class_path(model)
            self.logger.debug(f"Rendering {model.qualified_name} to {path}")
            yield RenderedClass(
                path=path,
                content=json.dumps(model.to_dict(), indent=self.indent, ensure_ascii=False)
            )

    def render_document(self, classes: Sequence[ClassModel]) -> str:
        """
        Render all class models as one JSON list.

        Returns:
            JSON text of ``[{"path": ..., "class": {...}}, ...]``
        """
        document = [
            {"path": self.resolver.class_path(model), "class": model.to_dict()}
            for model in classes
        ]
        return json.dumps(document, indent=self.indent, ensure_ascii=False)
