"""Namespace to folder mapping for rendered classes."""

import logging
from typing import Dict, Optional
from ..models import ClassModel
from ..types import ErrorType, InputError
from ..utils.validation import ValidationUtils


class NamespaceFolderResolver:
    """
    Maps namespaces onto relative folders.

    Without a prefix map every namespace separator becomes ``/``. With a
    PSR-4-like prefix map (``{"App\\\\": "app/"}``) the first entry whose
    root segment matches the namespace replaces that prefix.
    """

    def __init__(self, prefix_map: Optional[Dict[str, str]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the resolver.

        Args:
            prefix_map: Optional mapping of namespace prefix to folder
            logger: Optional logger instance
        """
        self.prefix_map = dict(prefix_map or {})
        self.logger = logger or logging.getLogger(__name__)

    def namespace_to_folder(self, namespace: str) -> str:
        """
        Resolve the folder a namespace lives in.

        Args:
            namespace: Namespace such as ``App\\Data``

        Returns:
            Relative folder path using ``/`` separators

        Raises:
            InputError: If the namespace is invalid
        """
        validation = ValidationUtils.validate_namespace(namespace)
        if not validation.is_valid:
            raise InputError(validation.errors[0].message, ErrorType.NAMESPACE, context=namespace)

        segments = ValidationUtils.split_namespace(namespace)

        for prefix, folder in self.prefix_map.items():
            prefix_segments = [segment for segment in prefix.strip("\\").split("\\") if segment]
            if not prefix_segments or prefix_segments[0] != segments[0]:
                continue

            remainder = segments[len(prefix_segments):]
            base = folder.rstrip("/")
            resolved = "/".join([base, *remainder]) if base else "/".join(remainder)
            self.logger.debug(f"Resolved namespace {namespace} to {resolved} via prefix {prefix}")
            return resolved

        return "/".join(segments)

    def class_path(self, model: ClassModel, extension: str = "json") -> str:
        """Relative path of the artifact rendered for a class model."""
        return f"{self.namespace_to_folder(model.namespace)}/{model.class_name}.{extension}"
