"""Registry deduplicating structurally identical shapes."""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Set
from ..models import ClassModel, ShapeKey
from ..types import ProcessingError, ErrorType, RecursiveShapeError


class ShapeRegistry:
    """
    Append-only mapping from ShapeKey to ClassModel for one generation run.

    Class models are kept in registration order, which is the order they
    are emitted in. A key is registered exactly once and its class model
    is never replaced or removed. Class names are reserved when a build
    starts so that every name stays unique within its namespace.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize an empty registry.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._models: Dict[str, ClassModel] = {}
        self._in_progress: Dict[str, str] = {}
        self._reserved_names: Dict[str, Set[str]] = {}

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, key: ShapeKey) -> bool:
        return key.digest in self._models

    def __iter__(self) -> Iterator[ClassModel]:
        return iter(list(self._models.values()))

    def lookup(self, key: ShapeKey) -> Optional[ClassModel]:
        """Return the class model registered for a key, if any."""
        return self._models.get(key.digest)

    def models(self) -> List[ClassModel]:
        """All registered class models in emission order."""
        return list(self._models.values())

    def get_or_create(self, key: ShapeKey, namespace: str, base_name: str,
                      factory: Callable[[str], ClassModel]) -> ClassModel:
        """
        Return the class model for a shape, building it on first sight.

        Args:
            key: Dedup key of the shape
            namespace: Namespace a new class is created in
            base_name: Preferred class name for a new class
            factory: Called with the reserved class name to build the model

        Returns:
            The registered ClassModel for the key

        Raises:
            RecursiveShapeError: If the key is reached again while its own
                class is still being built
        """
        existing = self._models.get(key.digest)
        if existing is not None:
            self.logger.debug(f"Shape {key} already registered as {existing.class_name}")
            return existing

        if key.digest in self._in_progress:
            owner = self._in_progress[key.digest]
            raise RecursiveShapeError(
                f"Shape {key} contains itself (class {owner})",
                context={"shape": key.names, "class": owner}
            )

        class_name = self.reserve_name(namespace, base_name)
        self._in_progress[key.digest] = class_name
        self.logger.debug(f"Building {class_name} for new shape {key}")

        try:
            model = factory(class_name)
        finally:
            del self._in_progress[key.digest]

        self.register(key, model)
        return model

    def register(self, key: ShapeKey, model: ClassModel) -> None:
        """
        Register a class model under a key.

        Raises:
            ProcessingError: If the key is already registered
        """
        if key.digest in self._models:
            raise ProcessingError(
                f"Shape {key} is already registered as {self._models[key.digest].class_name}",
                ErrorType.STRUCTURE
            )

        self._reserved_names.setdefault(model.namespace, set()).add(model.class_name)
        self._models[key.digest] = model

    def reserve_name(self, namespace: str, base_name: str) -> str:
        """
        Reserve a class name that is unique within a namespace.

        The first request gets ``base_name``; later ones get a numeric
        suffix: ``ItemData``, ``ItemData2``, ``ItemData3``.
        """
        taken = self._reserved_names.setdefault(namespace, set())
        name = base_name
        counter = 2

        while name in taken:
            name = f"{base_name}{counter}"
            counter += 1

        taken.add(name)
        return name
