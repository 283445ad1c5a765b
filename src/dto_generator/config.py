"""Run configuration for the DTO generator."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from .types import CaseMode, ErrorType, InputError
from .utils.validation import ValidationUtils

DEFAULT_NAMESPACE = "App\\Data"
DEFAULT_ROOT_NAME = "Root"


@dataclass
class GeneratorConfig:
    """
    Options recognized by one generation run.

    ``casing`` may be given as a CaseMode member or its string value;
    it is checked by ``ErrorHandler.validate_config`` before a run starts.
    """

    namespace: str = DEFAULT_NAMESPACE
    casing: Union[CaseMode, str] = CaseMode.NONE
    getters: bool = False
    setters: bool = False
    dates: bool = False
    root_name: str = DEFAULT_ROOT_NAME

    @classmethod
    def from_options(cls, namespace: Optional[str] = None,
                     casing: Optional[str] = None,
                     getters: bool = False,
                     setters: bool = False,
                     all: bool = False,
                     dates: bool = False,
                     root_name: Optional[str] = None) -> 'GeneratorConfig':
        """
        Build a config from loosely-typed option values.

        Args:
            namespace: Target namespace; default when None or blank
            casing: Casing mode value; ``none`` when None or blank
            getters: Synthesize getters
            setters: Synthesize setters
            all: Shorthand for getters and setters
            dates: Classify date-like strings as dates
            root_name: Name the root class is derived from

        Returns:
            GeneratorConfig instance
        """
        return cls(
            namespace=namespace if namespace and namespace.strip() else DEFAULT_NAMESPACE,
            casing=casing.strip().lower() if casing and casing.strip() else CaseMode.NONE,
            getters=getters or all,
            setters=setters or all,
            dates=dates,
            root_name=root_name or DEFAULT_ROOT_NAME
        )

    @property
    def casing_mode(self) -> CaseMode:
        """
        Casing as a CaseMode member.

        Raises:
            InputError: If the casing value is not a known mode
        """
        if isinstance(self.casing, CaseMode):
            return self.casing

        try:
            return CaseMode(self.casing)
        except ValueError:
            result = ValidationUtils.validate_casing(self.casing)
            raise InputError(result.errors[0].message, ErrorType.CASING, context=self.casing)

    @property
    def normalized_namespace(self) -> str:
        """Namespace without a leading separator, segments joined by ``\\``."""
        return "\\".join(ValidationUtils.split_namespace(self.namespace))

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "namespace": self.normalized_namespace,
            "casing": self.casing.value if isinstance(self.casing, CaseMode) else self.casing,
            "getters": self.getters,
            "setters": self.setters,
            "dates": self.dates,
            "rootName": self.root_name,
        }
