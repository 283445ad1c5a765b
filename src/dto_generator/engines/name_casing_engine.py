"""Field identifier casing and class naming."""

import logging
import re
from typing import List, Optional
from ..types import CaseMode

# Underscores, hyphens and whitespace separate words
_SEP = re.compile(r"[\s_\-]+")

# camelCase boundary, digits count as the lowercase side: "v2Config" -> "v2 Config"
_UPPER_LOWER = re.compile(r"([a-z0-9])([A-Z])")

# Acronym run followed by a capitalized word: "URLParser" -> "URL Parser"
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Anything left that cannot appear in an identifier word
_NON_WORD = re.compile(r"[^\w]+")

_IRREGULAR_SINGULARS = {
    "people": "person",
    "children": "child",
    "men": "man",
    "women": "woman",
    "mice": "mouse",
    "geese": "goose",
    "feet": "foot",
    "teeth": "tooth",
    "statuses": "status",
    "aliases": "alias",
    "indices": "index",
}

_UNCOUNTABLE = {"data", "news", "series", "species", "information", "metadata", "equipment"}

_ES_ENDINGS = ("sses", "shes", "ches", "xes")

_S_KEEP_ENDINGS = ("ss", "us", "is")


class NameCasingEngine:
    """
    Turns raw JSON keys into target identifiers and class names.

    Field identifiers follow the configured casing mode. Class names never
    depend on it: the source key is singularized, pascal-cased and given
    the class suffix.
    """

    CLASS_SUFFIX = "Data"

    def __init__(self, casing: CaseMode = CaseMode.NONE, logger: Optional[logging.Logger] = None):
        """
        Initialize the casing engine.

        Args:
            casing: Default casing mode for field identifiers
            logger: Optional logger instance
        """
        self.casing = casing
        self.logger = logger or logging.getLogger(__name__)

    def split_words(self, key: str) -> List[str]:
        """
        Split a key written in any common convention into words.

        ``"firstName"``, ``"first_name"``, ``"first-name"`` and
        ``"FirstName"`` all yield ``["first", "Name"]``-style word lists
        that differ only in letter case.
        """
        s = _SEP.sub(" ", key)
        s = _UPPER_LOWER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        s = _NON_WORD.sub(" ", s)
        return s.split()

    @staticmethod
    def _capitalize(word: str) -> str:
        return word[:1].upper() + word[1:].lower()

    def to_identifier(self, raw_key: str, casing: Optional[CaseMode] = None) -> str:
        """
        Transform a raw JSON key into a field identifier.

        Args:
            raw_key: Key as it appears in the JSON
            casing: Casing mode; defaults to the engine's configured mode

        Returns:
            The identifier. Keys without any word characters are returned
            unchanged whatever the mode.
        """
        casing = casing or self.casing
        words = self.split_words(raw_key)

        if not words:
            return raw_key

        match casing:
            case CaseMode.NONE:
                return raw_key
            case CaseMode.CAMEL:
                return words[0].lower() + "".join(self._capitalize(word) for word in words[1:])
            case CaseMode.PASCAL:
                return "".join(self._capitalize(word) for word in words)
            case CaseMode.SNAKE:
                return "_".join(word.lower() for word in words)
            case CaseMode.KEBAB:
                return "-".join(word.lower() for word in words)
            case _:
                raise ValueError(f"Unsupported casing mode: {casing!r}")

    def normalize_key(self, raw_key: str) -> str:
        """
        Casing-insensitive form of a key used for shape deduplication.

        ``"userId"``, ``"user_id"`` and ``"user-id"`` all normalize to
        ``"user_id"``.
        """
        words = self.split_words(raw_key)
        if not words:
            return raw_key.lower()
        return "_".join(word.lower() for word in words)

    def singularize(self, word: str) -> str:
        """
        Singular form of an English word using common suffix rules.

        Letter case of the first character is preserved.
        """
        lower = word.lower()

        if lower in _UNCOUNTABLE:
            return word

        if lower in _IRREGULAR_SINGULARS:
            singular = _IRREGULAR_SINGULARS[lower]
            return singular[:1].upper() + singular[1:] if word[:1].isupper() else singular

        if lower.endswith("ies") and len(lower) > 3:
            return word[:-3] + ("Y" if word[-3:].isupper() else "y")

        if lower.endswith(_ES_ENDINGS):
            return word[:-2]

        if lower.endswith("s") and not lower.endswith(_S_KEEP_ENDINGS) and len(lower) > 1:
            return word[:-1]

        return word

    def to_pascal(self, name: str) -> str:
        """Pascal-case a name regardless of the configured casing mode."""
        return "".join(self._capitalize(word) for word in self.split_words(name))

    def class_name(self, source_key: str) -> str:
        """
        Derive a class name from the key an object was found under.

        Args:
            source_key: JSON key (or root name) of the object

        Returns:
            Singular pascal-cased name ending in the class suffix,
            e.g. ``"users"`` -> ``"UserData"``, ``"user_data"`` -> ``"UserData"``
        """
        words = self.split_words(source_key)
        if words:
            words[-1] = self.singularize(words[-1])

        name = "".join(self._capitalize(word) for word in words) + self.CLASS_SUFFIX
        doubled = self.CLASS_SUFFIX * 2
        while doubled in name:
            name = name.replace(doubled, self.CLASS_SUFFIX)

        return name
