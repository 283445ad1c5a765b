"""Tagged JSON value tree built at the parse boundary."""

from dataclasses import dataclass
from typing import Any, Dict, ItemsView, KeysView, Tuple, Union


@dataclass(frozen=True)
class JsonNull:
    """JSON ``null``."""


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonInt:
    value: int


@dataclass(frozen=True)
class JsonFloat:
    value: float


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: Tuple['JsonValue', ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class JsonObject:
    """
    JSON object with key insertion order preserved.

    The mapping is never mutated after construction; merged objects are
    always built as new instances.
    """

    members: Dict[str, 'JsonValue']

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, key: str) -> 'JsonValue':
        return self.members[key]

    def __contains__(self, key: str) -> bool:
        return key in self.members

    def keys(self) -> KeysView[str]:
        return self.members.keys()

    def items(self) -> ItemsView[str, 'JsonValue']:
        return self.members.items()


JsonValue = Union[JsonNull, JsonBool, JsonInt, JsonFloat, JsonString, JsonArray, JsonObject]

SCALAR_TYPES = (JsonNull, JsonBool, JsonInt, JsonFloat, JsonString)


def from_python(data: Any) -> JsonValue:
    """
    Convert a decoded ``json.loads`` result into a tagged value tree.

    Args:
        data: Value produced by the standard JSON decoder

    Returns:
        Equivalent JsonValue

    Raises:
        TypeError: If the value is not something JSON can produce
    """
    match data:
        case None:
            return JsonNull()
        case bool():
            return JsonBool(data)
        case int():
            return JsonInt(data)
        case float():
            return JsonFloat(data)
        case str():
            return JsonString(data)
        case list() | tuple():
            return JsonArray(tuple(from_python(item) for item in data))
        case dict():
            return JsonObject({str(key): from_python(value) for key, value in data.items()})
        case _:
            raise TypeError(f"Unsupported JSON value type: {type(data).__name__}")
