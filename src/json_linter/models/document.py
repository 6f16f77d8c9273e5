"""Document tree model built by the parser."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union
from ..types import NodeType


@dataclass(frozen=True)
class JsonNull:
    """The ``null`` literal."""

    @property
    def node_type(self) -> NodeType:
        return NodeType.NULL

    def to_python(self) -> Any:
        return None


@dataclass(frozen=True)
class JsonBoolean:
    """A ``true`` or ``false`` literal."""

    value: bool

    @property
    def node_type(self) -> NodeType:
        return NodeType.BOOLEAN

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class JsonNumber:
    """
    A number kept as its source text.

    The text is never evaluated while formatting so that large integers
    survive unchanged.
    """

    text: str

    def __post_init__(self):
        if not self.text:
            raise ValueError("text cannot be empty")

    @property
    def node_type(self) -> NodeType:
        return NodeType.NUMBER

    def to_python(self) -> Any:
        return int(self.text)


@dataclass(frozen=True)
class JsonString:
    """A string literal holding the decoded text."""

    value: str

    @property
    def node_type(self) -> NodeType:
        return NodeType.STRING

    def to_python(self) -> Any:
        return self.value


@dataclass
class JsonArray:
    """An ordered sequence of child documents."""

    items: List['Document'] = field(default_factory=list)

    @property
    def node_type(self) -> NodeType:
        return NodeType.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> Any:
        return [item.to_python() for item in self.items]


@dataclass
class JsonObject:
    """
    An ordered mapping from key to child document.

    Assigning an existing key replaces its value but keeps the key at the
    position where it was first inserted.
    """

    members: Dict[str, 'Document'] = field(default_factory=dict)

    @property
    def node_type(self) -> NodeType:
        return NodeType.OBJECT

    def __len__(self) -> int:
        return len(self.members)

    def set_member(self, key: str, value: 'Document') -> None:
        self.members[key] = value

    def to_python(self) -> Any:
        return {key: value.to_python() for key, value in self.members.items()}


Document = Union[JsonNull, JsonBoolean, JsonNumber, JsonString, JsonArray, JsonObject]


def from_python(data: Any) -> Document:
    """
    Build a document tree from plain Python values.

    Args:
        data: ``None``, ``bool``, ``int``, ``str``, ``list`` or ``dict`` (with
            string keys), nested arbitrarily

    Returns:
        The equivalent document tree

    Raises:
        TypeError: If a value has no JSON counterpart in this model
    """
    if data is None:
        return JsonNull()
    if isinstance(data, bool):
        return JsonBoolean(data)
    if isinstance(data, int):
        return JsonNumber(str(data))
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, list):
        return JsonArray([from_python(item) for item in data])
    if isinstance(data, dict):
        obj = JsonObject()
        for key, value in data.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key).__name__}")
            obj.set_member(key, from_python(value))
        return obj
    raise TypeError(f"Unsupported value type: {type(data).__name__}")
