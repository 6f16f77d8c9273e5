"""Token model produced by the tokenizer."""

from dataclasses import dataclass, field
from typing import Optional, Union
from ..types import TokenType
from ..utils import CharClassifier


_VALUE_TYPES = (TokenType.NUMBER, TokenType.STRING, TokenType.BOOLEAN)


@dataclass(frozen=True)
class Token:
    """
    One lexical unit of JSON source.

    ``value`` is only set for NUMBER (source text), STRING (decoded text)
    and BOOLEAN tokens. ``position`` is the character offset the token
    started at; it is carried for diagnostics and ignored by equality.
    """

    type: TokenType
    value: Optional[Union[str, bool]] = None
    position: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate token after initialization."""
        self._validate()

    def _validate(self) -> None:
        if self.type in _VALUE_TYPES and self.value is None:
            raise ValueError(f"{self.type.name} token requires a value")

        if self.type not in _VALUE_TYPES and self.value is not None:
            raise ValueError(f"{self.type.name} token cannot carry a value")

        if self.type == TokenType.BOOLEAN and not isinstance(self.value, bool):
            raise ValueError("BOOLEAN token value must be a bool")

    @classmethod
    def number(cls, text: str, position: Optional[int] = None) -> 'Token':
        return cls(TokenType.NUMBER, text, position)

    @classmethod
    def string(cls, text: str, position: Optional[int] = None) -> 'Token':
        return cls(TokenType.STRING, text, position)

    @classmethod
    def boolean(cls, value: bool, position: Optional[int] = None) -> 'Token':
        return cls(TokenType.BOOLEAN, value, position)

    @classmethod
    def of(cls, token_type: TokenType, position: Optional[int] = None) -> 'Token':
        """Create a token that carries no value (punctuation, null, end)."""
        return cls(token_type, None, position)

    def is_end(self) -> bool:
        return self.type == TokenType.END_OF_INPUT

    def describe(self) -> str:
        """Single-line human readable form used in error messages."""
        if self.type == TokenType.NUMBER:
            return f"number {self.value}"
        if self.type == TokenType.STRING:
            return f'string "{CharClassifier.reescape(self.value)}"'
        if self.type == TokenType.BOOLEAN:
            return "true" if self.value else "false"
        if self.type in (TokenType.NULL, TokenType.END_OF_INPUT):
            return self.type.value
        return f"'{self.type.value}'"
