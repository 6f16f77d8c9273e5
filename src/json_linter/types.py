"""Core type definitions for the JSON Linter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Deque, List, Optional

if TYPE_CHECKING:
    from .models.document import Document
    from .models.token import Token


DEFAULT_INDENT_WIDTH = 4


class TokenType(Enum):
    """Enumeration of lexical token kinds."""
    NULL = "null"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    COLON = ":"
    COMMA = ","
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    END_OF_INPUT = "end of input"


class NodeType(Enum):
    """Enumeration of document tree node kinds."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class ErrorType(Enum):
    """Enumeration of error types."""
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    NESTING = "nesting"
    INPUT = "input"


@dataclass
class FormatResult:
    """Result of a format operation."""
    success: bool
    output: str
    error: Optional[str] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    message: str
    suggested_action: str


class JSONLintError(Exception):
    """Base exception for every diagnostic the pipeline can produce."""

    error_type = ErrorType.SYNTAX

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class LexError(JSONLintError):
    """Malformed character stream."""

    error_type = ErrorType.LEXICAL


class ParseError(JSONLintError):
    """Malformed token stream."""

    error_type = ErrorType.SYNTAX


class NestingError(JSONLintError):
    """Document nested deeper than the interpreter can recurse."""

    error_type = ErrorType.NESTING


class InputError(JSONLintError):
    """Arguments handed to the pipeline are unusable."""

    error_type = ErrorType.INPUT


# Abstract base classes for interfaces

class TokenizerInterface(ABC):
    """Abstract interface for the tokenizer."""

    @abstractmethod
    def __iter__(self) -> "TokenizerInterface":
        pass

    @abstractmethod
    def __next__(self) -> "Token":
        """Return the next token or raise StopIteration after END_OF_INPUT."""
        pass


class ParserInterface(ABC):
    """Abstract interface for the parser."""

    @abstractmethod
    def parse(self, tokens: Deque["Token"]) -> "Document":
        """Build one document tree from a token buffer."""
        pass


class GeneratorInterface(ABC):
    """Abstract interface for the generator."""

    @abstractmethod
    def generate(self, document: "Document") -> str:
        """Render a document tree as indented text."""
        pass


class JSONFormatterInterface(ABC):
    """Abstract interface for the JSON formatter."""

    @abstractmethod
    def format(self, json_text: str, indent_width: Optional[int] = None) -> FormatResult:
        """Validate and pretty-print JSON text."""
        pass

    @abstractmethod
    def tokenize(self, json_text: str) -> Deque["Token"]:
        """Scan JSON text into a token buffer."""
        pass

    @abstractmethod
    def parse(self, json_text: str) -> "Document":
        """Scan and parse JSON text into a document tree."""
        pass

