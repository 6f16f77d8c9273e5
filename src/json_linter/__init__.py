"""
JSON Linter - Validate and pretty-print JSON text.

Tokenizes raw JSON, parses the tokens into a document tree and renders
the tree back as canonically indented text.
"""

from .json_formatter import JSONFormatter, pretty_json
from .tokenizer import Tokenizer
from .parser import JSONParser
from .generator import Generator
from .models import Document, Token
from .types import (
    DEFAULT_INDENT_WIDTH,
    FormatResult,
    JSONLintError,
    LexError,
    ParseError,
    NestingError,
    InputError,
)

__version__ = "1.0.0"
__all__ = [
    "JSONFormatter",
    "pretty_json",
    "Tokenizer",
    "JSONParser",
    "Generator",
    "Document",
    "Token",
    "DEFAULT_INDENT_WIDTH",
    "FormatResult",
    "JSONLintError",
    "LexError",
    "ParseError",
    "NestingError",
    "InputError",
]
