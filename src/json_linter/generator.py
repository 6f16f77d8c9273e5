"""Document tree to indented text."""

import logging
from typing import List, Optional
from .types import DEFAULT_INDENT_WIDTH, GeneratorInterface
from .models import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)
from .utils import CharClassifier


class Generator(GeneratorInterface):
    """
    Render a Document as canonically indented JSON text.

    Non-empty containers put every child on its own line, indented one
    ``indent_width`` block deeper than the container; empty containers
    collapse to ``[]`` / ``{}``. Output does not depend on line length.
    """

    def __init__(self, indent_width: int = DEFAULT_INDENT_WIDTH,
                 escape_strings: bool = True,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the generator.

        Args:
            indent_width: Spaces added per nesting level, must be >= 0
            escape_strings: Re-escape quotes, backslashes and the control
                characters the tokenizer decodes. When False string text is
                written verbatim between the quotes.
            logger: Optional logger instance
        """
        if indent_width < 0:
            raise ValueError("indent_width must be non-negative")

        self.indent_width = indent_width
        self.escape_strings = escape_strings
        self.logger = logger or logging.getLogger(__name__)
        self._indent = " " * indent_width

    def generate(self, document: Document) -> str:
        """
        Generate the canonical text of a document.

        Args:
            document: Root of the tree to render

        Returns:
            Formatted text without a trailing newline
        """
        text = self._generate(document, "")
        self.logger.debug(f"Generated {len(text)} characters with indent width {self.indent_width}")
        return text

    def _generate(self, node: Document, prefix: str) -> str:
        if isinstance(node, JsonNull):
            return "null"
        if isinstance(node, JsonBoolean):
            return "true" if node.value else "false"
        if isinstance(node, JsonNumber):
            return node.text
        if isinstance(node, JsonString):
            return self._quote(node.value)
        if isinstance(node, JsonArray):
            return self._generate_array(node, prefix)
        if isinstance(node, JsonObject):
            return self._generate_object(node, prefix)
        raise TypeError(f"Unsupported node type: {type(node).__name__}")

    def _generate_array(self, node: JsonArray, prefix: str) -> str:
        if not node.items:
            return "[]"

        inner = prefix + self._indent
        lines: List[str] = [inner + self._generate(item, inner) for item in node.items]
        return "[\n" + ",\n".join(lines) + "\n" + prefix + "]"

    def _generate_object(self, node: JsonObject, prefix: str) -> str:
        if not node.members:
            return "{}"

        inner = prefix + self._indent
        lines: List[str] = [
            f"{inner}{self._quote(key)}: {self._generate(value, inner)}"
            for key, value in node.members.items()
        ]
        return "{\n" + ",\n".join(lines) + "\n" + prefix + "}"

    def _quote(self, text: str) -> str:
        if self.escape_strings:
            text = CharClassifier.reescape(text)
        return f'"{text}"'
