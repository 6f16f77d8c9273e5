"""Main JSON Formatter implementation."""

import logging
from collections import deque
from contextlib import contextmanager, nullcontext
from typing import Deque, Optional
from .types import (
    DEFAULT_INDENT_WIDTH,
    FormatResult,
    JSONFormatterInterface,
    JSONLintError,
    NestingError,
)
from .models import Document, Token
from .tokenizer import Tokenizer
from .parser import JSONParser
from .generator import Generator
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class JSONFormatter(JSONFormatterInterface):
    """
    Main implementation of the JSON Formatter interface.

    Runs raw text through the tokenizer, the parser and the generator. Each
    stage completes before the next one starts; the first error of any
    stage ends the run.
    """

    def __init__(self, default_indent_width: int = DEFAULT_INDENT_WIDTH,
                 escape_strings: bool = True,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = False):
        """
        Initialize the JSON Formatter.

        Args:
            default_indent_width: Indent width used when format() gets none
            escape_strings: Re-escape special characters in generated strings
            logger: Optional logger instance
            enable_profiling: Record per-stage metrics in ``self.profiler``
        """
        self.default_indent_width = default_indent_width
        self.escape_strings = escape_strings
        self.logger = logger or logging.getLogger(__name__)
        self.enable_profiling = enable_profiling

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.logger)
        self.profiler = PerformanceProfiler(self.logger)

        self.error_handler.raise_for_validation(
            self.error_handler.validate_indent_width(default_indent_width)
        )

    def format(self, json_text: str, indent_width: Optional[int] = None) -> FormatResult:
        """
        Validate and pretty-print JSON text.

        Args:
            json_text: Raw JSON text, any value type at the root
            indent_width: Spaces per nesting level (defaults to
                ``default_indent_width``)

        Returns:
            FormatResult with the formatted text or the first error message
        """
        if indent_width is None:
            indent_width = self.default_indent_width

        try:
            output = self.pretty_json(json_text, indent_width)
        except JSONLintError as e:
            response = self.error_handler.handle_error(e)
            return FormatResult(success=False, output="", error=response.message)

        self.logger.info(f"Formatted {len(json_text)} characters into {len(output)} characters")
        return FormatResult(success=True, output=output)

    def pretty_json(self, json_text: str, indent_width: Optional[int] = None) -> str:
        """
        Validate and pretty-print JSON text, raising on failure.

        Raises:
            JSONLintError: The first lexical, syntax, nesting or input error
        """
        if indent_width is None:
            indent_width = self.default_indent_width

        self.error_handler.raise_for_validation(self.error_handler.validate_indent_width(indent_width))
        document = self.parse(json_text)
        return self.generate(document, indent_width)

    def tokenize(self, json_text: str) -> Deque[Token]:
        """
        Scan JSON text into a token buffer ending with END_OF_INPUT.

        Raises:
            InputError: If json_text is not a str
            LexError: At the first malformed character
        """
        self.error_handler.raise_for_validation(self.error_handler.validate_input(json_text))

        with self._stage("tokenize", len(json_text)) as stage:
            tokens = deque(Tokenizer(json_text, self.logger))
            if stage is not None:
                stage.output_size = len(tokens)

        self.logger.debug(f"Tokenized input into {len(tokens)} tokens")
        return tokens

    def parse(self, json_text: str) -> Document:
        """
        Scan and parse JSON text into a document tree.

        Raises:
            LexError, ParseError, NestingError, InputError
        """
        tokens = self.tokenize(json_text)

        with self._stage("parse", len(tokens)) as stage:
            with self._recursion_guard("parsing"):
                document = self.parser.parse(tokens)
            if stage is not None:
                stage.output_size = 1

        return document

    def generate(self, document: Document, indent_width: Optional[int] = None) -> str:
        """
        Render a document tree at the given indent width.

        Raises:
            InputError: If indent_width is not a non-negative int
            NestingError: If the tree is too deep to render recursively
        """
        if indent_width is None:
            indent_width = self.default_indent_width

        self.error_handler.raise_for_validation(self.error_handler.validate_indent_width(indent_width))
        generator = Generator(indent_width, self.escape_strings, self.logger)

        with self._stage("generate", 1) as stage:
            with self._recursion_guard("generating"):
                text = generator.generate(document)
            if stage is not None:
                stage.output_size = len(text)

        return text

    def _stage(self, name: str, input_size: int):
        if self.enable_profiling:
            return self.profiler.profile_operation(name, input_size)
        return nullcontext()

    @contextmanager
    def _recursion_guard(self, activity: str):
        try:
            yield
        except RecursionError:
            raise NestingError(f"Document is nested too deeply for {activity}.") from None


def pretty_json(json_text: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Pretty-print JSON text with a default formatter.

    Args:
        json_text: Raw JSON text
        indent_width: Spaces per nesting level

    Returns:
        The canonically indented text

    Raises:
        JSONLintError: The first lexical, syntax, nesting or input error
    """
    return JSONFormatter(indent_width).pretty_json(json_text)
