"""Recursive-descent JSON parser."""

import logging
from collections import deque
from typing import Deque, Iterable, Optional, Tuple
from .types import ParserInterface, ParseError, TokenType
from .models import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Token,
)


class JSONParser(ParserInterface):
    """
    Recursive-descent parser over a token buffer.

    Grammar, one token of lookahead::

        text    := value
        value   := object | array | number | string | boolean | null
        object  := '{' '}' | '{' member (',' member)* '}'
        member  := string ':' value
        array   := '[' ']' | '[' value (',' value)* ']'

    The first violation raises ParseError; there is no recovery. Parsing
    stops once the root value is complete, so tokens after it are left
    unread. Keys are not checked for duplicates: a repeated key overwrites
    the earlier value.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._tokens: Deque[Token] = deque()

    def parse(self, tokens: Iterable[Token]) -> Document:
        """
        Parse a token sequence into a document tree.

        Args:
            tokens: Tokens in source order, normally ending in END_OF_INPUT

        Returns:
            The root Document

        Raises:
            ParseError: If the tokens do not start with a JSON value
        """
        self._tokens = tokens if isinstance(tokens, deque) else deque(tokens)
        try:
            document = self._value()
            if self._tokens and not self._front().is_end():
                self.logger.debug(f"Ignoring tokens after the root value, starting at position {self._front().position}")
        finally:
            self._tokens = deque()

        self.logger.debug(f"Parsed document with root type: {document.node_type.value}")
        return document

    def _front(self) -> Optional[Token]:
        return self._tokens[0] if self._tokens else None

    def _pop(self) -> Optional[Token]:
        return self._tokens.popleft() if self._tokens else None

    def _error(self, message: str, token: Optional[Token]) -> ParseError:
        position = token.position if token is not None else None
        return ParseError(message, position)

    def _consume(self, expected: TokenType) -> Token:
        """Pop the next token, failing unless it has the expected type."""
        head = self._pop()
        if head is not None and head.type == expected:
            return head
        if head is None or head.is_end():
            raise self._error(f"Expected a token '{expected.value}', but reached end of input.", head)
        raise self._error(
            f"Expected a token '{expected.value}', but found an unexpected token "
            f"{head.describe()} at position {head.position}.",
            head,
        )

    def _assume(self, expected: TokenType) -> bool:
        """Pop the next token only if it has the expected type."""
        head = self._front()
        if head is not None and head.type == expected:
            self._pop()
            return True
        return False

    def _value(self) -> Document:
        head = self._front()
        kind = head.type if head is not None else None

        if kind == TokenType.LEFT_BRACE:
            return self._object()
        if kind == TokenType.LEFT_BRACKET:
            return self._array()
        if kind == TokenType.NUMBER:
            return self._number()
        if kind == TokenType.STRING:
            return self._string()
        if kind == TokenType.BOOLEAN:
            return self._boolean()
        if kind == TokenType.NULL:
            return self._null()

        if head is None or head.is_end():
            raise self._error("Expected a value, but reached end of input.", head)
        raise self._error(
            f"Parser found an unexpected token {head.describe()} "
            f"at position {head.position} while parsing value.",
            head,
        )

    def _object(self) -> JsonObject:
        obj = JsonObject()
        self._consume(TokenType.LEFT_BRACE)

        if self._assume(TokenType.RIGHT_BRACE):
            return obj

        key, value = self._member()
        obj.set_member(key, value)

        while not self._assume(TokenType.RIGHT_BRACE):
            self._consume(TokenType.COMMA)
            key, value = self._member()
            obj.set_member(key, value)

        return obj

    def _member(self) -> Tuple[str, Document]:
        key = self._string().value
        self._consume(TokenType.COLON)
        return key, self._value()

    def _array(self) -> JsonArray:
        array = JsonArray()
        self._consume(TokenType.LEFT_BRACKET)

        if self._assume(TokenType.RIGHT_BRACKET):
            return array

        array.items.append(self._value())

        while not self._assume(TokenType.RIGHT_BRACKET):
            self._consume(TokenType.COMMA)
            array.items.append(self._value())

        return array

    def _number(self) -> JsonNumber:
        return JsonNumber(self._consume(TokenType.NUMBER).value)

    def _string(self) -> JsonString:
        return JsonString(self._consume(TokenType.STRING).value)

    def _boolean(self) -> JsonBoolean:
        return JsonBoolean(self._consume(TokenType.BOOLEAN).value)

    def _null(self) -> JsonNull:
        self._consume(TokenType.NULL)
        return JsonNull()
