"""Lazy JSON tokenizer."""

import logging
from typing import Optional
from .types import TokenizerInterface, TokenType, LexError
from .models import Token
from .utils import CharClassifier


_PUNCTUATION = {
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    '[': TokenType.LEFT_BRACKET,
    ']': TokenType.RIGHT_BRACKET,
    ':': TokenType.COLON,
    ',': TokenType.COMMA,
}


class Tokenizer(TokenizerInterface):
    """
    Pull-based scanner over a JSON source string.

    Iterating yields one Token per call and stops after END_OF_INPUT has
    been yielded. A LexError is raised from ``__next__`` at the first
    malformed character; the iterator is finished afterwards. Characters
    are never re-examined once consumed.
    """

    def __init__(self, source: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the tokenizer.

        Args:
            source: JSON text to scan
            logger: Optional logger instance
        """
        self.source = source
        self.logger = logger or logging.getLogger(__name__)
        self._cur = 0
        self._done = False

    def __iter__(self) -> 'Tokenizer':
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration
        try:
            token = self.next_token()
        except LexError:
            self._done = True
            raise
        if token.is_end():
            self._done = True
            self.logger.debug(f"Tokenizer reached end of input at position {token.position}")
        return token

    @property
    def position(self) -> int:
        return self._cur

    def next_token(self) -> Token:
        """
        Scan one token starting at the cursor.

        Returns:
            The scanned Token

        Raises:
            LexError: If the characters at the cursor do not form a token
        """
        self._skip_whitespace()

        start = self._cur
        c = self._front()

        if c is None:
            return Token.of(TokenType.END_OF_INPUT, start)
        if CharClassifier.is_number_start(c):
            return self._tokenize_number()
        if c == '"':
            return self._tokenize_string()
        if c in _PUNCTUATION:
            self._pop()
            return Token.of(_PUNCTUATION[c], start)
        if c == 't':
            self._expect_keyword("true")
            return Token.boolean(True, start)
        if c == 'f':
            self._expect_keyword("false")
            return Token.boolean(False, start)
        if c == 'n':
            self._expect_keyword("null")
            return Token.of(TokenType.NULL, start)

        raise LexError(
            f"The tokenizer found an unexpected character {c!r} at position {start}.",
            start,
        )

    def _front(self) -> Optional[str]:
        if self._cur < len(self.source):
            return self.source[self._cur]
        return None

    def _pop(self) -> Optional[str]:
        c = self._front()
        if c is not None:
            self._cur += 1
        return c

    def _skip_whitespace(self) -> None:
        while True:
            c = self._front()
            if c is None or not CharClassifier.is_whitespace(c):
                break
            self._cur += 1

    def _tokenize_number(self) -> Token:
        start = self._cur
        digits = []

        if self._front() == '-':
            digits.append(self._pop())

        while True:
            c = self._front()
            if c is None or not CharClassifier.is_digit(c):
                break
            digits.append(self._pop())

        text = "".join(digits)
        if text == "-":
            found = self._front()
            if found is None:
                message = f"The tokenizer expected a digit after '-' at position {start}, but reached end of input."
            else:
                message = f"The tokenizer expected a digit after '-' at position {start}, but found {found!r}."
            raise LexError(message, self._cur)

        return Token.number(text, start)

    def _tokenize_string(self) -> Token:
        start = self._cur
        self._pop()  # opening quote
        chars = []

        while True:
            c = self._front()
            if c is None:
                raise LexError(
                    f"The tokenizer reached end of input before finding '\"' "
                    f"which closes the string starting at position {start}.",
                    self._cur,
                )
            if c == '"':
                self._pop()
                break
            if c == '\\':
                chars.append(self._pop_escape())
            elif CharClassifier.is_unescaped(c):
                chars.append(self._pop())
            else:
                raise LexError(
                    f"The tokenizer found an unexpected character {c!r} "
                    f"inside a string at position {self._cur}.",
                    self._cur,
                )

        return Token.string("".join(chars), start)

    def _pop_escape(self) -> str:
        backslash = self._cur
        self._pop()
        c = self._front()

        if c is None:
            raise LexError(
                f"The tokenizer reached end of input after '\\' at position {backslash}.",
                self._cur,
            )
        if c == 'u':
            raise LexError(
                f"Unicode escapes (\\uXXXX) are not supported (position {backslash}).",
                backslash,
            )
        if not CharClassifier.is_escape_target(c):
            raise LexError(
                f"The next character of '\\' must be an escape target, "
                f"but found {c!r} at position {self._cur}.",
                self._cur,
            )

        self._pop()
        return CharClassifier.escape(c)

    def _expect_keyword(self, keyword: str) -> None:
        for expected in keyword:
            c = self._front()
            if c is None:
                raise LexError(
                    f"The tokenizer expected {expected!r} while reading {keyword!r}, "
                    f"but reached end of input.",
                    self._cur,
                )
            if c != expected:
                raise LexError(
                    f"The tokenizer expected {expected!r} while reading {keyword!r}, "
                    f"but found {c!r} at position {self._cur}.",
                    self._cur,
                )
            self._pop()
