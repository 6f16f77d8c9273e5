"""Character predicates used by the tokenizer."""

from typing import Dict, Optional


# Escape target -> decoded character. \uXXXX is not supported.
_ESCAPES: Dict[str, str] = {
    '"': '"',
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

# Decoded character -> escape sequence; '/' is left as is.
_REESCAPE: Dict[str, str] = {
    '"': '\\"',
    '\\': '\\\\',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}

_WHITESPACE = frozenset(' \t\n\r')


class CharClassifier:
    """Pure predicates over single characters of JSON source."""

    WHITESPACE = _WHITESPACE
    ESCAPES = _ESCAPES

    @staticmethod
    def is_whitespace(c: str) -> bool:
        """Space, horizontal tab, line feed or carriage return."""
        return c in _WHITESPACE

    @staticmethod
    def is_unescaped(c: str) -> bool:
        """
        Check whether a character may appear literally inside a string.

        Accepted ranges are U+0020-U+0021, U+0023-U+005B and U+005D upwards,
        i.e. everything except control characters, the quotation mark and
        the reverse solidus.
        """
        return (
            '\x20' <= c <= '\x21'
            or '\x23' <= c <= '\x5b'
            or c >= '\x5d'
        )

    @staticmethod
    def is_escape_target(c: str) -> bool:
        return c in _ESCAPES

    @staticmethod
    def escape(c: str) -> Optional[str]:
        """Return the character a ``\\c`` sequence decodes to, or None."""
        return _ESCAPES.get(c)

    @staticmethod
    def reescape(text: str) -> str:
        """Inverse of escape decoding over a whole string."""
        return "".join(_REESCAPE.get(c, c) for c in text)

    @staticmethod
    def is_digit(c: str) -> bool:
        """ASCII digits only; ``str.isdigit`` also accepts other scripts."""
        return '0' <= c <= '9'

    @staticmethod
    def is_number_start(c: str) -> bool:
        return c == '-' or CharClassifier.is_digit(c)
