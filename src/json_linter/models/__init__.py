"""Data models for the JSON Linter."""

from .token import Token
from .document import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    from_python,
)

__all__ = [
    "Token",
    "Document",
    "JsonNull",
    "JsonBoolean",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "from_python",
]
