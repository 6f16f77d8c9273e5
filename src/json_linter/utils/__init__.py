"""Utility functions for the JSON Linter."""

from .char_classifier import CharClassifier

__all__ = ["CharClassifier"]
