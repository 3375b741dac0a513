"""
Error types raised by the query/mutation engine.
"""

from __future__ import annotations


# Raised while building the schema; the process must not serve with a broken type graph.
class SchemaError(RuntimeError):
    pass


class FieldError(Exception):
    """
    A request-level failure localized to one field of a document.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ArgumentError(FieldError):
    pass


class SelectionError(FieldError):
    pass
