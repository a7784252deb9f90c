#!/usr/bin/env python3

"""
Custom exceptions for BED record handling.

Provides specific exception types for schema definition, parsing and
configuration failures.
"""

from typing import Optional


class BedRecordError(Exception):
    """Base exception for all BED record errors."""
    pass


class SchemaError(BedRecordError):
    """A record schema could not be built."""
    pass


class UnsupportedFieldTypeError(SchemaError):
    """A schema field is annotated with a type that has no codec."""

    def __init__(self, field_name: str, field_type: object):
        self.field_name = field_name
        self.field_type = field_type
        type_name = getattr(field_type, '__name__', repr(field_type))
        super().__init__(f"Unsupported type {type_name} for field '{field_name}'")


class ParseError(BedRecordError):
    """Error occurred while turning text into a record."""

    def __init__(self, message: str, source: str = "", line_number: int = 0,
                 field_name: str = "", token: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.line_number = line_number
        self.field_name = field_name
        self.token = token

    def __str__(self):
        message = super().__str__()
        if self.field_name:
            message = f"field '{self.field_name}': {message}"
        if self.source and self.line_number:
            return f"Parse error in {self.source} at line {self.line_number}: {message}"
        elif self.line_number:
            return f"Parse error at line {self.line_number}: {message}"
        elif self.source:
            return f"Parse error in {self.source}: {message}"
        return message


class MalformedIntegerError(ParseError):
    """Token bound to an integer field is not a valid 32-bit decimal."""
    pass


class EmptyCharacterTokenError(ParseError):
    """Token bound to a single-character field is empty."""
    pass


class FieldCountMismatchError(ParseError):
    """Number of tab-separated tokens differs from the schema's field count."""

    def __init__(self, expected: int, actual: int, source: str = "", line_number: int = 0):
        super().__init__(f"Expected {expected} tab-separated fields, found {actual}",
                         source=source, line_number=line_number)
        self.expected = expected
        self.actual = actual


class ConfigurationError(BedRecordError):
    """Error in reader configuration."""
    pass
