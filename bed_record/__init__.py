#!/usr/bin/env python3

"""
BED Record

Typed, fixed-shape records for tab-delimited BED lines with symmetric
parsing and formatting.

This package provides:
- A generic Record base class whose columns are declared as typed attributes
- Text, 32-bit integer and single-character field codecs
- Standard BED3, BED6 and BED12 schemas
- Line-oriented stream reading and writing
- Specific exception types for malformed input

Modules:
- core: Record type, codecs, schemas, parsers, exceptions and configuration
- tests: unittest suite
"""

__version__ = "1.0.0"

from .core.record import Record, record_schema
from .core.field_types import Int32, Char
from .core.schemas import BedColumn, Bed3, Bed6, Bed12, schema_for_columns
from .core.parsers import BedReader, read_record, read_records, write_record, write_records
from .core.exceptions import (
    BedRecordError, SchemaError, UnsupportedFieldTypeError, ParseError,
    MalformedIntegerError, EmptyCharacterTokenError, FieldCountMismatchError,
    ConfigurationError
)
from .core.config import ReaderConfig, load_config

__all__ = [
    # Record type
    'Record', 'record_schema', 'Int32', 'Char',
    # Schemas
    'BedColumn', 'Bed3', 'Bed6', 'Bed12', 'schema_for_columns',
    # Streams
    'BedReader', 'read_record', 'read_records', 'write_record', 'write_records',
    # Exceptions
    'BedRecordError', 'SchemaError', 'UnsupportedFieldTypeError', 'ParseError',
    'MalformedIntegerError', 'EmptyCharacterTokenError', 'FieldCountMismatchError',
    'ConfigurationError',
    # Configuration
    'ReaderConfig', 'load_config'
]
