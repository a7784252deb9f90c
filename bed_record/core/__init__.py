#!/usr/bin/env python3

"""
Core module for BED record handling.

Contains the generic record type, field codecs, standard schemas, stream
reading and writing, exception types and reader configuration.
"""

from .exceptions import (
    BedRecordError, SchemaError, UnsupportedFieldTypeError, ParseError,
    MalformedIntegerError, EmptyCharacterTokenError, FieldCountMismatchError,
    ConfigurationError
)
from .field_types import Int32, Char, INT32_MIN, INT32_MAX, FieldCodec, codec_for
from .record import Record, record_schema, split_line
from .schemas import BedColumn, Bed3, Bed6, Bed12, SCHEMAS, schema_for_columns
from .config import ReaderConfig, load_config
from .parsers import BedReader, read_record, read_records, write_record, write_records

__all__ = [
    'BedRecordError', 'SchemaError', 'UnsupportedFieldTypeError', 'ParseError',
    'MalformedIntegerError', 'EmptyCharacterTokenError', 'FieldCountMismatchError',
    'ConfigurationError',
    'Int32', 'Char', 'INT32_MIN', 'INT32_MAX', 'FieldCodec', 'codec_for',
    'Record', 'record_schema', 'split_line',
    'BedColumn', 'Bed3', 'Bed6', 'Bed12', 'SCHEMAS', 'schema_for_columns',
    'ReaderConfig', 'load_config',
    'BedReader', 'read_record', 'read_records', 'write_record', 'write_records'
]
