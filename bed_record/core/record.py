#!/usr/bin/env python3

"""
Generic fixed-shape record type.

A schema is declared as a subclass of Record decorated with @record_schema.
Each annotated attribute becomes one tab-delimited column, in declaration
order. The decorator resolves a codec for every field once, when the class is
created, so formatting and parsing only walk a precomputed codec tuple.

Values are not checked on construction. Char fields must hold exactly one
character for a formatted record to parse back to an equal one.

    @record_schema
    class Peak(Record):
        chrom: str
        start: Int32
        end: Int32
        strand: Char = '.'
"""

import inspect
import operator
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Iterable, List, Sequence, Tuple, get_origin, get_type_hints

from .exceptions import FieldCountMismatchError, ParseError, SchemaError
from .field_types import FieldCodec, codec_for


def split_line(line: str) -> List[str]:
    """Strip one line terminator and split on tabs."""
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line.split('\t')


class Record:
    """Base class for tab-delimited records with a fixed schema."""

    _fields: ClassVar[Tuple[str, ...]] = ()
    _codecs: ClassVar[Tuple[FieldCodec, ...]] = ()

    @classmethod
    def field_count(cls) -> int:
        return len(cls._fields)

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return cls._fields

    @classmethod
    def from_tuple(cls, values: Iterable[Any]) -> 'Record':
        """Build a record holding the given values in schema order."""
        values = tuple(values)
        if len(values) != len(cls._fields):
            raise TypeError(f"{cls.__name__} takes {len(cls._fields)} values, got {len(values)}")
        return cls(*values)

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> 'Record':
        record = cls()
        record.bind_tokens(tokens)
        return record

    @classmethod
    def from_line(cls, line: str) -> 'Record':
        """Parse one BED line into a new record."""
        record = cls()
        record.parse_line(line)
        return record

    @classmethod
    def convert_tokens(cls, tokens: Sequence[str]) -> List[Any]:
        """Convert one token per field into typed values."""
        if len(tokens) != len(cls._codecs):
            raise FieldCountMismatchError(len(cls._codecs), len(tokens))

        values = []
        for name, codec, token in zip(cls._fields, cls._codecs, tokens):
            try:
                values.append(codec.parse(token))
            except ParseError as e:
                e.field_name = name
                raise
        return values

    def bind_tokens(self, tokens: Sequence[str]) -> None:
        """
        Overwrite every field from a tokenized line.

        All tokens are converted before any field is assigned, so a failing
        token leaves the record as it was.
        """
        values = self.convert_tokens(tokens)
        for name, value in zip(self._fields, values):
            setattr(self, name, value)

    def parse_line(self, line: str) -> None:
        self.bind_tokens(split_line(line))

    def to_string(self) -> str:
        """Format as tab-separated text without a trailing newline."""
        return '\t'.join(codec.format(getattr(self, name))
                         for name, codec in zip(self._fields, self._codecs))

    def __str__(self):
        return self.to_string()

    def astuple(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def get(self, index: int) -> Any:
        """Return the value of the field at a column index."""
        return getattr(self, self._field_name(index))

    def set(self, index: int, value: Any) -> None:
        """Replace the value of the field at a column index."""
        setattr(self, self._field_name(index), value)

    def copy(self) -> 'Record':
        return type(self)(*self.astuple())

    def assign(self, other: 'Record') -> 'Record':
        """Copy every field of another record of the same schema into this one."""
        if type(other) is not type(self):
            raise TypeError(f"Cannot assign {type(other).__name__} to {type(self).__name__}")
        for name in self._fields:
            setattr(self, name, getattr(other, name))
        return self

    def _field_name(self, index: int) -> str:
        index = operator.index(index)
        if not 0 <= index < len(self._fields):
            raise IndexError(f"{type(self).__name__} has no field at index {index}")
        return self._fields[index]


def _is_classvar(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


def record_schema(cls):
    """
    Turn a Record subclass into an ordered dataclass with bound field codecs.

    Fields without an explicit default take their codec's default (empty text,
    zero, NUL character). Raises SchemaError for a schema with no fields and
    UnsupportedFieldTypeError for an annotation with no codec.
    """
    if not issubclass(cls, Record):
        raise SchemaError(f"{cls.__name__} must derive from Record")

    hints = get_type_hints(cls)
    for name in inspect.get_annotations(cls):
        hint = hints[name]
        if _is_classvar(hint):
            continue
        codec = codec_for(hint, name)
        if name not in cls.__dict__:
            setattr(cls, name, codec.default)

    cls = dataclass(order=True)(cls)

    names = tuple(f.name for f in fields(cls))
    if not names:
        raise SchemaError(f"{cls.__name__} declares no fields")

    cls._fields = names
    cls._codecs = tuple(codec_for(hints[name], name) for name in names)
    return cls
