#!/usr/bin/env python3

"""
Standard BED record schemas.

Column layout follows the UCSC BED definition:
https://genome.ucsc.edu/FAQ/FAQformat.html#format1
"""

from enum import IntEnum
from typing import Dict, Type

from .exceptions import SchemaError
from .field_types import Char, Int32
from .record import Record, record_schema


class BedColumn(IntEnum):
    """Column positions of the twelve standard BED fields."""
    CHROM = 0
    START = 1
    END = 2
    NAME = 3
    SCORE = 4
    STRAND = 5
    THICK_START = 6
    THICK_END = 7
    ITEM_RGB = 8
    BLOCK_COUNT = 9
    BLOCK_SIZES = 10
    BLOCK_STARTS = 11


@record_schema
class Bed3(Record):
    """Chromosome name with a 0-based, half-open interval."""
    chrom: str
    start: Int32
    end: Int32


@record_schema
class Bed6(Record):
    """BED3 plus feature name, score and strand."""
    chrom: str
    start: Int32
    end: Int32
    name: str
    score: str
    strand: Char


@record_schema
class Bed12(Record):
    """Full BED12 record including thick region, colour and block layout."""
    chrom: str
    start: Int32
    end: Int32
    name: str
    score: str
    strand: Char
    thick_start: Int32
    thick_end: Int32
    item_rgb: str
    block_count: Int32
    block_sizes: str
    block_starts: str


SCHEMAS: Dict[int, Type[Record]] = {
    3: Bed3,
    6: Bed6,
    12: Bed12,
}


def schema_for_columns(column_count: int) -> Type[Record]:
    """Return the standard schema with the given number of columns."""
    try:
        return SCHEMAS[column_count]
    except KeyError:
        supported = ', '.join(str(n) for n in sorted(SCHEMAS))
        raise SchemaError(f"No standard BED schema with {column_count} columns "
                          f"(supported: {supported})") from None
