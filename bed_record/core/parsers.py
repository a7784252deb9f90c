#!/usr/bin/env python3

"""
Stream reading and writing of BED records.

read_record/write_record/write_records work on any text stream object with
readline() or write(). BedReader layers the usual BED file conventions (meta
lines, blank lines, line numbers in errors, skip-or-raise policy) on top of
single-line reads.
"""

import logging
from typing import IO, Iterable, Iterator, List, Optional, Type

from .config import ReaderConfig
from .exceptions import ParseError
from .record import Record


def write_record(stream: IO[str], record: Record) -> None:
    """Write one record without a trailing newline."""
    stream.write(record.to_string())


def write_records(stream: IO[str], records: Iterable[Record]) -> int:
    """Write records one per line, in the given order. Returns the count."""
    lines = [record.to_string() + '\n' for record in records]
    stream.write(''.join(lines))
    logging.debug(f"Wrote {len(lines)} records")
    return len(lines)


def read_record(stream: IO[str], record: Record) -> bool:
    """
    Read the next line of a stream into an existing record.

    Returns False at end of stream, leaving the record untouched. Parse
    errors propagate and also leave the record untouched.
    """
    line = stream.readline()
    if not line:
        return False
    record.parse_line(line)
    return True


class BedReader:
    """Iterate over the records of a BED text stream."""

    def __init__(self, stream: IO[str], schema: Type[Record],
                 config: Optional[ReaderConfig] = None, source: str = ""):
        self.stream = stream
        self.schema = schema
        self.config = config or ReaderConfig()
        self.source = source or str(getattr(stream, 'name', ''))
        self.line_number = 0
        self.records_read = 0
        self.errors: List[ParseError] = []

    def __iter__(self) -> Iterator[Record]:
        while True:
            line = self.stream.readline()
            if not line:
                break
            self.line_number += 1

            if self._is_skippable(line):
                continue

            try:
                record = self.schema.from_line(line)
            except ParseError as e:
                e.source = self.source
                e.line_number = self.line_number
                self._handle_error(e)
                continue

            self.records_read += 1
            if self.config.log_progress_every and self.records_read % self.config.log_progress_every == 0:
                logging.debug(f"Read {self.records_read} records ({self.line_number} lines)")
            yield record

        logging.info(f"Read {self.records_read} {self.schema.__name__} records "
                     f"from {self.source or 'stream'}, skipped {len(self.errors)} malformed lines")

    def _is_skippable(self, line: str) -> bool:
        if self.config.skip_blank_lines and not line.strip():
            return True
        return bool(self.config.comment_prefixes) and line.startswith(self.config.comment_prefixes)

    def _handle_error(self, error: ParseError) -> None:
        if self.config.on_error == 'raise':
            raise error

        self.errors.append(error)
        logging.warning(f"Skipping malformed line: {error}")
        if self.config.max_errors and len(self.errors) > self.config.max_errors:
            raise ParseError(f"Too many malformed lines (limit {self.config.max_errors})",
                             source=self.source, line_number=self.line_number) from error


def read_records(stream: IO[str], schema: Type[Record],
                 config: Optional[ReaderConfig] = None, source: str = "") -> List[Record]:
    """Read every record of a stream into a list."""
    return list(BedReader(stream, schema, config=config, source=source))
