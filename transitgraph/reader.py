#!/usr/bin/python3

# Copyright (C) 2007 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import csv

from . import problems


class CsvRecordReader(object):
    """Reads the rows of one feed file as dicts keyed by the header row.

  Rows are decoded lazily, one at a time, while iterating. line_num is the
  line of the row most recently returned, counting the header as line 1.
  Anything the csv module can't make sense of raises problems.CsvSyntax.
  """

    def __init__(self, stream, file_name):
        """Initialize a new CsvRecordReader object.

    Args:
      stream: binary file-like object with the contents of the file
      file_name: name used in error messages, e.g. "stops.txt"
    """
        self._file_name = file_name
        self._reader = csv.reader(
            self._DecodeLines(stream), strict=True, skipinitialspace=True
        )
        self.header = None
        self.line_num = 0

    def _DecodeLines(self, stream):
        """Yield the physical lines of stream decoded as UTF-8.

    Each line is decoded on its own so a bad byte is reported on its line.
    """
        for line_num, line in enumerate(stream, 1):
            try:
                text = line.decode("utf-8")
            except UnicodeDecodeError:
                raise self._SyntaxError(
                    "contains bytes which aren't valid UTF-8", line_num
                )
            # Strip any UTF-8 Byte Order Marker, otherwise it'd be treated as
            # part of the first column name.
            if line_num == 1 and text.startswith("\ufeff"):
                text = text[1:]
            yield text

    def _SyntaxError(self, description, line_num=None):
        if line_num is None:
            line_num = self._reader.line_num + 1
        return problems.CsvSyntax(self._file_name, line_num, description)

    def _NextRow(self):
        """Return the next raw row and the line it starts on, or (None, None)."""
        start_line = self._reader.line_num + 1
        try:
            return next(self._reader), start_line
        except StopIteration:
            return None, None
        except csv.Error as e:
            raise self._SyntaxError("CSV syntax error: %s" % e, start_line)

    def _ReadHeader(self):
        raw_header, line_num = self._NextRow()
        if raw_header is None:  # empty file
            return None
        header = [h.strip() for h in raw_header]
        seen = set()
        for column in header:
            if not column:
                raise self._SyntaxError(
                    "The header row should not contain any blank values.",
                    line_num,
                )
            if column in seen:
                raise self._SyntaxError(
                    'Column "%s" appears more than once in the header row.'
                    % column,
                    line_num,
                )
            seen.add(column)
        self.line_num = line_num
        return header

    def __iter__(self):
        self.header = self._ReadHeader()
        if self.header is None:
            return
        while True:
            row, line_num = self._NextRow()
            if row is None:
                return
            if len(row) == 0:  # skip extra empty lines in file
                continue
            self.line_num = line_num
            if len(row) != len(self.header):
                raise self._SyntaxError(
                    "Found %d cells in line %d but the header (first line) "
                    "has %d. Every row in the file should have the same "
                    "number of cells as the header does."
                    % (len(row), line_num, len(self.header)),
                    line_num,
                )
            # We strip ALL whitespace from around values.
            yield dict(zip(self.header, [value.strip() for value in row]))
