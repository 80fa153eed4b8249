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


import logging


class Error(Exception):
    pass


class ExceptionWithContext(Error):
    """Base class for the problems raised while loading a feed.

  Keyword arguments are saved as attributes and interpolated into the
  ERROR_TEXT of the subclass. A context tuple of (file_name, line_num) may be
  passed to locate the problem in the feed.
  """

    ERROR_TEXT = "%(description)s"

    CONTEXT_PARTS = ["file_name", "line_num"]

    def __init__(self, context=None, **kwargs):
        Exception.__init__(self)
        self.__dict__.update(self.ContextTupleToDict(context))
        self.__dict__.update(kwargs)

    @staticmethod
    def ContextTupleToDict(context):
        """Convert a tuple representing a context into a dict of (key, value) pairs
    """
        d = {}
        if not context:
            return d
        for k, v in zip(ExceptionWithContext.CONTEXT_PARTS, context):
            if v != "" and v is not None:  # Don't ignore int(0), a valid line_num
                d[k] = v
        return d

    def GetDictToFormat(self):
        """Return a copy of self as a dict, suitable for passing to FormatProblem"""
        return dict(self.__dict__)

    def FormatProblem(self, d=None):
        """Return a text string describing the problem.

    Args:
      d: map returned by GetDictToFormat
    """
        if not d:
            d = self.GetDictToFormat()
        return self.__class__.ERROR_TEXT % d

    def FormatContext(self):
        """Return a text string describing the context"""
        text = ""
        if hasattr(self, "file_name"):
            text += self.file_name
        if hasattr(self, "line_num"):
            text += ":%i" % self.line_num
        return text

    def __str__(self):
        context = self.FormatContext()
        if context:
            return "%s: %s" % (context, self.FormatProblem())
        return self.FormatProblem()

    def __eq__(self, y):
        return (
            self.__class__ == y.__class__
            and self.GetDictToFormat() == y.GetDictToFormat()
        )

    __hash__ = Exception.__hash__


class FeedAccessError(ExceptionWithContext):
    """The feed or one of its files could not be opened."""

    def __str__(self):
        return self.FormatProblem()


class FeedNotFound(FeedAccessError):
    ERROR_TEXT = "Couldn't find a feed named %(feed_name)s"


class UnknownFormat(FeedAccessError):
    ERROR_TEXT = (
        "The feed named %(feed_name)s had an unknown format:\n"
        "feeds should be either .zip files or directories."
    )


class MissingFile(FeedAccessError):
    ERROR_TEXT = "Could not open required file %(file_name)s"


class ParseError(ExceptionWithContext):
    """A fatal problem with one record of the feed.

  Attributes:
    file_name: name of the file holding the record, e.g. "stops.txt"
    line_num: 1-based line number of the record, the header being line 1
    description: human readable message
  """

    def __init__(self, file_name, line_num, description):
        ExceptionWithContext.__init__(
            self, context=(file_name, line_num), description=description
        )


class CsvSyntax(ParseError):
    """The file could not be tokenized. Always fatal."""


class FieldError(object):
    """The failure result of building an entity from one record.

  Materializers and consistency checks return a FieldError instead of raising
  so that the loader decides, from the parse options, whether the record is
  dropped or the parse aborts.
  """

    def __init__(self, column_name, value, reason, line_num=None):
        self.column_name = column_name
        self.value = value
        self.reason = reason
        # Set for problems found after a file was read, e.g. by the
        # consistency checks, which know the line of the offending element.
        self.line_num = line_num

    def FormatProblem(self):
        if self.value is None or self.value == "":
            return "%s: %s" % (self.column_name, self.reason)
        return 'Invalid value "%s" in field %s: %s' % (
            self.value,
            self.column_name,
            self.reason,
        )

    def __str__(self):
        return self.FormatProblem()

    def __repr__(self):
        return "<FieldError %s>" % self.FormatProblem()


# Add a default handler to send log messages to console
console = logging.StreamHandler()
console.setLevel(logging.WARNING)
log = logging.getLogger("transitgraph")
log.addHandler(console)
