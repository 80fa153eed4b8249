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

"""Builds entities from the field maps produced by the CSV reader.

Each entity class lists its columns in _SCHEMA as Field objects. BuildEntity
is the one driver shared by all of them: it converts every column, checks
references against the tables of the Feed loaded so far and applies the
default substitution of the ParseOptions. It never raises for bad data;
instead it returns a problems.FieldError and leaves it to the loader to drop
the record or abort the parse.
"""

from . import problems
from . import util
from .problems import log


class Field(object):
    """Description of one column of a feed file.

  Attributes:
    name: column name in the header row
    attr: attribute of the entity receiving the value, defaults to name
    parse: function converting the non-empty cell to its native value; it
      raises ValueError with a reason when the cell is invalid
    required: an empty cell is an error
    default: value of an empty optional cell, and the value substituted for
      an invalid cell when use_default_on_error is set
    reference: name of a Feed table, such as "stops", the converted value
      must be a key of
    defaultable: False for ids and other values there is no sensible default
      for; errors in such a column drop the record or abort the parse even
      with use_default_on_error
  """

    def __init__(
        self,
        name,
        parse=util.ParseString,
        required=False,
        default=None,
        reference=None,
        defaultable=True,
        attr=None,
    ):
        self.name = name
        self.attr = attr or name
        self.parse = parse
        self.required = required
        self.default = default
        self.reference = reference
        self.defaultable = defaultable

    def Convert(self, raw, feed):
        """Return the native value of the cell raw or raise ValueError."""
        if raw == "":
            if self.required:
                raise ValueError("Missing value")
            return self.default
        value = self.parse(raw)
        if self.reference is not None and not feed.HasEntity(
            self.reference, value
        ):
            raise ValueError(
                "This value wasn't defined in %s"
                % feed.GetTableFileName(self.reference)
            )
        return value

    def __repr__(self):
        return "<Field %s>" % self.name


def UseDefault(options, error, defaultable=True):
    """Decide whether the default may stand in for the value behind error.

  Returns:
    True if the caller should substitute the default and carry on, False if
    the record has to be dropped or the parse stopped, see DropRecord.
  """
    if defaultable and options.use_default_on_error:
        log.debug("Using default value, %s", error)
        return True
    return False


def BuildEntity(entity_class, record, feed, options):
    """Build an instance of entity_class from one record.

  Args:
    entity_class: a GtfsObjectBase subclass with a _SCHEMA
    record: dict mapping column name to the stripped cell value
    feed: the Feed holding the tables of all previous stages
    options: a ParseOptions object

  Returns:
    the new entity, or a problems.FieldError if the record is invalid and
    options don't allow a default to take the place of the invalid value.
  """
    field_dict = {}
    for field in entity_class._SCHEMA:
        raw = record.get(field.name, "")
        try:
            value = field.Convert(raw, feed)
        except ValueError as e:
            error = problems.FieldError(field.name, raw, str(e))
            if not UseDefault(options, error, field.defaultable):
                return error
            value = field.default
        field_dict[field.attr] = value

    entity = entity_class(field_dict=field_dict)
    error = entity.FinishBuild(feed, options)
    if error is not None:
        return error
    return entity


def DropRecord(options, error):
    """Decide whether the record or element behind error is left out.

  Called once UseDefault has declined. Returns False when the caller has to
  treat error as fatal.
  """
    if options.drop_erroneous:
        log.debug("Dropping record, %s", error)
        return True
    return False
