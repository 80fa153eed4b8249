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


class GtfsObjectBase(object):
    """Object built from one row of a feed file.

  Subclasses must:
  * set the _TABLE_NAME class variable to a name such as 'stops', 'agency', ...
  * set _SCHEMA to the list of materializer.Field objects describing the
    columns of the file. The materializer builds instances by passing a dict
    of converted values as field_dict.
  * optionally override FinishBuild to check rules involving more than one
    field once all fields are converted.

  Attributes whose name starts with "_" are private bookkeeping and take no
  part in equality.
  """

    _SCHEMA = []
    _TABLE_NAME = None

    def __init__(self, field_dict=None, **kwargs):
        for field in self._SCHEMA:
            self.__dict__[field.attr] = field.default
        if field_dict:
            self.__dict__.update(field_dict)
        self.__dict__.update(kwargs)

    def FinishBuild(self, feed, options):
        """Check rules involving several fields of a freshly built object.

    Returns:
      None if the object is fine (possibly after default substitution as
      allowed by options), a problems.FieldError otherwise.
    """
        return None

    def iteritems(self):
        """Return a iterable for (name, value) pairs of public attributes."""
        for name, value in self.__dict__.items():
            if (not name) or name[0] == "_":
                continue
            yield name, value

    def __eq__(self, other):
        """Return true iff self and other are equivalent"""
        if other is None or other.__class__ != self.__class__:
            return False

        if id(self) == id(other):
            return True

        return dict(self.iteritems()) == dict(other.iteritems())

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = object.__hash__

    def __repr__(self):
        return "<%s %s>" % (
            self.__class__.__name__,
            sorted(self.iteritems(), key=lambda item: item[0]),
        )
