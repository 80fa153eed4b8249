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


class ParseOptions(object):
    """Strictness of a parse, chosen once for the whole feed.

  Attributes:
    use_default_on_error: replace an invalid value with the default of its
      column and keep the record
    drop_erroneous: leave out records (or shape points and stop times) which
      are invalid
    dry_run: validate everything but don't keep shapes, routes, services and
      trips in the resulting Feed

  With no flag set, which is the default, the first invalid record raises a
  ParseError. When both use_default_on_error and drop_erroneous are set a
  default is used where one exists and the record is dropped otherwise.
  """

    def __init__(
        self, use_default_on_error=False, drop_erroneous=False, dry_run=False
    ):
        self.use_default_on_error = use_default_on_error
        self.drop_erroneous = drop_erroneous
        self.dry_run = dry_run

    def __eq__(self, other):
        return isinstance(other, ParseOptions) and vars(self) == vars(other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "<ParseOptions %s>" % sorted(vars(self).items())


default_options = ParseOptions()
