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

"""Conversion of feed cell values into native types.

Every parse function takes the stripped string of one cell and either returns
the converted value or raises ValueError whose message says what is wrong with
the value. The materializer turns that message into a FieldError.
"""

import datetime
import optparse
import re
import sys


class OptionParserLongError(optparse.OptionParser):
    """OptionParser subclass that includes list of options above error message."""

    def error(self, msg):
        print(self.format_help(), file=sys.stderr)
        print(
            "\n\n%s: error: %s\n\n" % (self.get_prog_name(), msg),
            file=sys.stderr,
        )
        sys.exit(2)


def IsValidURL(url):
    """Checks the validity of a URL value."""
    # TODO: Add more thorough checking of URL
    return url.startswith("http://") or url.startswith("https://")


def IsValidColor(color):
    """Checks the validity of a hex color value."""
    return re.match("^[0-9a-fA-F]{6}$", color) is not None


def ParseString(value):
    return value


def ParseUrl(value):
    if not IsValidURL(value):
        raise ValueError("should be an http:// or https:// URL")
    return value


def ParseEmail(value):
    if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", value):
        raise ValueError("should be an email address")
    return value


def ParseColor(value):
    if not IsValidColor(value):
        raise ValueError("should be a color of six hex digits, e.g. 00FF00")
    return value.upper()


def ParseCurrency(value):
    if not re.match("^[A-Z]{3}$", value):
        raise ValueError("should be an ISO 4217 currency code")
    return value


def NonNegIntStringToInt(int_string):
    """Convert an non-negative integer string to an int or raise ValueError"""
    if not re.match(r"^\d+$", int_string):
        raise ValueError("should be a non-negative integer")
    return int(int_string)


def PositiveIntStringToInt(int_string):
    value = NonNegIntStringToInt(int_string)
    if value == 0:
        raise ValueError("should be a positive integer")
    return value


def FloatStringToFloat(float_string):
    """Convert a float as a string to a float or raise ValueError"""
    if not re.match(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", float_string):
        raise ValueError("should be a number")
    return float(float_string)


def NonNegFloatStringToFloat(float_string):
    value = FloatStringToFloat(float_string)
    if value < 0:
        raise ValueError("should be a non-negative number")
    return value


def ParseLatitude(value):
    lat = FloatStringToFloat(value)
    if abs(lat) > 90.0:
        raise ValueError("latitude should be between -90 and 90")
    return lat


def ParseLongitude(value):
    lon = FloatStringToFloat(value)
    if abs(lon) > 180.0:
        raise ValueError("longitude should be between -180 and 180")
    return lon


def EnumParser(valid_values):
    """Return a parse function accepting the integers in valid_values."""
    valid_values = frozenset(valid_values)

    def ParseEnum(value):
        try:
            number = NonNegIntStringToInt(value)
        except ValueError:
            raise ValueError("should be one of %s" % _FormatChoices(valid_values))
        if number not in valid_values:
            raise ValueError(
                "should be one of %s" % _FormatChoices(valid_values)
            )
        return number

    return ParseEnum


def _FormatChoices(values):
    values = sorted(values)
    if len(values) > 10:
        return "%d..%d" % (values[0], values[-1])
    return ", ".join("%d" % v for v in values)


def TimeToSecondsSinceMidnight(time_string):
    """Convert HHH:MM:SS into seconds since midnight.

  For example "01:02:03" returns 3723. The leading zero of the hours may be
  omitted. HH may be more than 23 if the time is on the following day."""
    m = re.match(r"(\d{1,3}):([0-5]\d):([0-5]\d)$", time_string)
    # ignored: matching for leap seconds
    if not m:
        raise ValueError('should be a time in HH:MM:SS format')
    return int(m.group(1)) * 3600 + int(m.group(2)) * 60 + int(m.group(3))


def FormatSecondsSinceMidnight(s):
    """Formats an int number of seconds past midnight into a string
  as "HH:MM:SS"."""
    return "%02d:%02d:%02d" % (s // 3600, (s // 60) % 60, s % 60)


def DateStringToDateObject(date_string):
    """Return a date object for a string "YYYYMMDD"."""
    if not re.match(r"^\d{8}$", date_string):
        raise ValueError("should be a date in YYYYMMDD format")
    try:
        return datetime.date(
            int(date_string[0:4]), int(date_string[4:6]), int(date_string[6:8])
        )
    except ValueError:
        raise ValueError("is not a valid calendar date")
