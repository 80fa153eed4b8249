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


import datetime

from . import util
from .gtfsobjectbase import GtfsObjectBase
from .materializer import Field
from .materializer import UseDefault
from .problems import FieldError


class ServicePeriod(GtfsObjectBase):
    """Represents a service, which identifies a set of dates when one or more
  trips operate.

  A ServicePeriod is built from a row of calendar.txt, or created by the first
  row of calendar_dates.txt naming its service_id. Rows of calendar_dates.txt
  then add their dates to date_exceptions.

  Attributes:
    service_id: the id of the service
    day_of_week: list of seven bools, Monday first
    start_date, end_date: datetime.date objects or None
    date_exceptions: dict mapping a datetime.date to the exception type, 1
      (service added) or 2 (service removed)
  """

    _DAYS_OF_WEEK = [
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
    ]

    _SCHEMA = (
        [Field("service_id", required=True, defaultable=False)]
        + [
            Field(day, util.EnumParser([0, 1]), required=True, default=0)
            for day in _DAYS_OF_WEEK
        ]
        + [
            Field("start_date", util.DateStringToDateObject, required=True),
            Field("end_date", util.DateStringToDateObject, required=True),
        ]
    )
    _TABLE_NAME = "calendar"

    _EXCEPTION_TYPE_ADD = 1
    _EXCEPTION_TYPE_REMOVE = 2

    def __init__(self, service_id=None, field_dict=None):
        GtfsObjectBase.__init__(self, field_dict)
        if service_id is not None:
            self.service_id = service_id
        # The seven columns are kept as one list.
        self.day_of_week = [
            self.__dict__.pop(day) == 1 for day in self._DAYS_OF_WEEK
        ]
        self.date_exceptions = {}

    def __getattr__(self, name):
        # Return 1 if value in day_of_week is True, 0 otherwise
        if name in self._DAYS_OF_WEEK and "day_of_week" in self.__dict__:
            return self.day_of_week[self._DAYS_OF_WEEK.index(name)] and 1 or 0
        raise AttributeError(name)

    def FinishBuild(self, feed, options):
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        ):
            error = FieldError(
                "end_date",
                self.end_date.strftime("%Y%m%d"),
                "end_date of %s is earlier than start_date %s"
                % (self.service_id, self.start_date.strftime("%Y%m%d")),
            )
            if not UseDefault(options, error):
                return error
            self.end_date = None
        return None

    def SetDateException(self, date, exception_type):
        """Record a row of calendar_dates.txt.

    Returns:
      None, or a FieldError if the service already has an exception on date.
    """
        if date in self.date_exceptions:
            return FieldError(
                "date",
                date.strftime("%Y%m%d"),
                "Service %s has more than one exception on this date"
                % self.service_id,
            )
        self.date_exceptions[date] = exception_type
        return None

    def GetDateRange(self):
        """Return the range over which this ServicePeriod is valid.

    The range includes exception dates that add service outside of
    (start_date, end_date), but doesn't shrink the range if exception
    dates take away service at the edges of the range.

    Returns:
      A tuple of datetime.date objects, (start date, end date) or
      (None, None) if no dates have been given.
    """
        start = self.start_date
        end = self.end_date

        for date, exception_type in self.date_exceptions.items():
            if exception_type == self._EXCEPTION_TYPE_REMOVE:
                continue
            if start is None or date < start:
                start = date
            if end is None or date > end:
                end = date
        if start is None:
            start = end
        elif end is None:
            end = start
        return (start, end)

    def IsActiveOn(self, date):
        """Test if this service period is active on date, a datetime.date."""
        if date in self.date_exceptions:
            return self.date_exceptions[date] == self._EXCEPTION_TYPE_ADD
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.start_date <= date <= self.end_date
        ):
            return self.day_of_week[date.weekday()]
        return False

    def ActiveDates(self):
        """Return the dates this service period is active as a list."""
        (earliest, latest) = self.GetDateRange()
        if earliest is None:
            return []
        dates = []
        date_it = earliest
        delta = datetime.timedelta(days=1)
        while date_it <= latest:
            if self.IsActiveOn(date_it):
                dates.append(date_it)
            date_it = date_it + delta
        return dates


class ServiceDate(GtfsObjectBase):
    """A row of calendar_dates.txt. The loader merges it into the
    ServicePeriod with the same service_id."""

    _SCHEMA = [
        Field("service_id", required=True, defaultable=False),
        Field(
            "date",
            util.DateStringToDateObject,
            required=True,
            defaultable=False,
        ),
        Field(
            "exception_type",
            util.EnumParser([1, 2]),
            required=True,
            defaultable=False,
        ),
    ]
    _TABLE_NAME = "calendar_dates"
