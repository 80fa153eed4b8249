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


from . import util
from .gtfsobjectbase import GtfsObjectBase
from .materializer import Field
from .problems import FieldError


class Frequency(GtfsObjectBase):
    """This class represents a period of a trip during which the vehicle travels
    at regular intervals (rather than specifying exact times for each stop)."""

    _SCHEMA = [
        Field("trip_id", required=True, reference="trips", defaultable=False),
        Field(
            "start_time",
            util.TimeToSecondsSinceMidnight,
            required=True,
            defaultable=False,
            attr="start_secs",
        ),
        Field(
            "end_time",
            util.TimeToSecondsSinceMidnight,
            required=True,
            defaultable=False,
            attr="end_secs",
        ),
        Field(
            "headway_secs",
            util.PositiveIntStringToInt,
            required=True,
            defaultable=False,
        ),
        Field("exact_times", util.EnumParser([0, 1]), default=0),
    ]
    _TABLE_NAME = "frequencies"

    def FinishBuild(self, feed, options):
        if self.end_secs <= self.start_secs:
            return FieldError(
                "end_time",
                util.FormatSecondsSinceMidnight(self.end_secs),
                "should be later than start_time %s"
                % util.FormatSecondsSinceMidnight(self.start_secs),
            )
        return None

    def GetStartTimes(self):
        """Return the start time of each run in this period."""
        return list(range(self.start_secs, self.end_secs, self.headway_secs))
