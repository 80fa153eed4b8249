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
from .materializer import UseDefault
from .problems import FieldError


class StopTime(GtfsObjectBase):
    """
  Represents a single stop of a trip. The loader appends it to the stop_times
  of the Trip named by trip_id.

  arrival_secs: int number of seconds since midnight or None
  departure_secs: int number of seconds since midnight or None
  stop_id: str, use Feed.GetStopTimeStop to get the Stop
  stop_sequence: int
  pickup_type, drop_off_type: int
  shape_dist_traveled: float, 0.0 if the row has none
  has_distance: True iff shape_dist_traveled was given
  timepoint: int or None
  """

    _SCHEMA = [
        Field("trip_id", required=True, reference="trips", defaultable=False),
        Field(
            "arrival_time",
            util.TimeToSecondsSinceMidnight,
            attr="arrival_secs",
        ),
        Field(
            "departure_time",
            util.TimeToSecondsSinceMidnight,
            attr="departure_secs",
        ),
        Field("stop_id", required=True, reference="stops", defaultable=False),
        Field(
            "stop_sequence",
            util.NonNegIntStringToInt,
            required=True,
            defaultable=False,
        ),
        Field("stop_headsign", default=""),
        Field("pickup_type", util.EnumParser(range(0, 4)), default=0),
        Field("drop_off_type", util.EnumParser(range(0, 4)), default=0),
        Field("shape_dist_traveled", util.NonNegFloatStringToFloat),
        Field("timepoint", util.EnumParser([0, 1])),
    ]
    _TABLE_NAME = "stop_times"

    # Line of the row in stop_times.txt, set by the loader.
    _line_num = None

    def FinishBuild(self, feed, options):
        self.has_distance = self.shape_dist_traveled is not None
        if not self.has_distance:
            self.shape_dist_traveled = 0.0

        if (self.arrival_secs is None) != (self.departure_secs is None):
            if self.arrival_secs is None:
                missing, given = "arrival_time", self.departure_secs
            else:
                missing, given = "departure_time", self.arrival_secs
            error = FieldError(
                missing,
                "",
                "arrival_time and departure_time should either both have "
                "a value or both be empty",
            )
            if not UseDefault(options, error):
                return error
            self.arrival_secs = self.departure_secs = given

        if (
            self.arrival_secs is not None
            and self.departure_secs < self.arrival_secs
        ):
            error = FieldError(
                "departure_time",
                util.FormatSecondsSinceMidnight(self.departure_secs),
                "The departure time at this stop (%s) is before the arrival "
                "time (%s). This is often caused by problems in the feed "
                "exporter's time conversion"
                % (
                    util.FormatSecondsSinceMidnight(self.departure_secs),
                    util.FormatSecondsSinceMidnight(self.arrival_secs),
                ),
            )
            if not UseDefault(options, error):
                return error
            self.departure_secs = self.arrival_secs
        return None

    def ClearDistanceTraveled(self):
        self.shape_dist_traveled = 0.0
        self.has_distance = False
