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


class Trip(GtfsObjectBase):
    """Represents a trip of a route.

  route_id, service_id and shape_id are ids, use Feed.GetTripRoute,
  Feed.GetTripService and Feed.GetTripShape to get the objects. While
  stop_times.txt is read stop_times is in file order; afterwards it is sorted
  by stop_sequence.
  """

    _SCHEMA = [
        Field("route_id", required=True, reference="routes"),
        Field("service_id", required=True, reference="services"),
        Field("trip_id", required=True, defaultable=False),
        Field("trip_headsign", default=""),
        Field("trip_short_name", default=""),
        Field("direction_id", util.EnumParser([0, 1])),
        Field("block_id", default=""),
        Field("shape_id", reference="shapes"),
        Field("wheelchair_accessible", util.EnumParser(range(0, 3)), default=0),
        Field("bikes_allowed", util.EnumParser(range(0, 3)), default=0),
    ]
    _TABLE_NAME = "trips"

    def __init__(self, field_dict=None, **kwargs):
        GtfsObjectBase.__init__(self, field_dict, **kwargs)
        self.stop_times = []
        self.frequencies = []
        self._sequences = set()

    def AddStopTimeObjectUnordered(self, stoptime):
        """Append stoptime, which must belong to this trip.

    Returns:
      None, or a FieldError if the trip already has a stop time with the same
      stop_sequence.
    """
        if stoptime.stop_sequence in self._sequences:
            return FieldError(
                "stop_sequence",
                stoptime.stop_sequence,
                "The sequence number %d occurs more than once in trip %s."
                % (stoptime.stop_sequence, self.trip_id),
            )
        self._sequences.add(stoptime.stop_sequence)
        self.stop_times.append(stoptime)
        return None

    def SortStopTimes(self):
        self.stop_times.sort(key=lambda stoptime: stoptime.stop_sequence)
        # Only needed while loading.
        self._sequences = set()

    def AddFrequencyObject(self, frequency):
        self.frequencies.append(frequency)

    def GetCountStopTimes(self):
        return len(self.stop_times)

    def GetFrequencyStartTimes(self):
        """Return a list of start time for each headway-based run.

    Returns:
      a sorted list of seconds since midnight, the start time of each run. If
      this trip doesn't have frequencies returns an empty list."""
        start_times = []
        for frequency in self.frequencies:
            start_times.extend(frequency.GetStartTimes())
        return sorted(start_times)
