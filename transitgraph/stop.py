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


class Stop(GtfsObjectBase):
    """Represents a single stop. A stop must have a latitude and longitude.

  Attributes:
    stop_lat: a float representing the latitude of the stop
    stop_lon: a float representing the longitude of the stop
    location_type: an int, one of the LOCATION_TYPE_* values
    wheelchair_boarding: an int, 0 (unknown), 1 (possible) or 2 (impossible)
    parent_station: stop_id of the station this stop belongs to or None. The
      loader checks it once the whole of stops.txt is read, because a station
      may come after its children in the file.
    All other attributes are strings.
  """

    LOCATION_TYPE_STOP = 0
    LOCATION_TYPE_STATION = 1
    LOCATION_TYPE_ENTRANCE = 2
    LOCATION_TYPE_NODE = 3
    LOCATION_TYPE_BOARDING_AREA = 4

    _SCHEMA = [
        Field("stop_id", required=True, defaultable=False),
        Field("stop_code", default=""),
        Field("stop_name", default=""),
        Field("stop_desc", default=""),
        Field("stop_lat", util.ParseLatitude, required=True, default=0.0),
        Field("stop_lon", util.ParseLongitude, required=True, default=0.0),
        Field("zone_id", default=""),
        Field("stop_url", util.ParseUrl, default=""),
        Field("location_type", util.EnumParser(range(0, 5)), default=0),
        Field("parent_station"),
        Field("stop_timezone", default=""),
        Field("wheelchair_boarding", util.EnumParser(range(0, 3)), default=0),
        Field("platform_code", default=""),
    ]
    _TABLE_NAME = "stops"

    def IsStation(self):
        return self.location_type == self.LOCATION_TYPE_STATION

    def FinishBuild(self, feed, options):
        if self.parent_station and self.IsStation():
            error = FieldError(
                "parent_station",
                self.parent_station,
                "Stop row with location_type=1 (a station) must not have a "
                "parent_station",
            )
            if not UseDefault(options, error):
                return error
            self.parent_station = None
        return None
