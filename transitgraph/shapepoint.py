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


class ShapePoint(GtfsObjectBase):
    """This class represents a single shape point.

  Attributes:
    shape_id: represents the shape_id of the point
    shape_pt_lat: represents the latitude of the point
    shape_pt_lon: represents the longitude of the point
    shape_pt_sequence: represents the sequence of the point
    shape_dist_traveled: represents the distance of the point, 0.0 when the
      point has none
    has_distance: True iff shape_dist_traveled was given
  """

    _SCHEMA = [
        Field("shape_id", required=True, defaultable=False),
        Field("shape_pt_lat", util.ParseLatitude, required=True, default=0.0),
        Field("shape_pt_lon", util.ParseLongitude, required=True, default=0.0),
        Field(
            "shape_pt_sequence",
            util.NonNegIntStringToInt,
            required=True,
            defaultable=False,
        ),
        Field("shape_dist_traveled", util.NonNegFloatStringToFloat),
    ]
    _TABLE_NAME = "shapes"

    # Line of the row in shapes.txt, set by the loader.
    _line_num = None

    def FinishBuild(self, feed, options):
        self.has_distance = self.shape_dist_traveled is not None
        if not self.has_distance:
            self.shape_dist_traveled = 0.0
        return None

    def ClearDistanceTraveled(self):
        self.shape_dist_traveled = 0.0
        self.has_distance = False
