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


def ParseRouteType(value):
    route_type = util.NonNegIntStringToInt(value)
    if route_type not in Route._ROUTE_TYPE_IDS and not (
        100 <= route_type <= 1799
    ):
        raise ValueError(
            "should be one of %s or an extended route type between 100 and "
            "1799" % ", ".join("%d" % t for t in sorted(Route._ROUTE_TYPE_IDS))
        )
    return route_type


class Route(GtfsObjectBase):
    """Represents a single route.

  Attributes:
    agency_id: id of the Agency operating the route, "" for the only agency
      of a single-agency feed. Use Feed.GetRouteAgency to get the Agency.
    route_type: an int, one of _ROUTE_TYPES or an extended type
    route_sort_order: an int or None
  """

    _ROUTE_TYPES = {
        0: {"name": "Tram"},
        1: {"name": "Subway"},
        2: {"name": "Rail"},
        3: {"name": "Bus"},
        4: {"name": "Ferry"},
        5: {"name": "Cable Car"},
        6: {"name": "Gondola"},
        7: {"name": "Funicular"},
        11: {"name": "Trolleybus"},
        12: {"name": "Monorail"},
    }
    _ROUTE_TYPE_IDS = set(_ROUTE_TYPES.keys())

    _SCHEMA = [
        Field("route_id", required=True, defaultable=False),
        Field("agency_id", default="", reference="agencies"),
        Field("route_short_name", default=""),
        Field("route_long_name", default=""),
        Field("route_desc", default=""),
        Field("route_type", ParseRouteType, required=True, default=3),
        Field("route_url", util.ParseUrl, default=""),
        Field("route_color", util.ParseColor, default="FFFFFF"),
        Field("route_text_color", util.ParseColor, default="000000"),
        Field("route_sort_order", util.NonNegIntStringToInt),
    ]
    _TABLE_NAME = "routes"

    def GetRouteTypeName(self):
        if self.route_type in self._ROUTE_TYPES:
            return self._ROUTE_TYPES[self.route_type]["name"]
        return "Extended route type %d" % self.route_type

    def FinishBuild(self, feed, options):
        if not self.route_short_name and not self.route_long_name:
            error = FieldError(
                "route_short_name",
                "",
                "Both route_short_name and route_long_name are blank.",
            )
            if not UseDefault(options, error):
                return error

        if not self.agency_id and len(feed.agencies) > 1:
            error = FieldError(
                "agency_id",
                "",
                "agency_id is required when the feed has more than one agency",
            )
            if not UseDefault(options, error):
                return error
        return None
