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

"""This module is a library to load a transit feed in GTFS format into memory.

A feed is a directory or a zip archive holding one CSV file per table, such as
stops.txt, routes.txt and trips.txt. Parse reads every file in an order where
each file only refers to entities of files read before it, and returns a Feed
holding one Python object per row:

  import transitgraph
  feed = transitgraph.Parse("path/to/feed.zip")
  for route in feed.GetRouteList():
    print(route.route_short_name, feed.GetRouteAgency(route).agency_name)

How invalid rows are treated is chosen once for the whole feed with a
ParseOptions object:

  options = transitgraph.ParseOptions(drop_erroneous=True)
  feed = transitgraph.Parse("path/to/feed", options)

  Feed: Central object holding the tables of a feed
  Loader: Reads a feed, Parse is a shortcut for Loader(...).Load()
  ParseOptions: What to do with invalid rows
  ParseError: Raised for a row that can't be skipped or repaired
  Agency, Stop, Route, Trip, StopTime, ServicePeriod, Shape, ShapePoint,
  FareAttribute, FareRule, Frequency, Transfer, FeedInfo: one per kind of row
"""

from transitgraph.version import __version__
from .agency import *
from .consistency import *
from .fareattribute import *
from .farerule import *
from .feed import *
from .feedinfo import *
from .frequency import *
from .gtfsfactory import *
from .gtfsobjectbase import *
from .loader import *
from .materializer import *
from .options import *
from .problems import *
from .reader import *
from .route import *
from .serviceperiod import *
from .shape import *
from .shapepoint import *
from .source import *
from .stop import *
from .stoptime import *
from .transfer import *
from .trip import *
from .util import *
