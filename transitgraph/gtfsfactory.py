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


from .agency import Agency
from .fareattribute import FareAttribute
from .farerule import FareRule
from .feedinfo import FeedInfo
from .frequency import Frequency
from .route import Route
from .serviceperiod import ServiceDate
from .serviceperiod import ServicePeriod
from .shapepoint import ShapePoint
from .stop import Stop
from .stoptime import StopTime
from .transfer import Transfer
from .trip import Trip


class GtfsFactory(object):
    """Registry of the files of a feed.

  For every file it knows the class built from each row, whether the file
  must be present and the stage it is loaded in. calendar.txt and
  calendar_dates.txt are each optional but a feed needs at least one of them.
  """

    _REQUIRED_MAPPING_FIELDS = ["class", "required", "loading_order"]

    # Files of which at least one must be in the feed.
    _ONE_OF_REQUIRED = [("calendar.txt", "calendar_dates.txt")]

    def __init__(self):

        self._file_mapping = {
            "agency.txt": {
                "required": True,
                "loading_order": 1,
                "class": Agency,
            },
            "feed_info.txt": {
                "required": False,
                "loading_order": 2,
                "class": FeedInfo,
            },
            "stops.txt": {
                "required": True,
                "loading_order": 3,
                "class": Stop,
            },
            "shapes.txt": {
                "required": False,
                "loading_order": 4,
                "class": ShapePoint,
            },
            "routes.txt": {
                "required": True,
                "loading_order": 5,
                "class": Route,
            },
            "calendar.txt": {
                "required": False,
                "loading_order": 6,
                "class": ServicePeriod,
            },
            "calendar_dates.txt": {
                "required": False,
                "loading_order": 7,
                "class": ServiceDate,
            },
            "trips.txt": {
                "required": True,
                "loading_order": 8,
                "class": Trip,
            },
            "stop_times.txt": {
                "required": True,
                "loading_order": 9,
                "class": StopTime,
            },
            "fare_attributes.txt": {
                "required": False,
                "loading_order": 10,
                "class": FareAttribute,
            },
            "fare_rules.txt": {
                "required": False,
                "loading_order": 11,
                "class": FareRule,
            },
            "frequencies.txt": {
                "required": False,
                "loading_order": 12,
                "class": Frequency,
            },
            "transfers.txt": {
                "required": False,
                "loading_order": 13,
                "class": Transfer,
            },
        }

    def GetGtfsClassByFileName(self, filename):
        """Returns the class built from the rows of a feed file, or None if
    filename isn't a known feed file."""
        if filename not in self._file_mapping:
            return None
        return self._file_mapping[filename]["class"]

    def GetLoadingOrder(self):
        """Returns a list of filenames sorted by loading order."""
        return sorted(
            self._file_mapping,
            key=lambda filename: self._file_mapping[filename]["loading_order"],
        )

    def IsFileRequired(self, filename):
        """Returns true if a file must be in every feed, false otherwise.
    Unknown files are, by definition, not required"""
        if filename not in self._file_mapping:
            return False
        return self._file_mapping[filename]["required"]

    def GetOneOfRequiredGroup(self, filename):
        """Returns the group of files filename belongs to, of which at least one
    must be in every feed, or None."""
        for group in self._ONE_OF_REQUIRED:
            if filename in group:
                return group
        return None


def GetGtfsFactory():
    """Called by Loader to get the factory for the feed files."""
    return GtfsFactory()
