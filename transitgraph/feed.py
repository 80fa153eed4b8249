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


class Feed(object):
    """Represents a parsed feed, the root of all its entities.

  Keyed tables are dicts from id to entity. After a dry run the shapes,
  routes, services and trips tables map each id to None. Entities refer to
  each other by id; use the Get*() methods to follow a reference.
  """

    # Map from keyed table to the file its entities are read from.
    _TABLE_FILE_NAMES = {
        "agencies": "agency.txt",
        "stops": "stops.txt",
        "shapes": "shapes.txt",
        "routes": "routes.txt",
        "services": "calendar.txt or calendar_dates.txt",
        "trips": "trips.txt",
        "fare_attributes": "fare_attributes.txt",
    }

    def __init__(self):
        self.agencies = {}
        self.feed_infos = []
        self.stops = {}
        self.shapes = {}
        self.routes = {}
        self.services = {}
        self.trips = {}
        self.fare_attributes = {}
        self.transfers = []

    def GetTable(self, table):
        return getattr(self, table)

    def HasEntity(self, table, entity_id):
        """Return True if entity_id is a key of the keyed table."""
        return entity_id in self.GetTable(table)

    def GetTableFileName(self, table):
        return self._TABLE_FILE_NAMES[table]

    def GetAgency(self, agency_id):
        """Return Agency with agency_id or throw a KeyError"""
        return self.agencies[agency_id]

    def GetAgencyList(self):
        return list(self.agencies.values())

    def GetDefaultAgency(self):
        """Return the only Agency of the feed, or None if there are several."""
        if len(self.agencies) == 1:
            return self.GetAgencyList()[0]
        return None

    def GetStop(self, stop_id):
        """Return Stop with stop_id or throw a KeyError"""
        return self.stops[stop_id]

    def GetStopList(self):
        return list(self.stops.values())

    def GetParentStation(self, stop):
        """Return the station stop belongs to, or None."""
        if stop.parent_station is None:
            return None
        return self.stops[stop.parent_station]

    def GetShape(self, shape_id):
        return self.shapes[shape_id]

    def GetShapeList(self):
        return list(self.shapes.values())

    def GetRoute(self, route_id):
        return self.routes[route_id]

    def GetRouteList(self):
        return list(self.routes.values())

    def GetRouteAgency(self, route):
        if not route.agency_id:
            return self.GetDefaultAgency()
        return self.agencies[route.agency_id]

    def GetServicePeriod(self, service_id):
        """Returns the ServicePeriod object with the given ID."""
        return self.services[service_id]

    def GetServicePeriodList(self):
        return list(self.services.values())

    def GetTrip(self, trip_id):
        return self.trips[trip_id]

    def GetTripList(self):
        return list(self.trips.values())

    def GetTripRoute(self, trip):
        if trip.route_id is None:
            return None
        return self.routes[trip.route_id]

    def GetTripService(self, trip):
        if trip.service_id is None:
            return None
        return self.services[trip.service_id]

    def GetTripShape(self, trip):
        if trip.shape_id is None:
            return None
        return self.shapes[trip.shape_id]

    def GetStopTimeStop(self, stoptime):
        return self.stops[stoptime.stop_id]

    def GetFareAttribute(self, fare_id):
        return self.fare_attributes[fare_id]

    def GetFareAttributeList(self):
        return list(self.fare_attributes.values())

    def GetFareRuleList(self):
        """Return the rules of every fare attribute in one list."""
        rules = []
        for fare in self.fare_attributes.values():
            rules.extend(fare.GetFareRuleList())
        return rules

    def GetTransferList(self):
        return list(self.transfers)

    def GetFeedInfoList(self):
        return list(self.feed_infos)

    def GetEntityCounts(self):
        """Return a list of (table name, number of entries) pairs."""
        return [
            ("agencies", len(self.agencies)),
            ("feed_infos", len(self.feed_infos)),
            ("stops", len(self.stops)),
            ("shapes", len(self.shapes)),
            ("routes", len(self.routes)),
            ("services", len(self.services)),
            ("trips", len(self.trips)),
            ("fare_attributes", len(self.fare_attributes)),
            ("fare_rules", len(self.GetFareRuleList())),
            ("transfers", len(self.transfers)),
        ]

    def __eq__(self, other):
        if not isinstance(other, Feed):
            return False

        if id(self) == id(other):
            return True

        return vars(self) == vars(other)

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = object.__hash__

    def __repr__(self):
        return "<Feed %s>" % ", ".join(
            "%s=%d" % count for count in self.GetEntityCounts()
        )
