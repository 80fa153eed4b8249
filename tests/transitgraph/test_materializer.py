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

# Unit tests for transitgraph/materializer.py and the entity schemas

import datetime

import tests.util as test_util
import transitgraph
from transitgraph import materializer
from transitgraph.options import ParseOptions

STRICT = ParseOptions()
DEFAULTS = ParseOptions(use_default_on_error=True)


class MaterializerTestCase(test_util.TestCase):
    def setUp(self):
        self.feed = transitgraph.Feed()
        self.feed.agencies["DTA"] = transitgraph.Agency(agency_id="DTA")
        self.feed.stops["A"] = transitgraph.Stop(stop_id="A")

    def Build(self, entity_class, record, options=STRICT):
        return materializer.BuildEntity(
            entity_class, record, self.feed, options
        )

    def assertFieldError(self, result, column_name, regex=None):
        self.assertTrue(
            isinstance(result, transitgraph.FieldError),
            "FieldError expected, got %r" % result,
        )
        self.assertEqual(column_name, result.column_name)
        if regex:
            self.assertMatchesRegex(regex, result.FormatProblem())


class BuildEntityTestCase(MaterializerTestCase):
    def testConvertsAndDefaults(self):
        stop = self.Build(
            transitgraph.Stop,
            {"stop_id": "B", "stop_lat": "36.5", "stop_lon": "-116.2"},
        )
        self.assertEqual("B", stop.stop_id)
        self.assertEqual(36.5, stop.stop_lat)
        self.assertEqual(0, stop.location_type)
        self.assertEqual(None, stop.parent_station)
        self.assertEqual("", stop.stop_name)

    def testInvalidValue(self):
        result = self.Build(
            transitgraph.Stop,
            {"stop_id": "B", "stop_lat": "95", "stop_lon": "1"},
        )
        self.assertFieldError(result, "stop_lat", 'Invalid value "95"')

    def testMissingRequiredValue(self):
        result = self.Build(
            transitgraph.Stop, {"stop_id": "B", "stop_lon": "1"}
        )
        self.assertFieldError(result, "stop_lat", "Missing value")

    def testDefaultSubstitution(self):
        stop = self.Build(
            transitgraph.Stop,
            {"stop_id": "B", "stop_lat": "95", "stop_lon": "1"},
            DEFAULTS,
        )
        self.assertEqual(0.0, stop.stop_lat)
        self.assertEqual(1.0, stop.stop_lon)

    def testIdIsNotDefaultable(self):
        result = self.Build(
            transitgraph.Stop, {"stop_lat": "1", "stop_lon": "1"}, DEFAULTS
        )
        self.assertFieldError(result, "stop_id")

    def testDanglingReference(self):
        record = {
            "route_id": "R",
            "agency_id": "XYZ",
            "route_short_name": "1",
            "route_type": "3",
        }
        result = self.Build(transitgraph.Route, record)
        self.assertFieldError(result, "agency_id", "wasn't defined in agency.txt")
        route = self.Build(transitgraph.Route, record, DEFAULTS)
        self.assertEqual("", route.agency_id)
        self.assertEqual(
            self.feed.GetAgency("DTA"), self.feed.GetRouteAgency(route)
        )


class RouteTestCase(MaterializerTestCase):
    def testColorsAndTypes(self):
        route = self.Build(
            transitgraph.Route,
            {
                "route_id": "R",
                "route_long_name": "Airport",
                "route_type": "715",
                "route_color": "00ff00",
            },
        )
        self.assertEqual("00FF00", route.route_color)
        self.assertEqual("000000", route.route_text_color)
        self.assertEqual(715, route.route_type)
        self.assertEqual("Extended route type 715", route.GetRouteTypeName())

    def testInvalidType(self):
        result = self.Build(
            transitgraph.Route,
            {"route_id": "R", "route_short_name": "1", "route_type": "8"},
        )
        self.assertFieldError(result, "route_type")

    def testNamesBlank(self):
        record = {"route_id": "R", "route_type": "3"}
        self.assertFieldError(
            self.Build(transitgraph.Route, record), "route_short_name"
        )
        self.assertEqual(
            "R", self.Build(transitgraph.Route, record, DEFAULTS).route_id
        )

    def testAgencyIdRequiredWithSeveralAgencies(self):
        self.feed.agencies["OTHER"] = transitgraph.Agency(agency_id="OTHER")
        result = self.Build(
            transitgraph.Route,
            {"route_id": "R", "route_short_name": "1", "route_type": "3"},
        )
        self.assertFieldError(result, "agency_id", "more than one agency")


class StopTestCase(MaterializerTestCase):
    def testStationWithParent(self):
        record = {
            "stop_id": "S",
            "stop_lat": "1",
            "stop_lon": "1",
            "location_type": "1",
            "parent_station": "A",
        }
        self.assertFieldError(
            self.Build(transitgraph.Stop, record), "parent_station"
        )
        station = self.Build(transitgraph.Stop, record, DEFAULTS)
        self.assertTrue(station.IsStation())
        self.assertEqual(None, station.parent_station)


class StopTimeTestCase(MaterializerTestCase):
    def setUp(self):
        MaterializerTestCase.setUp(self)
        self.feed.trips["T"] = transitgraph.Trip(trip_id="T")

    def Record(self, **kwargs):
        record = {"trip_id": "T", "stop_id": "A", "stop_sequence": "1"}
        record.update(kwargs)
        return record

    def testTimesAndDistance(self):
        stoptime = self.Build(
            transitgraph.StopTime,
            self.Record(
                arrival_time="8:00:00",
                departure_time="08:01:00",
                shape_dist_traveled="2.5",
            ),
        )
        self.assertEqual(8 * 3600, stoptime.arrival_secs)
        self.assertEqual(8 * 3600 + 60, stoptime.departure_secs)
        self.assertEqual(2.5, stoptime.shape_dist_traveled)
        self.assertTrue(stoptime.has_distance)

    def testNoTimesNoDistance(self):
        stoptime = self.Build(transitgraph.StopTime, self.Record())
        self.assertEqual(None, stoptime.arrival_secs)
        self.assertEqual(None, stoptime.departure_secs)
        self.assertEqual(0.0, stoptime.shape_dist_traveled)
        self.assertFalse(stoptime.has_distance)

    def testOnlyOneTime(self):
        record = self.Record(arrival_time="08:00:00")
        self.assertFieldError(
            self.Build(transitgraph.StopTime, record), "departure_time"
        )
        stoptime = self.Build(transitgraph.StopTime, record, DEFAULTS)
        self.assertEqual(8 * 3600, stoptime.departure_secs)

    def testDepartureBeforeArrival(self):
        record = self.Record(arrival_time="08:01:00", departure_time="08:00:00")
        self.assertFieldError(
            self.Build(transitgraph.StopTime, record),
            "departure_time",
            "before the arrival",
        )
        stoptime = self.Build(transitgraph.StopTime, record, DEFAULTS)
        self.assertEqual(stoptime.arrival_secs, stoptime.departure_secs)

    def testUnknownTrip(self):
        result = self.Build(
            transitgraph.StopTime, self.Record(trip_id="X"), DEFAULTS
        )
        self.assertFieldError(result, "trip_id", "trips.txt")


class ServicePeriodTestCase(MaterializerTestCase):
    RECORD = {
        "service_id": "WE",
        "monday": "0",
        "tuesday": "0",
        "wednesday": "0",
        "thursday": "0",
        "friday": "0",
        "saturday": "1",
        "sunday": "1",
        "start_date": "20070106",
        "end_date": "20070114",
    }

    def testDaysOfWeek(self):
        period = self.Build(transitgraph.ServicePeriod, self.RECORD)
        self.assertEqual(
            [False, False, False, False, False, True, True], period.day_of_week
        )
        self.assertEqual(1, period.saturday)
        self.assertEqual(0, period.monday)
        self.assertEqual(datetime.date(2007, 1, 6), period.start_date)
        self.assertEqual(
            [
                datetime.date(2007, 1, 6),
                datetime.date(2007, 1, 7),
                datetime.date(2007, 1, 13),
                datetime.date(2007, 1, 14),
            ],
            period.ActiveDates(),
        )

    def testExceptions(self):
        period = self.Build(transitgraph.ServicePeriod, self.RECORD)
        monday = datetime.date(2007, 1, 8)
        saturday = datetime.date(2007, 1, 6)
        self.assertEqual(None, period.SetDateException(monday, 1))
        self.assertEqual(None, period.SetDateException(saturday, 2))
        self.assertTrue(period.IsActiveOn(monday))
        self.assertFalse(period.IsActiveOn(saturday))
        error = period.SetDateException(monday, 2)
        self.assertFieldError(error, "date", "more than one exception")

    def testEndBeforeStart(self):
        record = dict(self.RECORD, end_date="20061231")
        self.assertFieldError(
            self.Build(transitgraph.ServicePeriod, record), "end_date"
        )

    def testInvalidDay(self):
        record = dict(self.RECORD, monday="2")
        self.assertFieldError(
            self.Build(transitgraph.ServicePeriod, record), "monday"
        )
        period = self.Build(transitgraph.ServicePeriod, record, DEFAULTS)
        self.assertEqual(0, period.monday)

    def testDatesOnlyPeriodEqualsItself(self):
        period = transitgraph.ServicePeriod(service_id="X")
        self.assertEqual([False] * 7, period.day_of_week)
        self.assertEqual((None, None), period.GetDateRange())
        self.assertEqual(period, transitgraph.ServicePeriod(service_id="X"))
        self.assertNotEqual(period, transitgraph.ServicePeriod(service_id="Y"))


class FrequencyTestCase(MaterializerTestCase):
    def setUp(self):
        MaterializerTestCase.setUp(self)
        self.feed.trips["T"] = transitgraph.Trip(trip_id="T")

    def testStartTimes(self):
        frequency = self.Build(
            transitgraph.Frequency,
            {
                "trip_id": "T",
                "start_time": "06:00:00",
                "end_time": "07:00:00",
                "headway_secs": "1200",
            },
        )
        self.assertEqual(0, frequency.exact_times)
        self.assertEqual(
            [21600, 22800, 24000], frequency.GetStartTimes()
        )

    def testEndBeforeStart(self):
        result = self.Build(
            transitgraph.Frequency,
            {
                "trip_id": "T",
                "start_time": "07:00:00",
                "end_time": "06:00:00",
                "headway_secs": "600",
            },
            DEFAULTS,
        )
        self.assertFieldError(result, "end_time")


class FeedInfoTestCase(MaterializerTestCase):
    def runTest(self):
        record = {
            "feed_publisher_name": "Demo",
            "feed_publisher_url": "http://example.com",
            "feed_lang": "en",
            "feed_start_date": "20070101",
            "feed_end_date": "20061231",
        }
        self.assertFieldError(
            self.Build(transitgraph.FeedInfo, record), "feed_end_date"
        )
        feed_info = self.Build(transitgraph.FeedInfo, record, DEFAULTS)
        self.assertEqual(datetime.date(2007, 1, 1), feed_info.feed_start_date)
        self.assertEqual(None, feed_info.feed_end_date)
