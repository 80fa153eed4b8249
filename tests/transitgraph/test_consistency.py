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

# Unit tests for transitgraph/consistency.py

import tests.util as test_util
import transitgraph
from transitgraph import consistency
from transitgraph.options import ParseOptions


def MakeShape(distances):
    """Return a Shape with one point per distance, None meaning no distance."""
    shape = transitgraph.Shape("S")
    for sequence, distance in enumerate(distances):
        point = transitgraph.ShapePoint(
            shape_id="S",
            shape_pt_lat=36.0,
            shape_pt_lon=-116.0,
            shape_pt_sequence=sequence,
            shape_dist_traveled=distance or 0.0,
            has_distance=distance is not None,
        )
        point._line_num = sequence + 2
        shape.AddShapePointObjectUnsorted(point)
    shape.SortPoints()
    return shape


def MakeTrip(times_and_distances):
    """Return a Trip with a stop time per (arrival, departure, distance)."""
    trip = transitgraph.Trip(trip_id="T")
    for sequence, (arrival, departure, distance) in enumerate(
        times_and_distances
    ):
        stoptime = transitgraph.StopTime(
            trip_id="T",
            stop_id="A",
            stop_sequence=sequence,
            arrival_secs=arrival,
            departure_secs=departure,
            shape_dist_traveled=distance or 0.0,
            has_distance=distance is not None,
        )
        stoptime._line_num = sequence + 2
        trip.AddStopTimeObjectUnordered(stoptime)
    trip.SortStopTimes()
    return trip


class CheckShapeMeasureTestCase(test_util.TestCase):
    def testMonotonicShape(self):
        shape = MakeShape([0.0, None, 1.0, 1.0, 3.0])
        self.assertEqual(
            None, consistency.CheckShapeMeasure(shape, ParseOptions())
        )
        self.assertEqual(5, len(shape.points))

    def testFatal(self):
        shape = MakeShape([0.0, 2.0, 1.0])
        error = consistency.CheckShapeMeasure(shape, ParseOptions())
        self.assertEqual("shape_dist_traveled", error.column_name)
        self.assertEqual(4, error.line_num)
        self.assertMatchesRegex(
            "sequence number 2 of shape S", error.FormatProblem()
        )
        self.assertMatchesRegex("1.000000.*2.000000", error.FormatProblem())

    def testDefaultClearsDistance(self):
        shape = MakeShape([0.0, 2.0, 1.0, 3.0])
        options = ParseOptions(use_default_on_error=True)
        self.assertEqual(None, consistency.CheckShapeMeasure(shape, options))
        self.assertEqual(4, len(shape.points))
        self.assertEqual(0.0, shape.points[2].shape_dist_traveled)
        self.assertFalse(shape.points[2].has_distance)
        self.assertTrue(shape.points[3].has_distance)

    def testDropCompactsInPlace(self):
        shape = MakeShape([0.0, 5.0, 1.0, 2.0, 6.0, 5.5, 7.0])
        points = shape.points
        options = ParseOptions(drop_erroneous=True)
        self.assertEqual(None, consistency.CheckShapeMeasure(shape, options))
        self.assertTrue(points is shape.points)
        # The baseline after dropping is the last point kept.
        self.assertEqual(
            [0, 1, 4, 6], [p.shape_pt_sequence for p in shape.points]
        )

    def testDefaultWinsOverDrop(self):
        shape = MakeShape([3.0, 1.0])
        options = ParseOptions(use_default_on_error=True, drop_erroneous=True)
        self.assertEqual(None, consistency.CheckShapeMeasure(shape, options))
        self.assertEqual(2, len(shape.points))


class CheckStopTimeMeasureTestCase(test_util.TestCase):
    def testConsistentTrip(self):
        trip = MakeTrip(
            [(100, 110, 0.0), (None, None, None), (200, 200, 1.5)]
        )
        self.assertEqual(
            None, consistency.CheckStopTimeMeasure(trip, ParseOptions())
        )
        self.assertEqual(3, trip.GetCountStopTimes())

    def testArrivalBeforePreviousDeparture(self):
        trip = MakeTrip([(100, 200, None), (150, 150, None)])
        error = consistency.CheckStopTimeMeasure(trip, ParseOptions())
        self.assertEqual("arrival_time", error.column_name)
        self.assertEqual(3, error.line_num)

    def testTimeOrderHasNoDefault(self):
        trip = MakeTrip([(100, 200, None), (150, 150, None)])
        options = ParseOptions(use_default_on_error=True)
        error = consistency.CheckStopTimeMeasure(trip, options)
        self.assertEqual("arrival_time", error.column_name)

    def testDropTimeOrder(self):
        trip = MakeTrip(
            [(100, 200, None), (150, 150, None), (300, 300, None)]
        )
        options = ParseOptions(use_default_on_error=True, drop_erroneous=True)
        self.assertEqual(None, consistency.CheckStopTimeMeasure(trip, options))
        self.assertEqual([0, 2], [st.stop_sequence for st in trip.stop_times])

    def testDistance(self):
        trip = MakeTrip([(100, 100, 2.0), (200, 200, 1.0), (300, 300, 3.0)])
        error = consistency.CheckStopTimeMeasure(trip, ParseOptions())
        self.assertEqual("shape_dist_traveled", error.column_name)
        self.assertEqual(3, error.line_num)

        options = ParseOptions(use_default_on_error=True)
        self.assertEqual(None, consistency.CheckStopTimeMeasure(trip, options))
        self.assertFalse(trip.stop_times[1].has_distance)
        self.assertEqual(3, trip.GetCountStopTimes())

    def testDropDistance(self):
        trip = MakeTrip([(100, 100, 2.0), (200, 200, 1.0), (300, 300, 3.0)])
        options = ParseOptions(drop_erroneous=True)
        self.assertEqual(None, consistency.CheckStopTimeMeasure(trip, options))
        self.assertEqual([0, 2], [st.stop_sequence for st in trip.stop_times])
