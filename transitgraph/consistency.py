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


"""Checks of the ordered children of shapes and trips.

Both checks walk a sequence already sorted by sequence number and compare
each element with the last one kept. Elements are dropped by compacting the
list in place, so the survivors keep their relative order.
"""

from . import util
from .materializer import DropRecord
from .materializer import UseDefault
from .problems import FieldError


def _DistanceError(element, last_distance, description):
    return FieldError(
        "shape_dist_traveled",
        element.shape_dist_traveled,
        "%s has shape_dist_traveled %f, which is less than %f of the "
        "previous one" % (description, element.shape_dist_traveled, last_distance),
        line_num=element._line_num,
    )


def CheckShapeMeasure(shape, options):
    """Check that shape_dist_traveled doesn't decrease along shape.

  A point with a smaller distance than the last point kept has its distance
  cleared, is dropped or makes the check fail, depending on options.

  Returns:
    None, or a FieldError carrying the line of the offending point in
    shapes.txt if the parse has to stop.
  """
    points = shape.points
    write = 0
    last_distance = None
    for point in points:
        if (
            point.has_distance
            and last_distance is not None
            and point.shape_dist_traveled < last_distance
        ):
            error = _DistanceError(
                point,
                last_distance,
                "The point with sequence number %d of shape %s"
                % (point.shape_pt_sequence, shape.shape_id),
            )
            if UseDefault(options, error):
                point.ClearDistanceTraveled()
            elif DropRecord(options, error):
                continue
            else:
                return error
        if point.has_distance:
            last_distance = point.shape_dist_traveled
        points[write] = point
        write += 1
    del points[write:]
    return None


def CheckStopTimeMeasure(trip, options):
    """Check the times and distances of the stop times of trip.

  A stop time which arrives before the previous stop time departs can't be
  repaired: it is dropped or makes the check fail. A decreasing
  shape_dist_traveled is treated like in CheckShapeMeasure.

  Returns:
    None, or a FieldError carrying the line of the offending stop time in
    stop_times.txt if the parse has to stop.
  """
    stop_times = trip.stop_times
    write = 0
    last_distance = None
    previous = None
    for stoptime in stop_times:
        if (
            previous is not None
            and previous.departure_secs is not None
            and stoptime.arrival_secs is not None
            and previous.departure_secs > stoptime.arrival_secs
        ):
            error = FieldError(
                "arrival_time",
                util.FormatSecondsSinceMidnight(stoptime.arrival_secs),
                "The stop time with sequence number %d of trip %s arrives "
                "before the previous stop time departs at %s"
                % (
                    stoptime.stop_sequence,
                    trip.trip_id,
                    util.FormatSecondsSinceMidnight(previous.departure_secs),
                ),
                line_num=stoptime._line_num,
            )
            if DropRecord(options, error):
                continue
            return error

        if (
            stoptime.has_distance
            and last_distance is not None
            and stoptime.shape_dist_traveled < last_distance
        ):
            error = _DistanceError(
                stoptime,
                last_distance,
                "The stop time with sequence number %d of trip %s"
                % (stoptime.stop_sequence, trip.trip_id),
            )
            if UseDefault(options, error):
                stoptime.ClearDistanceTraveled()
            elif DropRecord(options, error):
                continue
            else:
                return error

        if stoptime.has_distance:
            last_distance = stoptime.shape_dist_traveled
        previous = stoptime
        stop_times[write] = stoptime
        write += 1
    del stop_times[write:]
    return None
