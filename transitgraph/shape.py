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


from .problems import FieldError


class Shape(object):
    """This class represents a geographic shape that corresponds to the route
    taken by one or more Trips.

  Attributes:
    shape_id: an ID that uniquely identifies a shape in the feed
    points: list of ShapePoint objects. While shapes.txt is read points are in
      file order; afterwards they are sorted by shape_pt_sequence.
  """

    def __init__(self, shape_id):
        self.shape_id = shape_id
        self.points = []
        self._sequences = set()

    def AddShapePointObjectUnsorted(self, shapepoint):
        """Append shapepoint, which must belong to this shape.

    Returns:
      None, or a FieldError if the shape already has a point with the same
      sequence number.
    """
        if shapepoint.shape_pt_sequence in self._sequences:
            return FieldError(
                "shape_pt_sequence",
                shapepoint.shape_pt_sequence,
                "The sequence number %d occurs more than once in shape %s."
                % (shapepoint.shape_pt_sequence, self.shape_id),
            )
        self._sequences.add(shapepoint.shape_pt_sequence)
        self.points.append(shapepoint)
        return None

    def SortPoints(self):
        self.points.sort(key=lambda point: point.shape_pt_sequence)
        # Only needed while loading.
        self._sequences = set()

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return False

        if id(self) == id(other):
            return True

        return self.shape_id == other.shape_id and self.points == other.points

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = object.__hash__

    def __repr__(self):
        return "<Shape %s, %d points>" % (self.shape_id, len(self.points))
