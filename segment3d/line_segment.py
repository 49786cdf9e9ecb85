# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""LineSegment3d - Immutable directed line segment in 3D space."""

import math
from numbers import Real

import numpy as np

from ._num import as_vector, bits_key, norm
from .bounds import Bounds3d
from .directed_point import DirectedPoint3d
from .errors import InvalidGeometry, NotANumber, NullInput, OutOfRange
from .export import to_tsv
from .point import Point3d


class LineSegment3d:
    """
    Represent a directed 3D line segment defined by start and end points.

    Pure geometry class - no application-specific logic. Instances never
    change after construction; equality and hashing compare the exact bit
    patterns of the six coordinates.

    Construction accepts any of:

    - ``LineSegment3d(start, end)`` with Point3d objects or [x, y, z] triples
    - ``LineSegment3d(start, end_x, end_y, end_z)``
    - ``LineSegment3d(start_x, start_y, start_z, end)``
    - ``LineSegment3d(start_x, start_y, start_z, end_x, end_y, end_z)``
    """

    __slots__ = ("_start", "_end", "_delta", "_length", "_dir_y", "_dir_z")

    def __init__(self, *args):
        """
        Initialize line segment from start and end points.

        Raises
        ------
        NullInput
            If a point argument is None
        InvalidGeometry
            If the arguments do not describe two 3D points, or start and end
            coincide (zero length)

        """
        start, end = self._parse_endpoints(args)
        delta = end - start
        delta.flags.writeable = False
        length = norm(delta)
        # NaN and infinite lengths are accepted and propagate into results
        if length == 0.0:
            raise InvalidGeometry("Start and end may not be equal (zero length segment)")

        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_end", end)
        object.__setattr__(self, "_delta", delta)
        object.__setattr__(self, "_length", length)
        object.__setattr__(self, "_dir_y", math.atan2(delta[2], math.hypot(delta[0], delta[1])))
        object.__setattr__(self, "_dir_z", Point3d(*start).horizontal_direction_to(end))

    @staticmethod
    def _parse_endpoints(args):
        if len(args) == 2:
            return as_vector(args[0], "start"), as_vector(args[1], "end")
        if len(args) == 4:
            if isinstance(args[0], Real):
                return as_vector(args[:3], "start"), as_vector(args[3], "end")
            return as_vector(args[0], "start"), as_vector(args[1:], "end")
        if len(args) == 6:
            return as_vector(args[:3], "start"), as_vector(args[3:], "end")
        raise InvalidGeometry(
            f"Expected two points, a point and three coordinates, or six coordinates; got {len(args)} arguments"
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def start_x(self):
        return float(self._start[0])

    @property
    def start_y(self):
        return float(self._start[1])

    @property
    def start_z(self):
        return float(self._start[2])

    @property
    def end_x(self):
        return float(self._end[0])

    @property
    def end_y(self):
        return float(self._end[1])

    @property
    def end_z(self):
        return float(self._end[2])

    @property
    def start(self):
        """Start point."""
        return Point3d(*self._start)

    @property
    def end(self):
        """End point."""
        return Point3d(*self._end)

    @property
    def dir_y(self):
        """Elevation of the segment direction above the x-y plane, in radians."""
        return self._dir_y

    @property
    def dir_z(self):
        """Azimuth of the segment direction in the x-y plane, in radians."""
        return self._dir_z

    def length(self):
        """Calculate segment length."""
        return self._length

    def tangent(self):
        """
        Calculate normalized tangent vector along the segment.

        Returns
        -------
        np.ndarray
            Normalized direction vector from start to end

        """
        return self._delta / self._length

    def midpoint(self):
        """Calculate midpoint of the segment."""
        return Point3d(*((self._start + self._end) / 2.0))

    def point_at(self, fraction):
        """
        Get point along the supporting line at a fractional position.

        Args:
            fraction: Parameter value (0 = start, 1 = end); not limited to [0, 1]

        Returns
        -------
        Point3d
            Point at the fractional position

        """
        return Point3d(*(self._start + fraction * self._delta))

    def points(self):
        """Yield the start point, then the end point."""
        yield self.start
        yield self.end

    def location_at(self, position):
        """
        Get the directed point at a distance from the start along the segment.

        Args:
            position: Distance from the start point, in [0, length()]

        Returns
        -------
        DirectedPoint3d
            Location with the orientation of the segment

        Raises
        ------
        NotANumber
            If position is NaN
        OutOfRange
            If position is negative or exceeds the length

        """
        if math.isnan(position):
            raise NotANumber("position may not be NaN")
        if position < 0 or position > self._length:
            raise OutOfRange(f"position {position} is outside [0, {self._length}]")
        return self._location(position)

    def location_at_extended(self, position):
        """
        Get the directed point at a distance from the start on the supporting line.

        Negative positions lie before the start, positions beyond the length
        lie past the end. A NaN position results in a NaN location.

        Raises
        ------
        InvalidGeometry
            If position is infinite

        """
        if math.isinf(position):
            raise InvalidGeometry("position must be finite")
        return self._location(position)

    def _location(self, position):
        x, y, z = self._start + position * self._delta / self._length
        return DirectedPoint3d(x, y, z, self._dir_y, self._dir_z)

    def _fraction(self, point):
        if point is None:
            raise NullInput("point may not be None")
        offset = as_vector(point, "point") - self._start
        return float(np.dot(offset, self._delta) / np.dot(self._delta, self._delta))

    def closest_point_on_segment(self, point):
        """
        Project a point onto the segment, limited to the segment extent.

        Args:
            point: Query point (Point3d or [x, y, z])

        Returns
        -------
        Point3d
            The start point when the projection falls before the start, the
            end point when it falls past the end, otherwise the foot of the
            perpendicular

        Raises
        ------
        NullInput
            If point is None

        """
        fraction = self._fraction(point)
        if fraction < 0.0:
            fraction = 0.0
        elif fraction > 1.0:
            fraction = 1.0
        if fraction == 1.0:
            return self.end
        return self.point_at(fraction)

    def project_orthogonal(self, point):
        """Foot of the perpendicular from point, or None when it lies outside the segment."""
        fraction = self.project_orthogonal_fractional(point)
        if math.isnan(fraction):
            return None
        return self.point_at(fraction)

    def project_orthogonal_extended(self, point):
        """Foot of the perpendicular from point on the infinite supporting line."""
        return self.point_at(self._fraction(point))

    def project_orthogonal_fractional(self, point):
        """
        Fractional position of the foot of the perpendicular from point.

        Returns
        -------
        float
            Position in [0, 1], or NaN when the foot lies outside the segment

        """
        fraction = self._fraction(point)
        if fraction < 0.0 or fraction > 1.0:
            return math.nan
        return fraction

    def project_orthogonal_fractional_extended(self, point):
        """Fractional position of the foot of the perpendicular, not limited to [0, 1]."""
        return self._fraction(point)

    def reverse(self):
        """Return a new segment running from end to start."""
        return LineSegment3d(self._end, self._start)

    def bounds(self):
        """
        Axis aligned bounding box spanned by the two endpoints.

        A NaN coordinate yields NaN for both the minimum and maximum of its axis.

        """
        low = np.minimum(self._start, self._end)
        high = np.maximum(self._start, self._end)
        return Bounds3d(low[0], high[0], low[1], high[1], low[2], high[2])

    def to_tsv(self):
        """Export the endpoints as two lines of tab separated coordinates."""
        return to_tsv(self)

    def to_string(self, float_format=".6f", no_class_name=False):
        """
        Return a descriptive string.

        Args:
            float_format: Format spec applied to every coordinate
            no_class_name: Leave out the leading class name

        """
        prefix = "" if no_class_name else "LineSegment3d "
        f = float_format
        return (f"{prefix}[start_x={self.start_x:{f}}, start_y={self.start_y:{f}}, start_z={self.start_z:{f}}"
                f" - end_x={self.end_x:{f}}, end_y={self.end_y:{f}}, end_z={self.end_z:{f}}]")

    def _key(self):
        return bits_key((*self._start, *self._end))

    def __eq__(self, other):
        if not isinstance(other, LineSegment3d):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __iter__(self):
        return self.points()

    def __len__(self):
        return 2

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        """Return constructor-like representation of line segment."""
        return (f"LineSegment3d({self.start_x!r}, {self.start_y!r}, {self.start_z!r}, "
                f"{self.end_x!r}, {self.end_y!r}, {self.end_z!r})")
