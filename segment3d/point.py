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


"""Point3d - Immutable 3D point used as input and output of segment queries."""

from dataclasses import dataclass
import math

import numpy as np

from ._num import as_vector, bits_key, norm


@dataclass(frozen=True, eq=False)
class Point3d:
    """
    Represent a point in 3D space.

    Equality is exact on the bit patterns of the coordinates.
    """

    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def of(cls, value, name="point"):
        """
        Coerce a point-like value into a Point3d.

        Args:
            value: Point3d, sequence [x, y, z] or numpy array
            name: Argument name used in error messages

        Returns
        -------
        Point3d
            The value itself when it already is a Point3d

        Raises
        ------
        NullInput
            If value is None
        InvalidGeometry
            If value is not a 3D point

        """
        if isinstance(value, cls):
            return value
        x, y, z = as_vector(value, name)
        return cls(x, y, z)

    def as_array(self):
        """Return the coordinates as a read-only numpy array."""
        vector = np.array([self.x, self.y, self.z], dtype=float)
        vector.flags.writeable = False
        return vector

    def distance(self, other):
        """Euclidean distance to another point."""
        return norm(as_vector(other, "other") - self.as_array())

    def distance_squared(self, other):
        """Squared Euclidean distance to another point."""
        delta = as_vector(other, "other") - self.as_array()
        return float(np.dot(delta, delta))

    def horizontal_direction_to(self, other):
        """
        Direction in radians to another point, ignoring z.

        Returns
        -------
        float
            Angle of the x-y projection of (other - self), in (-pi, pi]

        """
        ox, oy, _ = as_vector(other, "other")
        return math.atan2(oy - self.y, ox - self.x)

    def interpolate(self, other, fraction):
        """Point at fraction between this point (0) and other (1)."""
        start = self.as_array()
        return Point3d(*(start + fraction * (as_vector(other, "other") - start)))

    def epsilon_equals(self, other, epsilon):
        """Check that every coordinate differs by at most epsilon."""
        other = Point3d.of(other, "other")
        return (abs(self.x - other.x) <= epsilon
                and abs(self.y - other.y) <= epsilon
                and abs(self.z - other.z) <= epsilon)

    def to_string(self, float_format=".6f", no_class_name=False):
        """Return a descriptive string, optionally without the class name prefix."""
        prefix = "" if no_class_name else "Point3d "
        return (f"{prefix}[x={self.x:{float_format}}, y={self.y:{float_format}}, "
                f"z={self.z:{float_format}}]")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if not isinstance(other, Point3d):
            return NotImplemented
        return bits_key(self) == bits_key(other)

    def __hash__(self):
        return hash(bits_key(self))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Point3d({self.x!r}, {self.y!r}, {self.z!r})"
