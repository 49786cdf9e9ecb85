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


"""DirectedPoint3d - A position paired with an orientation (azimuth and elevation)."""

from dataclasses import dataclass
import math

import numpy as np
from scipy.spatial.transform import Rotation

from ._num import as_vector, bits_key, norm
from .point import Point3d


@dataclass(frozen=True, eq=False)
class DirectedPoint3d:
    """
    Represent a 3D point with a direction.

    dir_z is the azimuth (rotation around the z axis, measured from the x axis)
    and dir_y the elevation above the x-y plane, both in radians.
    """

    x: float
    y: float
    z: float
    dir_y: float
    dir_z: float

    def __post_init__(self):
        for field in ("x", "y", "z", "dir_y", "dir_z"):
            object.__setattr__(self, field, float(getattr(self, field)))

    @property
    def position(self):
        """Position as a Point3d."""
        return Point3d(self.x, self.y, self.z)

    def as_array(self):
        """Return the position as a read-only numpy array."""
        return self.position.as_array()

    def distance(self, other):
        """Euclidean distance from this position to another point."""
        return norm(as_vector(other, "other") - self.as_array())

    def direction_vector(self):
        """
        Unit vector pointing along the direction.

        Returns
        -------
        np.ndarray
            [cos(dir_y) cos(dir_z), cos(dir_y) sin(dir_z), sin(dir_y)]

        """
        cos_elevation = math.cos(self.dir_y)
        return np.array([
            cos_elevation * math.cos(self.dir_z),
            cos_elevation * math.sin(self.dir_z),
            math.sin(self.dir_y),
        ])

    def rotation(self):
        """
        Rotation that takes the x axis onto the direction.

        Yaw by dir_z around z, then pitch around the rotated y axis. Positive
        elevation points upward, hence the negated pitch angle.

        Returns
        -------
        scipy.spatial.transform.Rotation
            Orientation of this directed point

        """
        return Rotation.from_euler("ZY", [self.dir_z, -self.dir_y])

    def to_string(self, float_format=".6f", no_class_name=False):
        """Return a descriptive string, optionally without the class name prefix."""
        prefix = "" if no_class_name else "DirectedPoint3d "
        values = ", ".join(
            f"{name}={getattr(self, name):{float_format}}"
            for name in ("x", "y", "z", "dir_y", "dir_z")
        )
        return f"{prefix}[{values}]"

    def _key(self):
        return bits_key((self.x, self.y, self.z, self.dir_y, self.dir_z))

    def __eq__(self, other):
        if not isinstance(other, DirectedPoint3d):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.to_string()
