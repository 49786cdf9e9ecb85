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


"""Bounds3d - Axis aligned bounding box."""

from dataclasses import dataclass

from ._num import as_vector, bits_key
from .errors import InvalidGeometry
from .point import Point3d


@dataclass(frozen=True, eq=False)
class Bounds3d:
    """Axis aligned box given by its minimum and maximum along each axis."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    def __post_init__(self):
        for field in ("min_x", "max_x", "min_y", "max_y", "min_z", "max_z"):
            object.__setattr__(self, field, float(getattr(self, field)))
        for axis in ("x", "y", "z"):
            low = getattr(self, f"min_{axis}")
            high = getattr(self, f"max_{axis}")
            if low > high:
                raise InvalidGeometry(f"min_{axis} ({low}) may not exceed max_{axis} ({high})")

    @property
    def delta_x(self):
        return self.max_x - self.min_x

    @property
    def delta_y(self):
        return self.max_y - self.min_y

    @property
    def delta_z(self):
        return self.max_z - self.min_z

    def midpoint(self):
        """Center of the box."""
        return Point3d((self.min_x + self.max_x) / 2.0,
                       (self.min_y + self.max_y) / 2.0,
                       (self.min_z + self.max_z) / 2.0)

    def contains(self, point):
        """Check whether a point lies inside the box or on its boundary."""
        x, y, z = as_vector(point)
        return (self.min_x <= x <= self.max_x
                and self.min_y <= y <= self.max_y
                and self.min_z <= z <= self.max_z)

    def _key(self):
        return bits_key((self.min_x, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z))

    def __eq__(self, other):
        if not isinstance(other, Bounds3d):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())
