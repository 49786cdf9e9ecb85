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


"""Immutable 3D line segment geometry."""

from .bounds import Bounds3d
from .directed_point import DirectedPoint3d
from .errors import GeometryError, InvalidGeometry, NotANumber, NullInput, OutOfRange
from .line_segment import LineSegment3d
from .point import Point3d

__all__ = [
    'Bounds3d',
    'DirectedPoint3d',
    'GeometryError',
    'InvalidGeometry',
    'LineSegment3d',
    'NotANumber',
    'NullInput',
    'OutOfRange',
    'Point3d',
]
