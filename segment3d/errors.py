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


"""Exceptions raised by the segment geometry primitives."""


class GeometryError(Exception):
    """Base class for all geometry errors."""


class InvalidGeometry(GeometryError, ValueError):
    """Raised when input does not describe valid geometry (e.g. a zero length segment)."""


class OutOfRange(GeometryError, ValueError):
    """Raised when a position lies outside the range accepted by a clamped operation."""


class NotANumber(GeometryError, ValueError):
    """Raised when NaN is passed where a number is required."""


class NullInput(GeometryError, TypeError):
    """Raised when None is passed where a point is required."""
