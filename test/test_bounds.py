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


import pytest

from segment3d import Bounds3d, InvalidGeometry, LineSegment3d, Point3d


def test_segment_bounds():
    bounds = LineSegment3d(1, 2, 3, -3, -4, -5).bounds()
    assert (bounds.min_x, bounds.max_x) == (-3, 1)
    assert (bounds.min_y, bounds.max_y) == (-4, 2)
    assert (bounds.min_z, bounds.max_z) == (-5, 3)
    assert (bounds.delta_x, bounds.delta_y, bounds.delta_z) == (4, 6, 8)
    assert bounds.midpoint() == Point3d(-1, -1, -1)


def test_bounds_of_reversed_segment_match():
    segment = LineSegment3d(1, 20, 3, 4, 5, 60)
    assert segment.bounds() == segment.reverse().bounds()


def test_contains():
    bounds = Bounds3d(0, 10, 0, 5, -1, 1)
    assert bounds.contains(Point3d(0, 0, 0))
    assert bounds.contains((10, 5, 1))
    assert not bounds.contains(Point3d(10.5, 0, 0))
    assert not bounds.contains(Point3d(5, 5, -2))


def test_flat_bounds_allowed():
    bounds = LineSegment3d(0, 0, 0, 0, 0, 1).bounds()
    assert bounds.delta_x == 0.0
    assert bounds.delta_y == 0.0


@pytest.mark.parametrize("values", [
    (1, 0, 0, 1, 0, 1),
    (0, 1, 1, 0, 0, 1),
    (0, 1, 0, 1, 1, 0),
])
def test_inverted_bounds_rejected(values):
    with pytest.raises(InvalidGeometry):
        Bounds3d(*values)


def test_equals_and_hash():
    bounds = Bounds3d(0, 1, 2, 3, 4, 5)
    assert bounds == Bounds3d(0.0, 1.0, 2.0, 3.0, 4.0, 5.0)
    assert hash(bounds) == hash(Bounds3d(0, 1, 2, 3, 4, 5))
    assert bounds != Bounds3d(0, 1, 2, 3, 4, 6)
