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


import math

import pytest

from segment3d import LineSegment3d
from segment3d.sampler import sample_locations


def test_sample_endpoints_and_spacing():
    segment = LineSegment3d(1, 2, 3, 20, 10, 15)
    locations = sample_locations(segment, 5)

    assert len(locations) == 5
    assert locations[0].position == segment.start
    assert locations[-1].position.epsilon_equals(segment.end, 1e-9)
    for i, location in enumerate(locations):
        assert location.distance(segment.start) == pytest.approx(segment.length() * i / 4, abs=1e-9)
        assert (location.dir_y, location.dir_z) == (segment.dir_y, segment.dir_z)


def test_single_sample_is_start():
    segment = LineSegment3d(1, 2, 3, 20, 10, 15)
    locations = sample_locations(segment, 1)
    assert len(locations) == 1
    assert locations[0].position == segment.start


@pytest.mark.parametrize("num_points", [0, -1, 1001, 2.5, "3", True, None])
def test_invalid_num_points(num_points):
    segment = LineSegment3d(1, 2, 3, 20, 10, 15)
    with pytest.raises(ValueError):
        sample_locations(segment, num_points)


@pytest.mark.parametrize("segment, num_points", [
    (LineSegment3d(math.nan, 0, 0, 1, 1, 1), 2),
    (LineSegment3d(0, 0, 0, math.inf, 1, 1), 1),
    (LineSegment3d(0, 0, 0, math.inf, 1, 1), 3),
])
def test_non_finite_length_gives_nan_positions(segment, num_points):
    locations = sample_locations(segment, num_points)
    assert len(locations) == num_points
    for location in locations:
        assert math.isnan(location.x)
        assert math.isnan(location.y)
        assert math.isnan(location.z)
