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


"""Evenly spaced sampling of directed locations along a segment."""

import math

MAX_POINTS = 1000


def sample_locations(segment, num_points):
    """
    Sample directed locations from start to end of a segment.

    Args:
        segment : LineSegment3d
            Segment to sample
        num_points : int
            Number of locations; the first is the start point and, when more
            than one is requested, the last is the end point

    Returns
    -------
    list of DirectedPoint3d
        Locations with the orientation of the segment; positions are NaN
        when the segment length is not finite

    Raises
    ------
    ValueError
        If num_points is not an integer in [1, 1000]

    """
    if isinstance(num_points, bool) or not isinstance(num_points, int):
        raise ValueError(f"num_points must be an integer, got {num_points!r}")
    if not (1 <= num_points <= MAX_POINTS):
        raise ValueError(f"num_points must be between 1 and {MAX_POINTS}, got {num_points}")

    length = segment.length()
    if not math.isfinite(length):
        # offsets along an infinite or NaN length are undefined
        return [segment.location_at_extended(math.nan) for _ in range(num_points)]

    locations = []
    for i in range(num_points):
        if i == num_points - 1 and num_points > 1:
            position = length
        else:
            position = length * i / max(1, num_points - 1)
        locations.append(segment.location_at_extended(position))
    return locations
