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


"""Text and dictionary exports of segments and directed points."""

import math

import numpy as np


def to_tsv(segment):
    """
    Export a segment as tab separated values for spreadsheet import.

    Args:
        segment : LineSegment3d
            Segment to export

    Returns
    -------
    str
        Two newline terminated lines, "x\\ty\\tz" of the start point then
        of the end point

    """
    return (f"{segment.start_x!r}\t{segment.start_y!r}\t{segment.start_z!r}\n"
            f"{segment.end_x!r}\t{segment.end_y!r}\t{segment.end_z!r}\n")


def segment_to_dict(segment):
    """Convert a segment to a dictionary for JSON export."""
    return {
        "start": list(segment.start),
        "end": list(segment.end),
        "length": segment.length(),
    }


def bounds_to_dict(bounds):
    """Convert a bounding box to a dictionary with 'min' and 'max' corners."""
    return {
        "min": [bounds.min_x, bounds.min_y, bounds.min_z],
        "max": [bounds.max_x, bounds.max_y, bounds.max_z],
    }


def location_to_pose(location, index):
    """
    Build pose data dictionary with position, quaternion, and transformation matrix.

    Args:
        location : DirectedPoint3d
            Position and orientation to export
        index : int
            Point index

    Returns
    -------
    dict
        Dictionary with pose data; the quaternion is ordered [x, y, z, w].
        Quaternion and rotation block are NaN when the orientation is not finite

    """
    position = location.as_array()

    if math.isfinite(location.dir_y) and math.isfinite(location.dir_z):
        rotation = location.rotation()
        quaternion = rotation.as_quat()
        rot_matrix = rotation.as_matrix()
    else:
        quaternion = np.full(4, np.nan)
        rot_matrix = np.full((3, 3), np.nan)

    transform_matrix = np.eye(4)
    transform_matrix[:3, :3] = rot_matrix
    transform_matrix[:3, 3] = position

    return {
        "index": index,
        "position": position.tolist(),
        "dir_y": location.dir_y,
        "dir_z": location.dir_z,
        "quaternion": quaternion.tolist(),
        "matrix": transform_matrix.tolist(),
    }
