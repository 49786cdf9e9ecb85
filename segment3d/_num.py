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


"""Private numerical helpers shared by the geometry value types."""

import numpy as np

from .errors import InvalidGeometry, NullInput


def as_vector(value, name="point"):
    """
    Convert a point-like value to a read-only float array of shape (3,).

    Args:
        value: Point3d, sequence of three numbers or numpy array
        name: Argument name used in error messages

    Returns
    -------
    np.ndarray
        Read-only array [x, y, z]

    Raises
    ------
    NullInput
        If value, or one of its coordinates, is None
    InvalidGeometry
        If value does not have exactly three components

    """
    if value is None:
        raise NullInput(f"{name} may not be None")
    if hasattr(value, "as_array"):
        return value.as_array()
    if isinstance(value, (list, tuple)) and any(component is None for component in value):
        raise NullInput(f"{name} may not contain None coordinates")
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise InvalidGeometry(f"{name} must be a 3D point [x, y, z], got shape {vector.shape}")
    vector.flags.writeable = False
    return vector


def norm(vector):
    """Euclidean length of a vector as a Python float."""
    return float(np.linalg.norm(vector))


def bits_key(values):
    """
    Build an exact comparison key for a sequence of floats.

    float.hex keeps 0.0 and -0.0 apart and maps every NaN to 'nan'.
    """
    return tuple(float(v).hex() for v in values)
