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



"""File I/O utilities for loading YAML segment jobs and exporting JSON or TSV results."""

from datetime import datetime
import json
import logging
import math
from pathlib import Path

import yaml

from .export import bounds_to_dict, location_to_pose, segment_to_dict, to_tsv
from .line_segment import LineSegment3d
from .point import Point3d
from .sampler import sample_locations

logger = logging.getLogger(__name__)

DEFAULT_PARAMETERS = {
    'num_points': 2,
}


def load_segment_job(yaml_path):
    """
    Load a segment job from a YAML file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML job file.

    Returns
    -------
    tuple
        A tuple containing the following elements:
        - segments : list
            List of LineSegment3d objects.
        - queries : list
            List of Point3d query points (empty when none are given).
        - parameters : dict
            Job parameters with defaults filled in.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid or a segment is degenerate.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Job file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError("Job file must contain a mapping at the top level")

    if 'segments' not in config:
        raise ValueError("Missing required key in YAML: 'segments'")

    if not config['segments']:
        raise ValueError("No segments defined in job file")

    if not isinstance(config['segments'], list):
        raise ValueError("'segments' must be a list")

    if not isinstance(config.get('queries') or [], list):
        raise ValueError("'queries' must be a list")

    segments = []
    for i, segment_dict in enumerate(config['segments']):
        if not isinstance(segment_dict, dict) or 'start' not in segment_dict or 'end' not in segment_dict:
            raise ValueError(f"Segment {i} missing 'start' or 'end'")

        segments.append(LineSegment3d(segment_dict['start'], segment_dict['end']))

    queries = [Point3d.of(query, f"query {i}") for i, query in enumerate(config.get('queries') or [])]

    parameters = dict(DEFAULT_PARAMETERS)
    parameters.update(config.get('parameters') or {})
    if isinstance(parameters['num_points'], bool) or not isinstance(parameters['num_points'], int):
        raise ValueError(f"num_points must be an integer, got {parameters['num_points']!r}")

    logger.debug("Loaded %d segment(s) and %d query point(s) from %s", len(segments), len(queries), yaml_path)
    return segments, queries, parameters


def _json_compliant(value):
    """Replace NaN and infinite floats, at any depth, by None."""
    if isinstance(value, dict):
        return {key: _json_compliant(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_compliant(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def build_report(segments, queries, num_points):
    """
    Evaluate every query point against every segment.

    Parameters
    ----------
    segments : list
        List of LineSegment3d objects.
    queries : list
        List of Point3d query points.
    num_points : int
        Number of poses sampled along each segment.

    Returns
    -------
    dict
        JSON-serialisable report keyed 'segment_<i>'. Fractional projections
        outside the segment, and any NaN or infinite value, are reported as None.

    """
    report = {}
    for i, segment in enumerate(segments):
        projections = []
        for query in queries:
            projections.append({
                'query': list(query),
                'closest_point': list(segment.closest_point_on_segment(query)),
                'fraction': segment.project_orthogonal_fractional(query),
                'fraction_extended': segment.project_orthogonal_fractional_extended(query),
            })

        poses = [location_to_pose(location, index)
                 for index, location in enumerate(sample_locations(segment, num_points))]

        entry = segment_to_dict(segment)
        entry['bounds'] = bounds_to_dict(segment.bounds())
        entry['poses'] = poses
        entry['projections'] = projections
        report[f'segment_{i}'] = _json_compliant(entry)
        logger.debug("Segment %d: %d pose(s), %d projection(s)", i, len(poses), len(projections))

    return report


def export_to_json(report, output_path, metadata=None):
    """
    Export a report to a JSON file.

    Parameters
    ----------
    report : dict
        Report built by build_report.
    output_path : str
        Path where the JSON file will be written.
    metadata : dict, optional
        Optional metadata to include in the output file.

    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'num_segments': len(report),
        },
        'segments': report,
    }

    if metadata:
        data['metadata'].update(metadata)

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info("Wrote JSON report for %d segment(s) to %s", len(report), output_path)


def export_to_tsv(segments, output_path):
    """Write the TSV export of all segments, one after another, to a file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        for segment in segments:
            f.write(to_tsv(segment))

    logger.info("Wrote TSV export of %d segment(s) to %s", len(segments), output_path)
