#!/usr/bin/env python3

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


"""Main user entry point - loads a segment job, evaluates it, and exports the result."""

import argparse
import json
import logging
import sys
from pathlib import Path

from segment3d import job_io
from segment3d.export import to_tsv

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Evaluate 3D line segment queries from a YAML job file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the JSON report
  %(prog)s --input job.yaml

  # Write a TSV export for spreadsheet import
  %(prog)s --input job.yaml --format tsv --output segments.tsv

  # Sample ten poses per segment, with progress output
  %(prog)s --input job.yaml --num-points 10 --verbose
        """
    )

    parser.add_argument(
        '--input', '-i',
        type=str,
        required=True,
        help='Input YAML job file'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Output file (default: print to stdout)'
    )

    parser.add_argument(
        '--format', '-f',
        choices=['json', 'tsv'],
        default='json',
        help='Output format (default: json)'
    )

    parser.add_argument(
        '--num-points', '-n',
        type=int,
        default=None,
        help='Number of poses sampled per segment (overrides the job file)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log detailed information during evaluation'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Orchestrate loading, evaluating, and exporting of a segment job."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        logger.info("Loading job from: %s", args.input)
        segments, queries, parameters = job_io.load_segment_job(args.input)

        if args.num_points is not None:
            parameters['num_points'] = args.num_points

        logger.info("Job: %s, %d segment(s), %d query point(s), %d pose(s) per segment",
                    Path(args.input).stem, len(segments), len(queries), parameters['num_points'])

        if args.format == 'tsv':
            if args.output is None:
                sys.stdout.write(''.join(to_tsv(segment) for segment in segments))
            else:
                job_io.export_to_tsv(segments, args.output)
            return 0

        report = job_io.build_report(segments, queries, parameters['num_points'])

        if args.output is None:
            json.dump({'segments': report}, sys.stdout, indent=2)
            sys.stdout.write('\n')
        else:
            metadata = {
                'input_file': str(Path(args.input).resolve()),
                'num_points': parameters['num_points'],
                'num_queries': len(queries),
            }
            job_io.export_to_json(report, args.output, metadata)

        return 0

    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1
    except ValueError as e:
        print(f"ERROR: Invalid job - {e}")
        return 1
    except Exception as e:
        print(f"ERROR: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
