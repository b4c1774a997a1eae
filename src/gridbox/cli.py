# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Command-line listing of the merged latitude boundaries of an input and output grid."""

import argparse
import logging
import sys

from .errors import GridboxError
from .geo import DEFAULT_AREA_TOKEN
from .grid import build_grid
from .intersection import merge_grid_boundaries, midpoints_to_dataframe


log = logging.getLogger(__name__)

DEFAULT_INPUT_GRID = "O12"
DEFAULT_OUTPUT_GRID = "O6"


def make_parser():
    parser = argparse.ArgumentParser(
        prog="gridbox-boundaries",
        description="Grid-box intersections interpolation method: merged row boundaries."
    )
    parser.add_argument(
        "grids",
        nargs="*",
        help="Input and output grid, as an alternative to --input/--output",
        metavar="GRID"
    )
    parser.add_argument(
        "-i", "--input", help="Input grid", default=DEFAULT_INPUT_GRID, metavar=DEFAULT_INPUT_GRID
    )
    parser.add_argument(
        "-o", "--output", help="Output grid", default=DEFAULT_OUTPUT_GRID,
        metavar=DEFAULT_OUTPUT_GRID
    )
    parser.add_argument(
        "-I", "--input-area", help="Input grid area", default=DEFAULT_AREA_TOKEN,
        metavar=DEFAULT_AREA_TOKEN
    )
    parser.add_argument(
        "-O", "--output-area", help="Output grid area", default=DEFAULT_AREA_TOKEN,
        metavar=DEFAULT_AREA_TOKEN
    )
    parser.add_argument(
        "-f", "--format", help="Listing format", choices=("text", "csv"), default="text"
    )
    parser.add_argument(
        "-v", "--verbose", help="Increase logging verbosity", action="count", default=0
    )
    return parser


def main(argv=None, stdout=None):
    """Run the command-line tool, returning its exit status."""
    stdout = sys.stdout if stdout is None else stdout
    parser = make_parser()
    args = parser.parse_args(argv)

    if len(args.grids) > 2:
        parser.error(f"at most two grids may be given, got {len(args.grids)}")
    if len(args.grids) > 0:
        args.input = args.grids[0]
    if len(args.grids) > 1:
        args.output = args.grids[1]

    logging.basicConfig(
        level=(logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)],
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        input_grid = build_grid(args.input, args.input_area)
        output_grid = build_grid(args.output, args.output_area)
    except GridboxError as exc:
        parser.print_help(sys.stderr)
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    log.info(f"Input grid: {input_grid!r}")
    log.info(f"Output grid: {output_grid!r}")
    midpoints = merge_grid_boundaries(input_grid, output_grid)

    if args.format == "csv":
        midpoints_to_dataframe(midpoints).to_csv(stdout, index=False)
    else:
        for midpoint in midpoints:
            print(midpoint, file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
