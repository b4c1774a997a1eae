# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Merging of two grids' row boundaries into one ordered, origin-tagged sequence.

The merged sequence is what grid-box intersection works from: walking it north to south,
every step crosses a row boundary of either the input (origin 0) or the output (origin 1)
grid, so overlapping rows of the two grids can be read off consecutive entries.
"""

import math
from typing import NamedTuple

import pandas as pd

from ..errors import PreconditionViolated


INPUT_ORIGIN = 0
OUTPUT_ORIGIN = 1


class Midpoint(NamedTuple):
    """A row boundary tagged with the grid it came from and its position in that grid."""

    coordinate: float
    origin: int
    sequence_index: int

    @property
    def sort_key(self):
        """Descending coordinate, then ascending origin."""
        return (-self.coordinate, self.origin)

    def __str__(self):
        return f"{self.coordinate:g}/{self.origin}"


def tag_boundaries(values, origin):
    """Tag each boundary with ``origin`` and its position in ``values``.

    Parameters
    ----------
    values : iterable of float
        Boundaries of a single grid
    origin : int
        Label of the grid the boundaries belong to

    Returns
    -------
    list of Midpoint
    """
    return [Midpoint(float(value), int(origin), i) for i, value in enumerate(values)]


def _check_run(run, label):
    for i, midpoint in enumerate(run):
        if not math.isfinite(midpoint.coordinate):
            raise PreconditionViolated(
                f"{label} has a non-finite coordinate at entry {i} ({midpoint})"
            )
        if i and midpoint.sort_key < run[i - 1].sort_key:
            raise PreconditionViolated(
                f"{label} is not sorted by descending coordinate: entry {i} ({midpoint}) "
                f"belongs before entry {i - 1} ({run[i - 1]})"
            )


def merge_midpoints(run_a, run_b):
    """Stably merge two pre-sorted runs of midpoints.

    The result is ordered by descending coordinate, with equal coordinates ordered by
    ascending origin. Entries equal in both keep their order within their run, and entries
    of ``run_a`` precede those of ``run_b``.

    Parameters
    ----------
    run_a, run_b : sequence of Midpoint
        Runs each already ordered as the result will be

    Returns
    -------
    list of Midpoint
        All ``len(run_a) + len(run_b)`` entries in merged order

    Raises
    ------
    PreconditionViolated
        If either run is out of order or holds a non-finite coordinate
    """
    _check_run(run_a, "first run")
    _check_run(run_b, "second run")

    merged = []
    i = j = 0
    while i < len(run_a) and j < len(run_b):
        # Taking from run_a on ties keeps the merge stable
        if run_b[j].sort_key < run_a[i].sort_key:
            merged.append(run_b[j])
            j += 1
        else:
            merged.append(run_a[i])
            i += 1
    merged.extend(run_a[i:])
    merged.extend(run_b[j:])
    return merged


def merge_boundaries(boundaries_a, boundaries_b, origins=(INPUT_ORIGIN, OUTPUT_ORIGIN)):
    """Tag two boundary sequences with distinct origins and merge them.

    Parameters
    ----------
    boundaries_a, boundaries_b : sequence of float
        Boundaries of each grid, in descending order
    origins : tuple of int, optional
        Origin labels for the two sequences. Defaults to (0, 1).

    Returns
    -------
    list of Midpoint
    """
    origin_a, origin_b = origins
    if origin_a == origin_b:
        raise ValueError(f"origins of merged boundaries must differ, got {origins}")
    return merge_midpoints(
        tag_boundaries(boundaries_a, origin_a),
        tag_boundaries(boundaries_b, origin_b)
    )


def merge_grid_boundaries(input_grid, output_grid):
    """Merge the row boundaries of an input grid (origin 0) and output grid (origin 1).

    Parameters
    ----------
    input_grid : gridbox.grid.Grid
        Source grid of the regridding
    output_grid : gridbox.grid.Grid
        Target grid of the regridding

    Returns
    -------
    list of Midpoint
        Both grids' latitude boundaries, north to south
    """
    return merge_boundaries(input_grid.row_boundaries(), output_grid.row_boundaries())


def midpoints_to_dataframe(midpoints):
    """Tabulate midpoints, one row per entry, in their given order."""
    return pd.DataFrame.from_records(
        [tuple(m) for m in midpoints], columns=list(Midpoint._fields)
    ).astype({'coordinate': 'float64', 'origin': 'int64', 'sequence_index': 'int64'})
