# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Preparation of grid-box intersections between an input and output grid."""

from .midpoints import (
    INPUT_ORIGIN,
    OUTPUT_ORIGIN,
    Midpoint,
    merge_boundaries,
    merge_grid_boundaries,
    merge_midpoints,
    midpoints_to_dataframe,
    tag_boundaries
)
