# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""GridBox: grid definitions and boundary merging for grid-box intersection regridding."""

from .errors import (
    GridboxError,
    InvalidAreaError,
    MalformedAreaToken,
    PreconditionViolated,
    UnrecognizedGridName,
    UnsupportedAreaForGrid
)
from .geo import GLOBE, GeographicArea, parse_area
from .grid import build_grid
from .intersection import Midpoint, merge_grid_boundaries
