# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Grid definitions and their latitude/longitude coordinates."""

from .coordinates import (
    approximate_gaussian_latitudes,
    boundaries_from_centers,
    linear_spacing
)
from .definition import (
    Grid,
    ReducedGaussianGrid,
    RegularGaussianGrid,
    RegularLatLonGrid,
    octahedral_row_counts
)
from .factory import build_grid, parse_grid_name
