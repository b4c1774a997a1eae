# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Construction of grids from their names."""

import logging
import re

from ..errors import UnrecognizedGridName
from ..geo import parse_area
from .definition import ReducedGaussianGrid, RegularGaussianGrid, RegularLatLonGrid


log = logging.getLogger(__name__)
octahedral_pattern = re.compile(r"[Oo](?P<n>[1-9][0-9]*)")
regular_gaussian_pattern = re.compile(r"F(?P<n>[1-9][0-9]*)")
regular_latlon_pattern = re.compile(r"LL(?P<ni>[1-9][0-9]*)x(?P<nj>[1-9][0-9]*)")


def parse_grid_name(name):
    """Identify the grid family and parameters of a grid name.

    Parameters
    ----------
    name : str
        Grid name: "O<N>" or "o<N>" (octahedral reduced Gaussian), "F<N>" (regular
        Gaussian) or "LL<Ni>x<Nj>" (regular lat/lon)

    Returns
    -------
    tuple of (type, dict)
        The Grid class and the keyword arguments to construct it with
    """
    if isinstance(name, str):
        match = octahedral_pattern.fullmatch(name)
        if match:
            return ReducedGaussianGrid, {'n': int(match['n'])}

        match = regular_gaussian_pattern.fullmatch(name)
        if match:
            return RegularGaussianGrid, {'n': int(match['n'])}

        match = regular_latlon_pattern.fullmatch(name)
        if match:
            return RegularLatLonGrid, {'ni': int(match['ni']), 'nj': int(match['nj'])}

    raise UnrecognizedGridName(name)


def build_grid(name, area=None):
    """Build a grid from its name.

    Parameters
    ----------
    name : str
        Grid name, see parse_grid_name
    area : GeographicArea or str, optional
        Area of the grid, or its "N/W/S/E" token. Defaults to the whole globe, which is
        also the only area Gaussian grids accept.

    Returns
    -------
    Grid
    """
    grid_class, params = parse_grid_name(name)
    grid = grid_class(area=parse_area(area), **params)
    log.debug(f"Built grid {grid.name} with {grid.nj} rows and {grid.size} cells over {grid.area}")
    return grid
