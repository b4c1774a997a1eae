# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""The Grid family: regular lat/lon, regular Gaussian and reduced (octahedral) Gaussian."""

from abc import ABC, abstractmethod

import numpy as np
import xarray as xr

from ..errors import UnsupportedAreaForGrid
from ..geo import GLOBE, parse_area
from .coordinates import (
    approximate_gaussian_latitudes,
    boundaries_from_centers,
    centers_from_boundaries,
    check_strictly_decreasing,
    linear_spacing
)


class Grid(ABC):
    """Latitude rows over a geographic area, each row holding some number of cells.

    Grids are read-only once constructed. Concrete grids are limited to
    RegularLatLonGrid, RegularGaussianGrid and ReducedGaussianGrid, which are built by
    name with ``gridbox.grid.build_grid``.

    Parameters
    ----------
    row_counts : sequence of int
        Number of longitude cells in each latitude row, ordered north to south
    area : GeographicArea or str, optional
        Area covered by the grid. Defaults to the whole globe.
    """

    def __init__(self, row_counts, area=None):
        self.area = parse_area(area)

        counts = np.asarray(row_counts, dtype='int64')
        if counts.ndim != 1 or counts.size == 0:
            raise ValueError("row_counts must be a non-empty one-dimensional sequence")
        if np.any(counts < 1):
            raise ValueError("every row must contain at least one cell")
        counts = counts.astype('uint64')
        counts.flags.writeable = False
        self._row_counts = counts

    @property
    @abstractmethod
    def name(self):
        """Canonical grid name, as accepted by build_grid."""

    @abstractmethod
    def _boundaries(self):
        """Compute the nj + 1 row boundaries, north to south."""

    @property
    def nj(self):
        """Number of latitude rows."""
        return int(self._row_counts.size)

    def ni(self, j):
        """Number of longitude cells in row ``j``."""
        if not 0 <= j < self.nj:
            raise IndexError(f"row {j} out of range for grid {self.name} with {self.nj} rows")
        return int(self._row_counts[j])

    @property
    def row_counts(self):
        return self._row_counts

    @property
    def size(self):
        """Total number of cells."""
        return int(self._row_counts.sum())

    def row_boundaries(self):
        """Latitudes bounding every row, strictly decreasing from area north to south.

        Returns
        -------
        numpy.ndarray
            Boundaries, shape (nj + 1,)
        """
        return check_strictly_decreasing(
            self._boundaries(), label=f"row boundaries of grid {self.name}"
        )

    def row_centers(self):
        """Latitude of the center of every row, north to south."""
        return centers_from_boundaries(self.row_boundaries())

    def longitudes(self, j):
        """Longitude cell centers of row ``j``.

        The east edge is excluded when the area wraps around in longitude, since the first
        and last columns of a periodic row meet rather than duplicate each other.
        """
        return linear_spacing(
            self.area.west,
            self.area.east,
            self.ni(j),
            endpoint=not self.area.is_periodic_west_east
        )

    def to_dataset(self):
        """Describe the latitude axis of the grid as an xarray Dataset.

        Returns
        -------
        xarray.Dataset
            Dataset with ``lat`` coordinate, ``lat_bnds`` bounds and ``nlon`` cells per
            row, following CF Conventions where applicable
        """
        boundaries = self.row_boundaries()
        return xr.Dataset(
            data_vars={
                'nlon': (
                    ['lat'],
                    self._row_counts.copy(),
                    {'long_name': 'Number of longitude cells in row'}
                ),
                'lat_bnds': (['lat', 'nv'], np.stack([boundaries[:-1], boundaries[1:]], axis=1))
            },
            coords={
                'lat': (
                    ['lat'],
                    self.row_centers(),
                    {'standard_name': 'latitude', 'units': 'degrees_north', 'bounds': 'lat_bnds'}
                )
            },
            attrs={'grid': self.name, 'area': str(self.area)}
        )

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, area='{self.area}')"


class RegularLatLonGrid(Grid):
    """Grid of ``nj`` evenly spaced rows, each with ``ni`` cells."""

    def __init__(self, ni, nj, area=None):
        if ni < 1 or nj < 1:
            raise ValueError(f"ni and nj must be positive, got {ni} and {nj}")
        self._ni = int(ni)
        super().__init__(np.full(int(nj), self._ni), area)
        if self.area.north == self.area.south:
            raise UnsupportedAreaForGrid(
                self.name, self.area, reason="needs an area of non-zero height"
            )
        if self.area.west == self.area.east:
            raise UnsupportedAreaForGrid(
                self.name, self.area, reason="needs an area of non-zero width"
            )

    @property
    def name(self):
        return f"LL{self._ni}x{self.nj}"

    def _boundaries(self):
        return linear_spacing(self.area.north, self.area.south, self.nj + 1, endpoint=True)


class _GaussianGrid(Grid):
    """Shared behavior of Gaussian grids, which are restricted to the whole globe."""

    def __init__(self, n, area=None):
        if n < 1:
            raise ValueError(f"Gaussian grid number must be positive, got {n}")
        self.n = int(n)
        area = parse_area(area)
        if area != GLOBE:
            raise UnsupportedAreaForGrid(self.name, area)
        super().__init__(self.gaussian_row_counts(self.n), area)

    @staticmethod
    @abstractmethod
    def gaussian_row_counts(n):
        """Cells in each of the 2N rows, north to south."""

    @property
    def name(self):
        return f"{self.prefix}{self.n}"

    def row_centers(self):
        return approximate_gaussian_latitudes(self.n)

    def _boundaries(self):
        return boundaries_from_centers(self.row_centers(), self.area.north, self.area.south)


class RegularGaussianGrid(_GaussianGrid):
    """Regular Gaussian grid: 2N rows of 4N cells each."""

    prefix = 'F'

    @staticmethod
    def gaussian_row_counts(n):
        return np.full(2 * n, 4 * n, dtype='int64')


class ReducedGaussianGrid(_GaussianGrid):
    """Octahedral reduced Gaussian grid: 2N rows, with 20 + 4i cells on rows i and 2N-1-i."""

    prefix = 'O'

    @staticmethod
    def gaussian_row_counts(n):
        return octahedral_row_counts(n)


def octahedral_row_counts(n):
    """Cells per row of an octahedral grid, increasing from each pole to the equator."""
    counts = np.empty(2 * n, dtype='int64')
    northern = 20 + 4 * np.arange(n, dtype='int64')
    counts[:n] = northern
    counts[n:] = northern[::-1]
    return counts
