# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Test the Grid family and its row boundaries."""

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal
import pytest

from gridbox.errors import PreconditionViolated, UnsupportedAreaForGrid
from gridbox.geo import GLOBE, GeographicArea
from gridbox.grid import (
    Grid,
    ReducedGaussianGrid,
    RegularGaussianGrid,
    RegularLatLonGrid,
    build_grid
)
from gridbox.grid.definition import _GaussianGrid


@pytest.mark.parametrize('n', [1, 2, 6, 12, 64])
def test_reduced_gaussian_row_counts(n):
    """Test octahedral row counts are symmetric and grow by 4 towards the equator."""
    grid = ReducedGaussianGrid(n)
    counts = [grid.ni(j) for j in range(grid.nj)]

    assert grid.nj == 2 * n
    assert counts == counts[::-1]
    assert counts[0] == 20
    assert np.all(np.diff(counts[:n]) == 4)


@pytest.mark.parametrize('n', [1, 3, 8])
def test_regular_gaussian_row_counts(n):
    """Test regular Gaussian grids have 2N rows of 4N cells."""
    grid = RegularGaussianGrid(n)
    assert grid.nj == 2 * n
    assert all(grid.ni(j) == 4 * n for j in range(grid.nj))
    assert grid.size == 8 * n * n


def test_regular_latlon_row_counts():
    """Test regular lat/lon grids have nj rows of ni cells."""
    grid = RegularLatLonGrid(3, 4)
    assert grid.nj == 4
    assert_array_equal(grid.row_counts, [3, 3, 3, 3])
    assert grid.name == "LL3x4"


@pytest.mark.parametrize('name', ["LL3x4", "LL1x1", "LL360x181", "F1", "F4", "O1", "O4", "O80"])
def test_row_boundaries_global(name):
    """Test boundaries run strictly downward from the north to the south area limit."""
    grid = build_grid(name)
    boundaries = grid.row_boundaries()

    assert boundaries.size == grid.nj + 1
    assert boundaries[0] == GLOBE.north
    assert boundaries[-1] == GLOBE.south
    assert np.all(np.diff(boundaries) < 0)


def test_regular_latlon_regional_boundaries():
    """Test lat/lon boundaries span a regional area."""
    grid = RegularLatLonGrid(2, 3, GeographicArea(60, 0, 30, 45))
    assert_allclose(grid.row_boundaries(), [60, 50, 40, 30])
    assert_allclose(grid.row_centers(), [55, 45, 35])


def test_gaussian_boundaries():
    """Test Gaussian boundaries sit halfway between approximate latitudes."""
    grid = ReducedGaussianGrid(4)
    assert_allclose(grid.row_centers(), [78.75, 56.25, 33.75, 11.25, -11.25, -33.75, -56.25, -78.75])
    assert_allclose(grid.row_boundaries(), [90, 67.5, 45, 22.5, 0, -22.5, -45, -67.5, -90])


@pytest.mark.parametrize('grid_class', [RegularGaussianGrid, ReducedGaussianGrid])
def test_gaussian_requires_globe(grid_class):
    """Test that Gaussian grids reject any area but the whole globe."""
    with pytest.raises(UnsupportedAreaForGrid) as exc_info:
        grid_class(4, GeographicArea(80, 0, -90, 360))
    assert exc_info.value.name == f"{grid_class.prefix}4"
    assert grid_class(4, "90/0/-90/360").area == GLOBE


@pytest.mark.parametrize('args', [(0, 1), (1, 0), (-2, 3)])
def test_regular_latlon_bad_counts(args):
    """Test that non-positive lat/lon counts are rejected."""
    with pytest.raises(ValueError):
        RegularLatLonGrid(*args)


@pytest.mark.parametrize('grid_class', [RegularGaussianGrid, ReducedGaussianGrid])
def test_gaussian_bad_number(grid_class):
    """Test that the Gaussian number must be positive."""
    with pytest.raises(ValueError):
        grid_class(0)


def test_row_index_bounds():
    """Test that rows outside the grid are rejected."""
    grid = RegularGaussianGrid(2)
    with pytest.raises(IndexError):
        grid.ni(-1)
    with pytest.raises(IndexError):
        grid.ni(grid.nj)


def test_row_counts_read_only():
    """Test that row counts cannot be modified through the grid."""
    grid = ReducedGaussianGrid(2)
    with pytest.raises(ValueError):
        grid.row_counts[0] = 1


def test_longitudes_periodic():
    """Test that periodic rows exclude the east edge."""
    grid = ReducedGaussianGrid(4)
    lons = grid.longitudes(0)
    assert lons.size == 20
    assert_allclose(lons, np.arange(20) * 18.0)


def test_longitudes_regional():
    """Test that non-periodic rows include the east edge."""
    grid = RegularLatLonGrid(3, 4, GeographicArea(50, -10, 10, 20))
    assert_allclose(grid.longitudes(2), [-10, 5, 20])


def test_to_dataset():
    """Test the xarray description of the latitude axis."""
    grid = build_grid("O4")
    ds = grid.to_dataset()

    assert ds.sizes['lat'] == grid.nj
    assert ds['lat_bnds'].shape == (grid.nj, 2)
    assert_array_equal(ds['nlon'].values, grid.row_counts)
    assert_allclose(ds['lat_bnds'].values[:, 0], grid.row_boundaries()[:-1])
    assert_allclose(ds['lat_bnds'].values[:, 1], grid.row_boundaries()[1:])
    assert ds['lat'].attrs['units'] == 'degrees_north'
    assert ds.attrs['grid'] == 'O4'
    assert ds.attrs['area'] == '90/0/-90/360'


class _UpsideDownGrid(Grid):

    @property
    def name(self):
        return "upside-down"

    def _boundaries(self):
        return np.array([-90.0, 90.0])


def test_row_boundaries_post_condition():
    """Test that a grid producing unordered boundaries breaks the contract."""
    grid = _UpsideDownGrid([4])
    with pytest.raises(PreconditionViolated, match="upside-down"):
        grid.row_boundaries()


def test_grid_requires_rows_and_cells():
    """Test that empty grids and empty rows are rejected."""
    with pytest.raises(ValueError):
        _UpsideDownGrid([])
    with pytest.raises(ValueError):
        _UpsideDownGrid([4, 0])


@pytest.mark.parametrize(
    'area, reason',
    [(GeographicArea(10, 0, 10, 20), "height"), (GeographicArea(60, 5, 30, 5), "width")]
)
def test_regular_latlon_degenerate_area(area, reason):
    """Test that lat/lon grids reject areas without height or width."""
    with pytest.raises(UnsupportedAreaForGrid, match=reason) as exc_info:
        RegularLatLonGrid(2, 2, area)
    assert exc_info.value.name == "LL2x2"
    assert exc_info.value.area == area


def test_gaussian_base_is_abstract():
    """Test that the shared Gaussian base cannot be built without row counts."""
    with pytest.raises(TypeError):
        _GaussianGrid(4)
