# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Operations related to latitude/longitude grid coordinates."""

import numpy as np

from ..errors import PreconditionViolated


def linear_spacing(start, stop, count, endpoint=True):
    """Generate evenly spaced values between two bounds.

    Parameters
    ----------
    start : float
        First value of the sequence
    stop : float
        Final bound of the sequence
    count : int
        Number of values to generate. Must be positive.
    endpoint : bool, optional
        If True (default), ``stop`` is the last value and the spacing is
        ``(stop - start) / (count - 1)``. Otherwise the spacing is
        ``(stop - start) / count`` and ``stop`` is excluded.

    Returns
    -------
    numpy.ndarray
        Spaced values as float64
    """
    if int(count) != count or count < 1:
        raise ValueError(f"count must be a positive integer, got {count}")
    return np.linspace(start, stop, int(count), endpoint=endpoint, dtype='float64')


def approximate_gaussian_latitudes(n):
    """Approximate the 2N Gaussian latitudes of a global grid, north to south.

    Row centers are placed at ``90 - (90 / N) * (i + 0.5)`` for the northern hemisphere
    and mirrored about the equator. This is not the true Gaussian quadrature abscissa.

    Parameters
    ----------
    n : int
        Number of latitude rows between a pole and the equator

    Returns
    -------
    numpy.ndarray
        Row center latitudes, shape (2 * n,)
    """
    if n < 1:
        raise ValueError(f"Gaussian grid number must be positive, got {n}")
    northern = 90.0 - (90.0 / n) * (np.arange(n, dtype='float64') + 0.5)
    return np.concatenate([northern, -northern[::-1]])


def boundaries_from_centers(centers, north, south):
    """Place row boundaries halfway between row centers.

    Parameters
    ----------
    centers : numpy.ndarray
        Row center latitudes, strictly decreasing
    north : float
        Outermost northern boundary
    south : float
        Outermost southern boundary

    Returns
    -------
    numpy.ndarray
        Boundaries, shape (len(centers) + 1,), with the two extremes clamped to
        ``north`` and ``south``
    """
    centers = np.asarray(centers, dtype='float64')
    boundaries = np.empty(centers.size + 1, dtype='float64')
    boundaries[0] = north
    boundaries[1:-1] = 0.5 * (centers[:-1] + centers[1:])
    boundaries[-1] = south
    return boundaries


def centers_from_boundaries(boundaries):
    """Return the midpoint of each pair of adjacent boundaries."""
    boundaries = np.asarray(boundaries, dtype='float64')
    return 0.5 * (boundaries[:-1] + boundaries[1:])


def check_strictly_decreasing(values, label="values"):
    """Raise PreconditionViolated unless ``values`` is strictly decreasing."""
    values = np.asarray(values)
    bad = np.flatnonzero(values[1:] >= values[:-1])
    if bad.size:
        i = int(bad[0])
        raise PreconditionViolated(
            f"{label} must be strictly decreasing, but entry {i + 1} ({values[i + 1]}) "
            f"does not fall below entry {i} ({values[i]})"
        )
    return values
