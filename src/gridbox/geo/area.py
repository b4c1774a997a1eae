# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""The GeographicArea bounding box and its token parser."""

from dataclasses import dataclass
import math
import re

from ..errors import InvalidAreaError, MalformedAreaToken


DEFAULT_AREA_TOKEN = "90/0/-90/360"

_signed_decimal = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
area_token_pattern = re.compile(
    r"(?P<north>{0})/(?P<west>{0})/(?P<south>{0})/(?P<east>{0})".format(_signed_decimal)
)


@dataclass(frozen=True)
class GeographicArea:
    """Bounding box in degrees, given in N/W/S/E order.

    Parameters
    ----------
    north : float
        Northern latitude limit
    west : float
        Western longitude limit
    south : float
        Southern latitude limit
    east : float
        Eastern longitude limit, no more than 360 degrees east of ``west``

    Notes
    -----
    Equality compares the four stored floats exactly. An area computed through arithmetic
    may therefore not compare equal to ``GLOBE`` even if it describes the same region.
    """

    north: float
    west: float
    south: float
    east: float

    def __post_init__(self):
        for name in ('north', 'west', 'south', 'east'):
            object.__setattr__(self, name, float(getattr(self, name)))

        if not all(math.isfinite(value) for value in self.as_tuple()):
            raise InvalidAreaError(*self.as_tuple(), reason="all limits must be finite")
        if not -90.0 <= self.south <= self.north <= 90.0:
            raise InvalidAreaError(
                *self.as_tuple(), reason="latitudes must satisfy -90 <= S <= N <= 90"
            )
        if not self.west <= self.east <= self.west + 360.0:
            raise InvalidAreaError(
                *self.as_tuple(), reason="longitudes must satisfy W <= E <= W + 360"
            )

    @classmethod
    def from_token(cls, token):
        """Parse an area from a "N/W/S/E" token, such as "90/0/-90/360"."""
        match = area_token_pattern.fullmatch(token.strip()) if isinstance(token, str) else None
        if match is None:
            raise MalformedAreaToken(token)
        return cls(**{k: float(v) for k, v in match.groupdict().items()})

    def as_tuple(self):
        """Return the (north, west, south, east) values."""
        return (self.north, self.west, self.south, self.east)

    @property
    def includes_north_pole(self):
        return self.north == 90.0

    @property
    def includes_south_pole(self):
        return self.south == -90.0

    @property
    def is_periodic_west_east(self):
        return self.east == self.west + 360.0

    @property
    def is_global(self):
        return self.includes_north_pole and self.includes_south_pole and self.is_periodic_west_east

    def __str__(self):
        return "/".join(f"{value:.15g}" for value in self.as_tuple())


GLOBE = GeographicArea(90.0, 0.0, -90.0, 360.0)


def parse_area(area):
    """Obtain a GeographicArea from an area token, passing existing areas through.

    Parameters
    ----------
    area : str or GeographicArea or None
        Area token in "N/W/S/E" order. None gives the whole globe.

    Returns
    -------
    GeographicArea
    """
    if area is None:
        return GLOBE
    if isinstance(area, GeographicArea):
        return area
    return GeographicArea.from_token(area)
