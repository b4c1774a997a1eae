# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised while building grids and merging their boundaries."""


class GridboxError(ValueError):
    """Base class for invalid grid or area input."""


class MalformedAreaToken(GridboxError):
    """Area token does not consist of four slash-separated signed decimals."""

    def __init__(self, token):
        self.token = token
        super().__init__(
            f"Malformed area '{token}', expected four signed decimals as 'N/W/S/E'"
        )


class InvalidAreaError(GridboxError):
    """Area values violate latitude/longitude ordering."""

    def __init__(self, north, west, south, east, reason=None):
        self.values = (north, west, south, east)
        message = f"Invalid area {north}/{west}/{south}/{east}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnrecognizedGridName(GridboxError):
    """Grid name matches none of the supported grid families."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unrecognized grid '{name}'")


class UnsupportedAreaForGrid(GridboxError):
    """Grid family cannot be laid out over the requested area."""

    def __init__(self, name, area, reason="only supports the global area"):
        self.name = name
        self.area = area
        super().__init__(f"Grid '{name}' {reason}, got '{area}'")


class PreconditionViolated(AssertionError):
    """An internal ordering contract was broken (e.g., an unsorted merge run)."""
