# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Utilities for geographic bounding areas."""

from .area import DEFAULT_AREA_TOKEN, GLOBE, GeographicArea, parse_area
