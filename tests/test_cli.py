# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Test the gridbox-boundaries command-line tool."""

import io

import pytest

from gridbox.cli import main


def _run(argv):
    out = io.StringIO()
    assert main(argv, stdout=out) == 0
    return out.getvalue().splitlines()


def test_positional_grids():
    """Test input and output grids given positionally."""
    assert _run(["LL3x4", "LL2x2"]) == [
        "90/0", "90/1", "45/0", "0/0", "0/1", "-45/0", "-90/0", "-90/1"
    ]


def test_options_with_areas():
    """Test grids and areas given as options."""
    lines = _run(["-i", "LL2x3", "-I", "60/0/30/45", "-o", "LL1x1", "-O", "60/0/30/45"])
    assert lines == ["60/0", "60/1", "50/0", "40/0", "30/0", "30/1"]


def test_defaults():
    """Test the default O12 input and O6 output grids."""
    lines = _run([])
    assert len(lines) == 25 + 13
    assert lines[:2] == ["90/0", "90/1"]
    assert lines[-2:] == ["-90/0", "-90/1"]


def test_csv_format():
    """Test CSV listing."""
    lines = _run(["--format", "csv", "LL1x1", "LL1x1"])
    assert lines[0] == "coordinate,origin,sequence_index"
    assert len(lines) == 5


def test_unrecognized_grid(capsys):
    """Test that an unrecognized grid exits with an error naming it."""
    with pytest.raises(SystemExit) as exc_info:
        main(["Q1"])
    assert exc_info.value.code == 2
    assert "Unrecognized grid 'Q1'" in capsys.readouterr().err


def test_gaussian_on_regional_area(capsys):
    """Test that a Gaussian grid on a regional area exits with an error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["-i", "F4", "-I", "45/0/0/90"])
    assert exc_info.value.code == 2
    assert "only supports the global area" in capsys.readouterr().err


def test_too_many_grids():
    """Test that at most two positional grids are accepted."""
    with pytest.raises(SystemExit):
        main(["O4", "O4", "O4"])


def test_latlon_on_zero_height_area(capsys):
    """Test that a lat/lon grid on an area without height exits with an error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["LL2x2", "O2", "-I", "10/0/10/20"])
    assert exc_info.value.code == 2
    assert "non-zero height" in capsys.readouterr().err
