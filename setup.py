# Copyright (c) 2022 GridBox Developers.
# Distributed under the terms of the Apache License, Version 2.0.
# SPDX-License-Identifier: Apache-2.0
"""Setup script for installing GridBox."""

from setuptools import find_packages, setup

setup(
    name='gridbox',
    version='0.1.0',
    description='Grid definitions and boundary merging for grid-box intersection regridding',
    license='Apache-2.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pandas',
        'xarray'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': ['gridbox-boundaries = gridbox.cli:main']
    }
)
