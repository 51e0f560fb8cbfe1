#!/usr/bin/env python3
"""Setup script for presence-types package."""

from setuptools import setup

# Use pyproject.toml for configuration
setup()
