# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The `jobgen` command.

This module wires the resource catalog, the interactive prompt channel, the
spec collector, the script builder, and the output sink into a single session.
"""

from .generator import Generator

__all__ = [
    "Generator",
]
