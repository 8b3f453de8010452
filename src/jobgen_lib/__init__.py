# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the jobgen command-line tool.

jobgen interactively collects the requirements of a compute job, checks them
against the limits advertised by the cluster, and writes a ready-to-submit
Slurm batch script. The package defines the resource catalog abstraction with
its Slurm and YAML backends, the interactive prompt channel, the collector
producing a validated job specification, and the builder and assembler
rendering the final script.
"""

from .jobgen import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "catalog",
    "collect",
    "core",
    "generate",
    "prompt",
    "properties",
    "script",
]
