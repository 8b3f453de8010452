# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Sources of cluster resource information.

This module defines the abstract catalog interface together with a backend
querying a live Slurm installation and a backend reading a YAML description
of the cluster.
"""

from .interface import CatalogInterface
from .meta import CatalogMeta
from .slurm import SlurmCatalog
from .yaml_file import YamlCatalog

__all__ = [
    "CatalogInterface",
    "CatalogMeta",
    "SlurmCatalog",
    "YamlCatalog",
]
