# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import os
from pathlib import Path

from jobgen_lib.core.config import CFG
from jobgen_lib.core.logger import get_logger

from .interface import CatalogInterface
from .slurm import SlurmCatalog
from .yaml_file import YamlCatalog

logger = get_logger(__name__)


class CatalogMeta:
    """
    Selects the source of cluster resource information.
    """

    @staticmethod
    def fromEnvOrDefault() -> CatalogInterface:
        """
        Select the catalog based on the environment variable or use Slurm.

        If the `JOBGEN_CATALOG` environment variable is set, the cluster
        description is read from the YAML file it points to. Otherwise the
        live Slurm installation is queried.

        Returns:
            CatalogInterface: The selected catalog.

        Raises:
            JobgenCatalogError: If the catalog file cannot be loaded.
        """
        if path := os.environ.get(CFG.env_vars.catalog_file):
            logger.debug(f"Using catalog file from an environment variable: {path}.")
            return YamlCatalog(Path(path))

        return SlurmCatalog()
