# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

import yaml

from jobgen_lib.core.common import load_yaml_loader
from jobgen_lib.core.error import JobgenCatalogError, JobgenError
from jobgen_lib.core.logger import get_logger
from jobgen_lib.properties.partition import PartitionProfile

from .interface import CatalogInterface

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()


class YamlCatalog(CatalogInterface):
    """
    Implementation of CatalogInterface reading the cluster description from a YAML file.

    Expected structure:

        partitions:
          compute:
            max_nodes: 10
            cpus_per_node: 16
            mem_per_node_mb: 64000
            time_limit: "2-00:00:00"
        constraints: [intel, amd]
        gpu_types: ["gpu:a100:4"]
        accounts:
          alice: [project1, project2]
        qos: [normal, high]
        modules: [gcc/12.2, openmpi/4.1]

    Every section except `partitions` is optional.
    """

    def __init__(self, file: Path):
        """
        Load the catalog from a file.

        Args:
            file (Path): Path to the YAML file.

        Raises:
            JobgenCatalogError: If the file cannot be read or parsed.
        """
        self._file = file

        try:
            with file.open() as f:
                data = yaml.load(f, Loader=SafeLoader)
        except (OSError, yaml.YAMLError) as e:
            raise JobgenCatalogError(
                f"Could not read catalog file '{file}': {e}."
            ) from e

        if not isinstance(data, dict):
            raise JobgenCatalogError(
                f"Catalog file '{file}' does not contain a mapping."
            )

        self._data: dict = data
        logger.debug(f"Loaded catalog from '{file}': {data}.")

    def listPartitions(self) -> list[str]:
        partitions = self._data.get("partitions")
        if not isinstance(partitions, dict) or not partitions:
            raise JobgenCatalogError(
                f"Catalog file '{self._file}' does not define any partition."
            )

        return sorted(str(name) for name in partitions)

    def getPartitionProfile(self, name: str) -> PartitionProfile:
        partitions = self._data.get("partitions") or {}
        if not isinstance(limits := partitions.get(name), dict):
            raise JobgenError(f"Partition '{name}' does not exist.")

        return PartitionProfile.fromDict(name, limits)

    def listConstraints(self) -> list[str]:
        return self._getList("constraints")

    def listGpuTypes(self) -> list[str]:
        return self._getList("gpu_types")

    def listAccounts(self, user: str) -> list[str]:
        accounts = self._data.get("accounts")
        if isinstance(accounts, dict):
            return [str(x) for x in accounts.get(user) or []]

        # the same accounts for every user
        return self._getList("accounts")

    def listQosNames(self) -> list[str]:
        return self._getList("qos")

    def listModules(self) -> list[str]:
        return self._getList("modules")

    def _getList(self, key: str) -> list[str]:
        """
        Return the list stored under the given key or an empty list.
        """
        value = self._data.get(key)
        if not isinstance(value, list):
            return []

        return [str(x) for x in value]
