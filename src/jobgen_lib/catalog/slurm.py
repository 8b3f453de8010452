# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shutil
import subprocess

from jobgen_lib.core.common import max_int_in_column
from jobgen_lib.core.config import CFG
from jobgen_lib.core.error import JobgenCatalogError, JobgenError
from jobgen_lib.core.logger import get_logger
from jobgen_lib.properties.partition import PartitionProfile

from .interface import CatalogInterface

logger = get_logger(__name__)


class SlurmCatalog(CatalogInterface):
    """
    Implementation of CatalogInterface for Slurm.
    Queries sinfo and sacctmgr for the limits of the cluster.
    """

    def listPartitions(self) -> list[str]:
        try:
            stdout = SlurmCatalog._run('sinfo -h -o "%R"')
        except JobgenError as e:
            raise JobgenCatalogError(
                f"Could not fetch partition information: {e}"
            ) from e

        partitions = sorted({line.strip() for line in stdout.splitlines() if line.strip()})
        if not partitions:
            raise JobgenCatalogError("Could not fetch partition information.")

        logger.debug(f"Available partitions: {partitions}.")
        return partitions

    def getPartitionProfile(self, name: str) -> PartitionProfile:
        stdout = SlurmCatalog._run(f'sinfo -h -p {name} -o "%D|%c|%m|%l"')

        rows = [line.split("|") for line in stdout.splitlines() if line.strip()]
        rows = [row for row in rows if len(row) == 4]
        if not rows:
            raise JobgenError(f"Partition '{name}' does not exist.")

        max_nodes = max_int_in_column([row[0] for row in rows])
        cpus_per_node = max_int_in_column([row[1] for row in rows])
        mem_per_node = max_int_in_column([row[2] for row in rows])
        if max_nodes is None or cpus_per_node is None or mem_per_node is None:
            raise JobgenError(f"Could not parse the limits of partition '{name}'.")

        return PartitionProfile(
            name=name,
            max_nodes=max_nodes,
            cpus_per_node=cpus_per_node,
            mem_per_node_mb=mem_per_node,
            default_time_limit=rows[0][3].strip(),
        )

    def listConstraints(self) -> list[str]:
        return self._listColumn('sinfo -h -o "%f"')

    def listGpuTypes(self) -> list[str]:
        return self._listColumn('sinfo -h -o "%G"')

    def listAccounts(self, user: str) -> list[str]:
        if not shutil.which("sacctmgr"):
            logger.debug("sacctmgr is not available.")
            return []

        return self._listColumn(
            f"sacctmgr -n list associations user={user} format=account"
        )

    def listQosNames(self) -> list[str]:
        if not shutil.which("sacctmgr"):
            logger.debug("sacctmgr is not available.")
            return []

        return self._listColumn("sacctmgr -n show qos format=name")

    def listModules(self) -> list[str]:
        """
        Return the first lines of `module avail`.

        `module` is a shell function, so a login shell is required.
        Anything the login scripts print before the marker line is discarded.
        """
        marker = CFG.catalog.modules_marker
        result = subprocess.run(
            ["bash", "-l"],
            input=f"echo {marker}\nmodule avail 2>&1",
            text=True,
            check=False,
            capture_output=True,
            errors="replace",
        )

        if result.returncode != 0:
            logger.debug(f"Could not list modules: {result.stderr.strip()}.")
            return []

        output = result.stdout.splitlines()
        if marker not in output:
            logger.debug("Could not find the output of 'module avail'.")
            return []

        lines = [line for line in output[output.index(marker) + 1 :] if line.strip()]
        return lines[: CFG.catalog.modules_preview_lines]

    def _listColumn(self, command: str) -> list[str]:
        """
        Run a command printing one column and collect its unique meaningful values.

        Values containing several comma- or space-separated items are split.
        Failures are reported as an empty list.
        """
        try:
            stdout = SlurmCatalog._run(command)
        except JobgenError as e:
            logger.debug(e)
            return []

        values: list[str] = []
        for line in stdout.splitlines():
            for item in line.replace(",", " ").split():
                if item in CFG.catalog.empty_markers or item in values:
                    continue
                values.append(item)

        return sorted(values)

    @staticmethod
    def _run(command: str) -> str:
        """
        Execute a command using bash and return its standard output.

        Raises:
            JobgenError: If the command fails.
        """
        logger.debug(command)

        result = subprocess.run(
            ["bash"],
            input=command,
            text=True,
            check=False,
            capture_output=True,
            errors="replace",
        )

        if result.returncode != 0:
            raise JobgenError(
                f"Command '{command}' failed: {result.stderr.strip()}."
            )

        return result.stdout
