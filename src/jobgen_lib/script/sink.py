# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import stat
from pathlib import Path

from jobgen_lib.core.config import CFG
from jobgen_lib.core.error import JobgenError
from jobgen_lib.core.logger import get_logger
from jobgen_lib.properties.job_spec import JobSpecification

logger = get_logger(__name__)


class FileOutputSink:
    """
    Writes generated scripts into a directory and makes them executable.
    """

    def __init__(self, directory: Path | None = None):
        """
        Args:
            directory (Path | None): Directory to write the scripts into.
                Defaults to the current working directory.
        """
        self._directory = directory or Path.cwd()

    @staticmethod
    def scriptName(spec: JobSpecification) -> str:
        """
        Return the file name of the script for the given job (e.g. 'job_slurm.sh').
        """
        return f"{spec.job_name or CFG.defaults.job_name}{CFG.script.file_suffix}"

    def write(self, name: str, text: str) -> Path:
        """
        Write the script and add the executable bits for user, group, and others.

        Args:
            name (str): Name of the file.
            text (str): Content of the script.

        Returns:
            Path: Path to the written script.

        Raises:
            JobgenError: If the file cannot be written.
        """
        path = self._directory / name

        try:
            path.write_text(text)
            mode = path.stat().st_mode
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as e:
            raise JobgenError(f"Could not write script '{path}': {e}.") from e

        logger.debug(f"Written script '{path}'.")
        return path
