# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout jobgen.

Each exception carries an associated exit code used by the command-line
interface to report failures consistently.
"""

from jobgen_lib.core.config import CFG


class JobgenError(Exception):
    """Common exception type for all recoverable jobgen errors."""

    exit_code = CFG.exit_codes.default


class JobgenCatalogError(JobgenError):
    """
    Raised when the resource catalog cannot provide the list of partitions.

    Without partitions no job can be described, so this error always aborts the session.
    """

    exit_code = CFG.exit_codes.catalog_unavailable
