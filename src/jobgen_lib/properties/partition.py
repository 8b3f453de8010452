# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Resource limits of a single partition as advertised by the resource catalog.
"""

from dataclasses import dataclass
from typing import Self

from jobgen_lib.core.error import JobgenError


@dataclass(frozen=True)
class PartitionProfile:
    """
    Immutable description of the limits of one partition.
    """

    # Name of the partition
    name: str

    # Largest number of nodes that can be requested
    max_nodes: int

    # Number of CPU cores available on a single node
    cpus_per_node: int

    # Memory available on a single node in MB
    mem_per_node_mb: int

    # Time limit of the partition in the scheduler's own format (e.g. '2-00:00:00')
    default_time_limit: str

    def __post_init__(self):
        for attr in ("max_nodes", "cpus_per_node", "mem_per_node_mb"):
            value = getattr(self, attr)
            if not isinstance(value, int) or value < 1:
                raise JobgenError(
                    f"Invalid value '{value}' of '{attr}' for partition '{self.name}'. Expected a positive integer."
                )

    @classmethod
    def fromDict(cls, name: str, data: dict[str, object]) -> Self:
        """
        Construct a PartitionProfile from a dictionary of limits.

        Args:
            name (str): Name of the partition.
            data (dict[str, object]): Dictionary with the keys 'max_nodes',
                'cpus_per_node', 'mem_per_node_mb', and optionally 'time_limit'.

        Returns:
            PartitionProfile: The constructed profile.

        Raises:
            JobgenError: If a required key is missing or a limit is invalid.
        """
        try:
            return cls(
                name=name,
                max_nodes=int(data["max_nodes"]),  # ty: ignore[invalid-argument-type]
                cpus_per_node=int(data["cpus_per_node"]),  # ty: ignore[invalid-argument-type]
                mem_per_node_mb=int(data["mem_per_node_mb"]),  # ty: ignore[invalid-argument-type]
                default_time_limit=str(data.get("time_limit", "UNLIMITED")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise JobgenError(
                f"Could not load limits of partition '{name}': {e}."
            ) from e
