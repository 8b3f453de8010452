# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Structured representation of a job described by the operator.

This module defines the `JobSpecification` dataclass, which captures every
answer collected during an interactive session, together with the smaller
records it is composed of: `EmailNotification`, `GpuRequest`, and
`ExtraOptions` (advanced options available only in extra mode).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EmailNotification:
    """
    Email notification settings of a job.
    """

    # Address to send the notifications to
    address: str

    # Events triggering a notification (e.g. BEGIN, END, FAIL, ALL)
    types: tuple[str, ...] = ("END", "FAIL")

    def typesAsStr(self) -> str:
        """
        Return the notification types in the comma-separated form used by Slurm.
        """
        return ",".join(self.types)


@dataclass(frozen=True)
class GpuRequest:
    """
    GPU resources requested for every node of a job.
    """

    # Number of GPUs per node exactly as provided; None if not provided
    count: str | None = None

    # Type of the GPU (e.g. 'a100'); None if not provided
    gpu_type: str | None = None


@dataclass(frozen=True)
class ExtraOptions:
    """
    Advanced options collected only in extra mode.
    """

    # Memory per node in MB; None if unset
    memory_mb: int | None = None

    # Comma-separated list of node features
    constraints: str | None = None

    # Request exclusive access to the nodes
    exclusive: bool = False

    # Requested GPUs; None if no GPUs are needed
    gpu: GpuRequest | None = None

    # CPU architecture constraint (takes the place of `constraints`)
    cpu_architecture: str | None = None

    # Account to charge the job to
    account: str | None = None

    # Quality of service
    qos: str | None = None

    # Array indices in Slurm range syntax (e.g. '1-10' or '1,3,5-7')
    array_indices: str | None = None

    # Dependency in Slurm syntax (e.g. 'afterok:123456')
    dependency: str | None = None

    # Lines of the form KEY=VALUE in the order they were provided
    environment_variables: tuple[str, ...] = field(default_factory=tuple)

    # Names of modules to load in the order they were provided
    modules: tuple[str, ...] = field(default_factory=tuple)

    def effectiveConstraint(self) -> str | None:
        """
        Return the value of the node constraint.

        The CPU architecture constraint overrides the list of node features
        since both are requested through the same directive.
        """
        return self.cpu_architecture or self.constraints or None


@dataclass(frozen=True)
class JobSpecification:
    """
    Complete, validated description of a job.

    The number of nodes and tasks per node are always within the limits
    of the selected partition.
    """

    # Name of the job
    job_name: str

    # Name of the selected partition
    partition: str

    # Number of nodes
    num_nodes: int

    # Number of tasks per node
    tasks_per_node: int

    # Time limit in Slurm syntax; empty if not specified
    time_limit: str = ""

    # Pattern of the file capturing the job's output
    output_file: str = "slurm-%j.out"

    # Commands to execute exactly as provided
    commands: str = ""

    # Email notifications; None if not requested
    email: EmailNotification | None = None

    # Advanced options; None if they were not collected
    extra: ExtraOptions | None = None
