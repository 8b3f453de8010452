# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from jobgen_lib.core.config import CFG
from jobgen_lib.properties.directive import Directive
from jobgen_lib.properties.job_spec import ExtraOptions, JobSpecification


class DirectiveBuilder:
    """
    Maps a job specification to the ordered list of Slurm directives.

    The order of the directives is fixed:
        1. job name, partition, nodes, tasks per node, output file
        2. time limit (if specified)
        3. mail user and mail type (if notifications were requested)
        4. in extra mode only: memory, constraint, exclusive, GPUs per node,
           gres, account, QOS, array, dependency (each if specified)

    Every key appears at most once.
    """

    @staticmethod
    def build(spec: JobSpecification, extra_mode: bool) -> list[Directive]:
        """
        Create the directives for the given job specification.

        Args:
            spec (JobSpecification): The job to describe.
            extra_mode (bool): Whether directives for advanced options should be included.
                If False, advanced options stored in `spec` are ignored.

        Returns:
            list[Directive]: Directives in the order they should appear in the script.
        """
        directives = [
            Directive("job-name", spec.job_name),
            Directive("partition", spec.partition),
            Directive("nodes", str(spec.num_nodes)),
            Directive("ntasks-per-node", str(spec.tasks_per_node)),
            Directive("output", spec.output_file),
        ]

        if spec.time_limit:
            directives.append(Directive("time", spec.time_limit))

        if spec.email:
            directives.append(Directive("mail-user", spec.email.address))
            directives.append(Directive("mail-type", spec.email.typesAsStr()))

        if extra_mode and spec.extra:
            directives.extend(DirectiveBuilder._buildExtra(spec.extra))

        return directives

    @staticmethod
    def _buildExtra(extra: ExtraOptions) -> list[Directive]:
        directives = []

        if extra.memory_mb is not None:
            directives.append(Directive("mem", str(extra.memory_mb)))

        if constraint := extra.effectiveConstraint():
            directives.append(Directive("constraint", constraint))

        if extra.exclusive:
            directives.append(Directive("exclusive"))

        if gpu := extra.gpu:
            if gpu.count:
                directives.append(Directive("gpus-per-node", gpu.count))
            if gpu.gpu_type:
                count = gpu.count or CFG.defaults.gpu_count
                directives.append(Directive("gres", f"gpu:{gpu.gpu_type}:{count}"))

        for key, value in (
            ("account", extra.account),
            ("qos", extra.qos),
            ("array", extra.array_indices),
            ("dependency", extra.dependency),
        ):
            if value:
                directives.append(Directive(key, value))

        return directives
