# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import getpass

from rich.text import Text

from jobgen_lib.catalog.interface import CatalogInterface
from jobgen_lib.core.common import is_affirmative, parse_bounded_int, split_comma_list
from jobgen_lib.core.config import CFG
from jobgen_lib.core.logger import get_logger
from jobgen_lib.prompt.interface import PromptChannelInterface
from jobgen_lib.properties.job_spec import (
    EmailNotification,
    ExtraOptions,
    GpuRequest,
    JobSpecification,
)
from jobgen_lib.properties.partition import PartitionProfile

from .presenter import CollectorPresenter

logger = get_logger(__name__)

DEPENDENCY_TYPES = ["after", "afterany", "afternotok", "afterok"]


class SpecCollector:
    """
    Interactively collects a job specification from the operator.

    Responsibilities:
        - Let the operator select a partition and fetch its limits.
        - Ask for every field of the job specification in a fixed order.
        - Replace invalid numeric answers with safe defaults instead of aborting.
        - Ask for advanced options only in extra mode.
    """

    def __init__(
        self,
        catalog: CatalogInterface,
        channel: PromptChannelInterface,
        extra_mode: bool = False,
        user: str | None = None,
    ):
        """
        Initialize the collector.

        Args:
            catalog (CatalogInterface): Source of the cluster's resource limits.
            channel (PromptChannelInterface): Channel used to talk to the operator.
            extra_mode (bool): Whether to collect advanced options.
            user (str | None): Name of the user used to look up accounts.
                Defaults to the current user.
        """
        self._catalog = catalog
        self._channel = channel
        self._extra_mode = extra_mode
        self._user = user or getpass.getuser()

    def collect(self) -> JobSpecification:
        """
        Ask the operator for all fields of the job specification.

        Returns:
            JobSpecification: The validated specification.

        Raises:
            JobgenCatalogError: If the catalog cannot list any partition.
            JobgenError: If the input ends before all questions are answered.
        """
        self._channel.show(CollectorPresenter.createBanner())

        self._channel.info("Fetching available partitions...")
        partitions = self._catalog.listPartitions()
        profile = self._selectPartition(partitions)

        job_name = self._channel.ask("Enter job name:").strip()
        num_nodes = self._askCount(
            f"Enter number of nodes [1-{profile.max_nodes}]:",
            profile.max_nodes,
            CFG.defaults.num_nodes,
            "nodes",
        )
        tasks_per_node = self._askCount(
            f"Enter tasks per node [1-{profile.cpus_per_node}]:",
            profile.cpus_per_node,
            CFG.defaults.tasks_per_node,
            "tasks per node",
        )
        time_limit = self._channel.ask(
            "Enter time limit (format: HH:MM:SS or D-HH:MM:SS):"
        ).strip()
        output_file = self._channel.ask(
            f"Enter output file name [default: {CFG.defaults.output_file}]:"
        ).strip()
        email = self._askEmail()

        extra = self._collectExtra(profile) if self._extra_mode else None

        commands = self._channel.askBlock(
            "Enter the command(s) to run (Ctrl+D to finish):"
        )

        spec = JobSpecification(
            job_name=job_name or CFG.defaults.job_name,
            partition=profile.name,
            num_nodes=num_nodes,
            tasks_per_node=tasks_per_node,
            time_limit=time_limit,
            output_file=output_file or CFG.defaults.output_file,
            commands=commands,
            email=email,
            extra=extra,
        )
        logger.debug(f"Collected job specification: {spec}.")
        return spec

    def _selectPartition(self, partitions: list[str]) -> PartitionProfile:
        """
        Ask the operator to select a partition until a valid index is provided.

        Returns:
            PartitionProfile: The limits of the selected partition.
        """
        self._channel.show(CollectorPresenter.createPartitionsTable(partitions))

        while (
            index := parse_bounded_int(
                self._channel.ask(f"Select partition [1-{len(partitions)}]:"),
                1,
                len(partitions),
            )
        ) is None:
            logger.warning("Invalid selection. Please try again.")

        name = partitions[index - 1]
        logger.debug(f"Selected partition '{name}'.")

        self._channel.info(f"Fetching resources for partition: {name}")
        profile = self._catalog.getPartitionProfile(name)
        self._channel.show(CollectorPresenter.createProfileTable(profile))
        return profile

    def _askCount(self, question: str, upper: int, default: int, what: str) -> int:
        """
        Ask for a count in [1, upper]. Invalid answers are replaced by the default.
        """
        answer = self._channel.ask(question)
        if (value := parse_bounded_int(answer, 1, upper)) is None:
            logger.warning(f"Invalid number of {what} '{answer}'. Setting to {default}.")
            return default

        return value

    def _askYesNo(self, question: str) -> bool:
        return is_affirmative(self._channel.ask(f"{question} (y/n):"))

    def _askOptional(self, question: str) -> str | None:
        """
        Ask for a free-text value. Returns None if the answer is empty.
        """
        return self._channel.ask(question).strip() or None

    def _askLines(self, question: str) -> tuple[str, ...]:
        """
        Collect lines verbatim until the first blank line.
        """
        self._channel.show(Text(question))

        lines = []
        while (line := self._channel.ask(">")).strip():
            lines.append(line)

        return tuple(lines)

    def _askEmail(self) -> EmailNotification | None:
        if not self._askYesNo("Do you want email notifications?"):
            return None

        address = self._channel.ask("Enter email address:").strip()
        types = split_comma_list(
            self._channel.ask(
                "Enter notification types (comma-separated: BEGIN,END,FAIL,ALL):"
            )
        )

        return EmailNotification(
            address=address, types=tuple(types or CFG.defaults.mail_types)
        )

    def _askMemory(self, profile: PartitionProfile) -> int | None:
        answer = self._channel.ask(
            f"Enter memory per node in MB [1-{profile.mem_per_node_mb}] (ENTER for undetermined):"
        )
        if (value := parse_bounded_int(answer, 1, profile.mem_per_node_mb)) is None:
            if answer.strip():
                logger.warning(
                    f"Invalid memory per node '{answer}'. Setting to not defined."
                )
            else:
                logger.debug("Memory per node not defined.")
            return None

        return value

    def _collectExtra(self, profile: PartitionProfile) -> ExtraOptions:
        """
        Ask for the advanced options available in extra mode.
        """
        self._channel.show(CollectorPresenter.createBanner(CFG.prompt.extra_title))

        memory_mb = self._askMemory(profile)

        constraints = None
        if self._askYesNo("Do you want to specify node constraints/features?"):
            if available := self._catalog.listConstraints():
                self._channel.show(
                    CollectorPresenter.createCatalogHint(
                        "Available constraints", available
                    )
                )
                constraints = self._askOptional("Enter constraints (comma-separated):")
            else:
                constraints = self._askOptional(
                    "Enter constraints (no available constraints detected, enter manually):"
                )

        exclusive = self._askYesNo("Do you want exclusive node access?")

        gpu = None
        if self._askYesNo("Do you need GPUs?"):
            if gpu_types := self._catalog.listGpuTypes():
                self._channel.show(
                    CollectorPresenter.createCatalogHint("Available GPU types", gpu_types)
                )
            gpu = GpuRequest(
                count=self._askOptional("Enter number of GPUs per node:"),
                gpu_type=self._askOptional("Enter GPU type (if applicable):"),
            )

        cpu_architecture = None
        if self._askYesNo("Do you want to specify CPU architecture?"):
            cpu_architecture = self._askOptional("Enter CPU architecture constraint:")

        account = None
        if self._askYesNo("Do you want to specify an account?"):
            if accounts := self._catalog.listAccounts(self._user):
                self._channel.show(
                    CollectorPresenter.createCatalogHint(
                        "Available accounts", accounts, " "
                    )
                )
            account = self._askOptional("Enter account name:")

        qos = None
        if self._askYesNo("Do you want to specify Quality of Service (QOS)?"):
            if qos_names := self._catalog.listQosNames():
                self._channel.show(
                    CollectorPresenter.createCatalogHint(
                        "Available QOS options", qos_names, " "
                    )
                )
            qos = self._askOptional("Enter QOS name:")

        array_indices = None
        if self._askYesNo("Do you want to create an array job?"):
            array_indices = self._askOptional(
                "Enter array indices (e.g., 1-10 or 1,3,5-7):"
            )

        dependency = None
        if self._askYesNo("Do you want to add job dependencies?"):
            self._channel.show(
                CollectorPresenter.createCatalogHint(
                    "Dependency types", DEPENDENCY_TYPES, ", "
                )
            )
            dependency = self._askOptional("Enter dependency (e.g., afterok:123456):")

        environment_variables: tuple[str, ...] = ()
        if self._askYesNo("Do you want to set custom environment variables?"):
            environment_variables = self._askLines(
                "Enter environment variables (format: VAR=value, one per line, empty line to finish):"
            )

        modules: tuple[str, ...] = ()
        if self._askYesNo("Do you want to load modules?"):
            if available_modules := self._catalog.listModules():
                self._channel.show(
                    Text("\n".join(["Available modules:", *available_modules, "..."]))
                )
            modules = self._askLines(
                "Enter modules to load (one per line, empty line to finish):"
            )

        return ExtraOptions(
            memory_mb=memory_mb,
            constraints=constraints,
            exclusive=exclusive,
            gpu=gpu,
            cpu_architecture=cpu_architecture,
            account=account,
            qos=qos,
            array_indices=array_indices,
            dependency=dependency,
            environment_variables=environment_variables,
            modules=modules,
        )
