# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from pathlib import Path

from jobgen_lib.catalog.interface import CatalogInterface
from jobgen_lib.collect.collector import SpecCollector
from jobgen_lib.core.config import CFG
from jobgen_lib.core.logger import get_logger
from jobgen_lib.prompt.interface import PromptChannelInterface
from jobgen_lib.properties.job_spec import JobSpecification
from jobgen_lib.script.assembler import ScriptAssembler
from jobgen_lib.script.builder import DirectiveBuilder
from jobgen_lib.script.sink import FileOutputSink

logger = get_logger(__name__)


class Generator:
    """
    Runs a complete session: collects a job specification, renders the batch
    script, and writes it to disk.
    """

    def __init__(
        self,
        catalog: CatalogInterface,
        channel: PromptChannelInterface,
        sink: FileOutputSink,
        extra_mode: bool = False,
        user: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            catalog (CatalogInterface): Source of the cluster's resource limits.
            channel (PromptChannelInterface): Channel used to talk to the operator.
            sink (FileOutputSink): Destination of the generated script.
            extra_mode (bool): Whether advanced options should be collected and rendered.
            user (str | None): Name of the user used to look up accounts.
        """
        self._catalog = catalog
        self._channel = channel
        self._sink = sink
        self._extra_mode = extra_mode
        self._user = user

    def run(self) -> Path:
        """
        Collect the job specification and write the corresponding script.

        Returns:
            Path: Path to the generated script.

        Raises:
            JobgenCatalogError: If the catalog cannot list any partition.
                No script is written in that case.
            JobgenError: If the collection is interrupted or the script cannot be written.
        """
        spec = SpecCollector(
            self._catalog, self._channel, self._extra_mode, self._user
        ).collect()

        name = FileOutputSink.scriptName(spec)
        self._channel.info(f"Generating Slurm script: {name}")
        path = self._sink.write(name, Generator.render(spec, self._extra_mode))

        self._channel.info(f"Script generated successfully: {name}")
        self._channel.info(
            f"You can submit your job with: {CFG.script.submit_command} {name}"
        )
        return path

    @staticmethod
    def render(spec: JobSpecification, extra_mode: bool) -> str:
        """
        Render the batch script for a job specification.

        Rendering the same specification in the same mode always yields identical text.
        """
        directives = DirectiveBuilder.build(spec, extra_mode)
        logger.debug(f"Directives: {directives}.")
        return ScriptAssembler.assemble(spec, directives, extra_mode)
