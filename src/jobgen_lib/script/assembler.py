# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Rendering of the final batch script.

The script consists of the following sections, always in this order:
the interpreter line, the directives, a header reporting where and when the
job started, module loading, environment variables, the operator's commands,
and a footer reporting when the job finished.
"""

from jobgen_lib.core.config import CFG
from jobgen_lib.properties.directive import Directive
from jobgen_lib.properties.job_spec import JobSpecification


class ScriptAssembler:
    """
    Renders directives and a job specification into the text of a batch script.
    """

    @staticmethod
    def assemble(
        spec: JobSpecification, directives: list[Directive], extra_mode: bool
    ) -> str:
        """
        Render the complete batch script.

        Args:
            spec (JobSpecification): The job providing modules, environment
                variables, and commands.
            directives (list[Directive]): Directives created by `DirectiveBuilder`.
            extra_mode (bool): Whether modules and environment variables should be rendered.
                If False, placeholders are written instead.

        Returns:
            str: Text of the script terminated by a newline.
        """
        sections = [
            "\n".join(
                [CFG.script.shebang]
                + [d.toLine(CFG.script.directive_prefix) for d in directives]
            ),
            ScriptAssembler._header(),
            ScriptAssembler._modules(spec, extra_mode),
            ScriptAssembler._environmentVariables(spec, extra_mode),
            ScriptAssembler._commands(spec),
            ScriptAssembler._footer(),
        ]

        return "\n\n".join(sections) + "\n"

    @staticmethod
    def _header() -> str:
        return "\n".join(
            [
                'echo "Job started on $(hostname) at $(date)"',
                'echo "Job ID: $SLURM_JOB_ID"',
                'echo "Nodes: $SLURM_JOB_NODELIST"',
                f'echo "{CFG.script.separator}"',
            ]
        )

    @staticmethod
    def _modules(spec: JobSpecification, extra_mode: bool) -> str:
        modules = spec.extra.modules if extra_mode and spec.extra else ()
        lines = [f"{CFG.script.module_load} {module}" for module in modules]

        return "\n".join(["# Load modules"] + (lines or [CFG.script.modules_placeholder]))

    @staticmethod
    def _environmentVariables(spec: JobSpecification, extra_mode: bool) -> str:
        variables = spec.extra.environment_variables if extra_mode and spec.extra else ()
        lines = [
            var if var.startswith("export ") else f"export {var}" for var in variables
        ]

        return "\n".join(
            ["# Set environment variables"]
            + (lines or [CFG.script.env_vars_placeholder])
        )

    @staticmethod
    def _commands(spec: JobSpecification) -> str:
        # trailing newlines of the block are dropped, the rest is kept verbatim
        return "\n".join(["# User commands", spec.commands.rstrip("\n")])

    @staticmethod
    def _footer() -> str:
        return "\n".join(
            [
                f'echo "{CFG.script.separator}"',
                'echo "Job completed at $(date)"',
            ]
        )
