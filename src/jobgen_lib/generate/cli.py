# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import getpass
import sys
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand

from jobgen_lib.catalog.meta import CatalogMeta
from jobgen_lib.core.config import CFG
from jobgen_lib.core.error import JobgenError
from jobgen_lib.core.logger import get_logger
from jobgen_lib.prompt.console import ConsolePromptChannel
from jobgen_lib.script.sink import FileOutputSink

from .generator import Generator

logger = get_logger(__name__)

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(
    short_help="Interactively generate a Slurm batch script.",
    help=f"""Interactively generate a Slurm batch script.

{CFG.binary_name} asks for the requirements of a job, checks them against the limits of the selected partition,
and writes an executable script named `<job_name>{CFG.script.file_suffix}` into the current directory.

Use the `--extra` flag to also configure memory, constraints, GPUs, accounts, QOS, array jobs,
dependencies, environment variables, and modules.""",
    cls=HelpColorsCommand,
    help_headers_color="white",
    help_options_color="bright_blue",
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "-e",
    "--extra",
    is_flag=True,
    default=False,
    help="Ask for advanced options and include them in the script.",
)
def generate(extra: bool) -> NoReturn:
    try:
        generator = Generator(
            CatalogMeta.fromEnvOrDefault(),
            ConsolePromptChannel(),
            FileOutputSink(),
            extra_mode=extra,
            user=getpass.getuser(),
        )
        generator.run()
        sys.exit(0)
    except JobgenError as e:
        logger.error(e)
        print()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        print()
        logger.error("Interrupted. No script was generated.")
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        print()
        sys.exit(CFG.exit_codes.unexpected_error)
