# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for jobgen.

This module defines dataclasses representing all configurable aspects of jobgen,
including default job values, the layout of the generated script, catalog queries,
prompt styling, environment variables, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class Defaults:
    """Values used when the operator leaves a field empty or enters an invalid value."""

    # Job name used when none is provided.
    job_name: str = "job"
    # Output file pattern used when none is provided.
    output_file: str = "slurm-%j.out"
    # Notification types used when an email address is given without types.
    mail_types: list[str] = field(default_factory=lambda: ["END", "FAIL"])
    # Number of nodes used when the provided value is invalid.
    num_nodes: int = 1
    # Number of tasks per node used when the provided value is invalid.
    tasks_per_node: int = 1
    # Number of GPUs used in the gres specification when no count is provided.
    gpu_count: str = "1"


@dataclass
class ScriptSettings:
    """Settings controlling the layout of the generated batch script."""

    # Interpreter line of the generated script.
    shebang: str = "#!/bin/bash"
    # Prefix of every scheduler directive.
    directive_prefix: str = "#SBATCH"
    # Suffix appended to the job name to form the script file name.
    file_suffix: str = "_slurm.sh"
    # Separator line printed by the header and the footer.
    separator: str = "-" * 64
    # Command used to load a module.
    module_load: str = "module load"
    # Placeholder written when no modules are requested.
    modules_placeholder: str = "# module load <module_name>"
    # Placeholder written when no environment variables are requested.
    env_vars_placeholder: str = "# export VAR=value"
    # Command used to submit the generated script (shown to the operator).
    submit_command: str = "sbatch"


@dataclass
class CatalogSettings:
    """Settings for querying the resource catalog."""

    # Maximal number of lines of `module avail` shown to the operator.
    modules_preview_lines: int = 15
    # Line printed before `module avail` to separate its output from login-shell messages.
    modules_marker: str = "__JOBGEN_MODULES__"
    # Values reported by sinfo which signify that no feature/gres is defined.
    empty_markers: list[str] = field(default_factory=lambda: ["(null)", "none"])


@dataclass
class PromptSettings:
    """Settings for the interactive prompt channel."""

    # Title of the banner shown at the start of a session.
    title: str = "SLURM JOB SCRIPT GENERATOR"
    # Title of the section with advanced options.
    extra_title: str = "Advanced Options"
    # Marker printed in front of every question.
    marker: str = "PROMPT"
    # Style of the question marker.
    marker_style: str = "magenta"
    # Style of the question text.
    question_style: str = "default"
    # Style used for the banner and table borders.
    border_style: str = "white"
    # Style used for titles.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for secondary information (catalog hints).
    secondary_style: str = "grey70"
    # Style of the status messages.
    info_style: str = "bright_blue"
    # Minimal width of the banner.
    min_width: int = 53


@dataclass
class EnvironmentVariables:
    """Environment variable names used by jobgen."""

    # Enables jobgen debug mode.
    debug_mode: str = "JOBGEN_DEBUG"
    # Path to a YAML file describing the cluster resources.
    catalog_file: str = "JOBGEN_CATALOG"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by jobgen.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Returned when the resource catalog cannot list any partition.
    catalog_unavailable: int = 1
    # Default error code for failures of jobgen.
    default: int = 1
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for jobgen."""

    defaults: Defaults = field(default_factory=Defaults)
    script: ScriptSettings = field(default_factory=ScriptSettings)
    catalog: CatalogSettings = field(default_factory=CatalogSettings)
    prompt: PromptSettings = field(default_factory=PromptSettings)
    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the jobgen binary.
    binary_name: str = "jobgen"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read jobgen config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.

        Locations are searched in the following order:
            1. the file named by the `JOBGEN_CONFIG` environment variable,
            2. `jobgen_config.toml` in the current working directory,
            3. `$XDG_CONFIG_HOME/jobgen/config.toml` (`~/.config/jobgen/config.toml` by default).
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("JOBGEN_CONFIG")) else None,
            # 2. Current working directory (per-project settings)
            Path.cwd() / "jobgen_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "jobgen"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for jobgen.
CFG = Config.load()
