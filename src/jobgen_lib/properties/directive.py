# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass


@dataclass(frozen=True)
class Directive:
    """
    A single scheduler directive: a key with a value or a bare flag.
    """

    # Name of the option without the leading dashes (e.g. 'job-name')
    key: str

    # Value of the option; None for flags such as 'exclusive'
    value: str | None = None

    def isFlag(self) -> bool:
        """Return True if the directive carries no value."""
        return self.value is None

    def toLine(self, prefix: str) -> str:
        """
        Render the directive as a line of a batch script.

        Args:
            prefix (str): Directive prefix (e.g. '#SBATCH').

        Returns:
            str: The rendered line, e.g. '#SBATCH --nodes=4' or '#SBATCH --exclusive'.
        """
        if self.isFlag():
            return f"{prefix} --{self.key}"

        return f"{prefix} --{self.key}={self.value}"
