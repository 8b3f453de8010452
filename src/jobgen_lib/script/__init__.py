# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Generation of Slurm batch scripts.

This module turns a job specification into an ordered list of directives
(`DirectiveBuilder`), renders them together with the fixed script sections
(`ScriptAssembler`), and writes the result to disk (`FileOutputSink`).
"""

from .assembler import ScriptAssembler
from .builder import DirectiveBuilder
from .sink import FileOutputSink

__all__ = [
    "DirectiveBuilder",
    "FileOutputSink",
    "ScriptAssembler",
]
