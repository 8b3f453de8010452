# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Communication with the operator.

This module defines the abstract prompt channel and its implementation
for an interactive terminal based on rich.
"""

from .console import ConsolePromptChannel
from .interface import PromptChannelInterface

__all__ = [
    "ConsolePromptChannel",
    "PromptChannelInterface",
]
