# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Interactive collection of job specifications.

This module provides the `SpecCollector` class, which asks the operator for
every field of a job, validates the answers against the limits of the
selected partition, and produces an immutable `JobSpecification`.
"""

from .collector import SpecCollector

__all__ = [
    "SpecCollector",
]
