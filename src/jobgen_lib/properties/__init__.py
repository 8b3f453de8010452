# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Properties and structured metadata for jobgen.

This module provides the data representations underlying jobgen: the limits
of a partition, the job described by the operator, and the scheduler
directives generated from it.
"""
