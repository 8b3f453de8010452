# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for jobgen.

This module collects the foundational utilities used across the jobgen
codebase: configuration, error handling, structured logging, and helpers
for interpreting operator answers.
"""
