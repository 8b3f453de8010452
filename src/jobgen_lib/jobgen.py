# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from jobgen_lib.generate.cli import generate

__version__ = "0.1.0"

# entry point of the `jobgen` binary
cli = generate
