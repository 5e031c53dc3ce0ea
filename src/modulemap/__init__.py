# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse, inspect, and regenerate Clang-style module map files."""

from modulemap.generator import Indentation, IndentationStyle, generate
from modulemap.model import ModuleMapFile
from modulemap.parser import ModuleMapParseError, parse, scan_all_tokens

__all__ = [
    "parse",
    "scan_all_tokens",
    "generate",
    "Indentation",
    "IndentationStyle",
    "ModuleMapFile",
    "ModuleMapParseError",
]
