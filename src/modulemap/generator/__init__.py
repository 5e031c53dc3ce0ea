# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text generation for module map syntax trees."""

from modulemap.generator.config import (
    FORMAT_CONFIG_FILENAME,
    FormatConfig,
    FormatConfigError,
    load_format_config,
    parse_format_config,
)
from modulemap.generator.generator import Indentation, IndentationStyle, generate

__all__ = [
    "generate",
    "Indentation",
    "IndentationStyle",
    "FormatConfig",
    "FormatConfigError",
    "FORMAT_CONFIG_FILENAME",
    "load_format_config",
    "parse_format_config",
]
