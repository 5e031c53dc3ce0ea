# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the module map format configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from modulemap.generator.generator import Indentation, IndentationStyle

# ###############
# Public Interface
# ###############

FORMAT_CONFIG_FILENAME = ".modulemap-format.yaml"


class FormatConfigError(Exception):
    """Raised when a format configuration file is invalid or cannot be loaded."""


@dataclass
class FormatConfig:
    """Settings that control how syntax trees are rendered as text.

    Attributes:
        indentation: Indentation applied per nesting depth.
    """

    indentation: Indentation = field(default_factory=Indentation)


def load_format_config(path: Path) -> FormatConfig:
    """Load and parse a module map format configuration file.

    Args:
        path: Path to the `.modulemap-format.yaml` file.

    Returns:
        A FormatConfig instance populated from the file.

    Raises:
        FormatConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FormatConfigError(f"Format config file not found: {path}") from None
    except OSError as exc:
        raise FormatConfigError(f"Cannot read format config file: {exc}") from exc

    return parse_format_config(text, source_label=str(path))


def parse_format_config(text: str, source_label: str = "<string>") -> FormatConfig:
    """Parse format config YAML text into a FormatConfig.

    An empty document yields the default configuration.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        FormatConfigError: If the YAML is invalid or a field has an invalid value.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FormatConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return FormatConfig()
    if not isinstance(data, dict):
        raise FormatConfigError(f"{source_label}: format config must be a YAML mapping")

    return FormatConfig(indentation=_parse_indentation(data, source_label))


# ################
# Implementation
# ################


def _parse_indentation(data: dict[str, object], source_label: str) -> Indentation:
    raw_style = data.get("indentation", IndentationStyle.SPACES.value)
    try:
        style = IndentationStyle(raw_style)
    except ValueError:
        raise FormatConfigError(
            f"{source_label}: 'indentation' must be 'spaces' or 'tabs', got {raw_style!r}"
        ) from None

    width = data.get("indent-width", Indentation().width)
    # bool is a subclass of int; 'indent-width: yes' is not a width.
    if not isinstance(width, int) or isinstance(width, bool) or width < 0:
        raise FormatConfigError(f"{source_label}: 'indent-width' must be a non-negative integer")

    return Indentation(style, width)
