# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the format configuration parser."""

from pathlib import Path

import pytest

from modulemap.generator.config import (
    FORMAT_CONFIG_FILENAME,
    FormatConfig,
    FormatConfigError,
    load_format_config,
    parse_format_config,
)
from modulemap.generator.generator import Indentation, IndentationStyle

# ###############
# parse_format_config
# ###############


class TestParseFormatConfig:
    def test_empty_document_gives_defaults(self) -> None:
        assert parse_format_config("") == FormatConfig()
        assert FormatConfig().indentation == Indentation(IndentationStyle.SPACES, 4)

    def test_tabs(self) -> None:
        config = parse_format_config("indentation: tabs\n")
        assert config.indentation.style == IndentationStyle.TABS

    def test_spaces_with_width(self) -> None:
        config = parse_format_config("indentation: spaces\nindent-width: 2\n")
        assert config.indentation == Indentation.spaces(2)

    def test_width_without_style(self) -> None:
        assert parse_format_config("indent-width: 8").indentation == Indentation.spaces(8)

    def test_unknown_style(self) -> None:
        with pytest.raises(FormatConfigError, match="'spaces' or 'tabs'"):
            parse_format_config("indentation: dots")

    @pytest.mark.parametrize("width", ["-1", "two", "yes", "1.5"])
    def test_invalid_width(self, width: str) -> None:
        with pytest.raises(FormatConfigError, match="non-negative integer"):
            parse_format_config(f"indent-width: {width}")

    def test_non_mapping(self) -> None:
        with pytest.raises(FormatConfigError, match="must be a YAML mapping"):
            parse_format_config("- tabs\n- spaces\n")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(FormatConfigError, match="Invalid YAML in custom.yaml"):
            parse_format_config("indentation: [tabs", source_label="custom.yaml")


# ###############
# load_format_config
# ###############


class TestLoadFormatConfig:
    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / FORMAT_CONFIG_FILENAME
        path.write_text("indentation: tabs\n", encoding="utf-8")
        assert load_format_config(path).indentation == Indentation.tabs()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FormatConfigError, match="not found"):
            load_format_config(tmp_path / FORMAT_CONFIG_FILENAME)

    def test_error_mentions_path(self, tmp_path: Path) -> None:
        path = tmp_path / FORMAT_CONFIG_FILENAME
        path.write_text("indentation: 3\n", encoding="utf-8")
        with pytest.raises(FormatConfigError, match=FORMAT_CONFIG_FILENAME.replace(".", r"\.")):
            load_format_config(path)
