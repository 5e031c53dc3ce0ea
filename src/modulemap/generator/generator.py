# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Renders a ModuleMapFile syntax tree back into module map source text.

The output is the canonical form accepted by the parser, so parsing generated
text and generating it again reproduces it byte for byte.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from modulemap.model.entities import (
    ConfigMacrosDeclaration,
    ConflictDeclaration,
    ExcludeHeader,
    ExportAsDeclaration,
    ExportDeclaration,
    ExternModuleDeclaration,
    Feature,
    HeaderDeclaration,
    InferredSubmoduleDeclaration,
    LinkDeclaration,
    LocalModuleDeclaration,
    ModuleDeclaration,
    ModuleMapFile,
    ModuleMember,
    RequiresDeclaration,
    StandardHeader,
    SubmoduleDeclaration,
    TextualHeader,
    UmbrellaDirectoryDeclaration,
    UmbrellaHeader,
    UseDeclaration,
)

# ###############
# Public Interface
# ###############


class IndentationStyle(enum.Enum):
    """Whitespace used for one level of nesting."""

    TABS = "tabs"
    SPACES = "spaces"


@dataclass(frozen=True)
class Indentation:
    """Indentation applied per nesting depth.

    Attributes:
        style: Whether a level is a tab or a run of spaces.
        width: Number of spaces per level. Ignored for tabs.
    """

    style: IndentationStyle = IndentationStyle.SPACES
    width: int = 4

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Indentation width must not be negative, got {self.width}")

    @classmethod
    def tabs(cls) -> Indentation:
        return cls(IndentationStyle.TABS)

    @classmethod
    def spaces(cls, count: int) -> Indentation:
        return cls(IndentationStyle.SPACES, count)

    def render(self, depth: int) -> str:
        """Return the leading whitespace for a line at *depth* (0 for top-level)."""
        if self.style == IndentationStyle.TABS:
            return "\t" * depth
        return " " * (self.width * depth)


def generate(module_map_file: ModuleMapFile, indentation: Indentation | None = None) -> str:
    """Render a ModuleMapFile as module map source text.

    Top-level declarations are separated by one blank line. The output has no
    trailing newline.

    Args:
        module_map_file: The syntax tree to render.
        indentation: Indentation per nesting level. Defaults to four spaces.

    Returns:
        The generated source text.
    """
    return _Generator(indentation or Indentation()).generate(module_map_file)


# ################
# Implementation
# ################


def _quoted(value: str) -> str:
    return f'"{value}"'


class _Generator:
    """Walks the syntax tree and emits one line per declaration or member."""

    def __init__(self, indentation: Indentation) -> None:
        self._indentation = indentation

    def generate(self, module_map_file: ModuleMapFile) -> str:
        return "\n\n".join(self._module_declaration(d, 0) for d in module_map_file.module_declarations)

    def _line(self, depth: int, text: str) -> str:
        return self._indentation.render(depth) + text

    # ------------------------------------------------------------------
    # Module declarations
    # ------------------------------------------------------------------

    def _module_declaration(self, declaration: ModuleDeclaration, depth: int) -> str:
        if isinstance(declaration, ExternModuleDeclaration):
            return self._line(depth, f"extern module {declaration.module_id} {_quoted(declaration.file_path)}")
        assert isinstance(declaration, LocalModuleDeclaration)
        member_lines = [self._member(m, depth + 1) for m in declaration.members]
        return self._module_block(
            declaration.explicit,
            declaration.framework,
            str(declaration.module_id),
            declaration.attributes,
            member_lines,
            depth,
        )

    def _inferred_submodule(self, declaration: InferredSubmoduleDeclaration, depth: int) -> str:
        member_lines = [self._line(depth + 1, "export *") for _ in declaration.members]
        return self._module_block(
            declaration.explicit,
            declaration.framework,
            "*",
            declaration.attributes,
            member_lines,
            depth,
        )

    def _module_block(
        self,
        explicit: bool,
        framework: bool,
        name: str,
        attributes: tuple[str, ...],
        member_lines: list[str],
        depth: int,
    ) -> str:
        """Emit the declaration line, the already-rendered members, and the closing brace.

        A module without members puts the closing brace directly on the next line,
        with no blank line between the braces.
        """
        words: list[str] = []
        if explicit:
            words.append("explicit")
        if framework:
            words.append("framework")
        words.extend(["module", name])
        words.extend(f"[{attribute}]" for attribute in attributes)
        words.append("{")
        lines = [self._line(depth, " ".join(words)), *member_lines, self._line(depth, "}")]
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def _member(self, member: ModuleMember, depth: int) -> str:
        if isinstance(member, SubmoduleDeclaration):
            if isinstance(member.declaration, InferredSubmoduleDeclaration):
                return self._inferred_submodule(member.declaration, depth)
            return self._module_declaration(member.declaration, depth)
        return self._line(depth, self._member_text(member))

    def _member_text(self, member: ModuleMember) -> str:
        """Render a single-line member without its indentation."""
        if isinstance(member, RequiresDeclaration):
            return "requires " + ", ".join(self._feature(f) for f in member.features)
        if isinstance(member, HeaderDeclaration):
            return self._header(member)
        if isinstance(member, UmbrellaDirectoryDeclaration):
            return f"umbrella {_quoted(member.file_path)}"
        if isinstance(member, ExportDeclaration):
            return f"export {member.module_id}"
        if isinstance(member, ExportAsDeclaration):
            return f"export_as {member.identifier}"
        if isinstance(member, UseDeclaration):
            return f"use {member.module_id}"
        if isinstance(member, LinkDeclaration):
            words = ["link"]
            if member.framework:
                words.append("framework")
            words.append(_quoted(member.library_or_framework_name))
            return " ".join(words)
        if isinstance(member, ConfigMacrosDeclaration):
            words = ["config_macros"]
            words.extend(f"[{attribute}]" for attribute in member.attributes)
            if member.macro_names:
                words.append(", ".join(member.macro_names))
            return " ".join(words)
        # ConflictDeclaration is the only remaining single-line variant.
        assert isinstance(member, ConflictDeclaration)
        return f"conflict {member.module_id}, {_quoted(member.diagnostic_message)}"

    def _feature(self, feature: Feature) -> str:
        prefix = "!" if feature.incompatible else ""
        return prefix + feature.identifier

    def _header(self, header: HeaderDeclaration) -> str:
        words: list[str] = []
        kind = header.header_kind
        if isinstance(kind, (StandardHeader, TextualHeader)) and kind.private:
            words.append("private")
        if isinstance(kind, TextualHeader):
            words.append("textual")
        elif isinstance(kind, UmbrellaHeader):
            words.append("umbrella")
        elif isinstance(kind, ExcludeHeader):
            words.append("exclude")
        words.extend(["header", _quoted(header.file_path)])
        if header.header_attributes:
            words.append("{")
            words.extend(f"{attribute.key} {attribute.value}" for attribute in header.header_attributes)
            words.append("}")
        return " ".join(words)
