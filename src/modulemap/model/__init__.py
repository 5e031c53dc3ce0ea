# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree model for module map files (modules, members, headers, etc.)."""

from modulemap.model.entities import (
    INT64_MAX,
    INT64_MIN,
    ConfigMacrosDeclaration,
    ConflictDeclaration,
    ExcludeHeader,
    ExportAsDeclaration,
    ExportDeclaration,
    ExternModuleDeclaration,
    Feature,
    HeaderAttribute,
    HeaderDeclaration,
    HeaderKind,
    InferredSubmoduleDeclaration,
    InferredSubmoduleMember,
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
from modulemap.model.identifiers import ModuleId, WildcardModuleId

__all__ = [
    # Identifiers
    "ModuleId",
    "WildcardModuleId",
    # Module declarations
    "ModuleMapFile",
    "ModuleDeclaration",
    "LocalModuleDeclaration",
    "ExternModuleDeclaration",
    # Members
    "ModuleMember",
    "Feature",
    "RequiresDeclaration",
    "HeaderKind",
    "StandardHeader",
    "TextualHeader",
    "UmbrellaHeader",
    "ExcludeHeader",
    "HeaderAttribute",
    "HeaderDeclaration",
    "UmbrellaDirectoryDeclaration",
    "SubmoduleDeclaration",
    "InferredSubmoduleDeclaration",
    "InferredSubmoduleMember",
    "ExportDeclaration",
    "ExportAsDeclaration",
    "UseDeclaration",
    "LinkDeclaration",
    "ConfigMacrosDeclaration",
    "ConflictDeclaration",
    # Limits
    "INT64_MIN",
    "INT64_MAX",
]
