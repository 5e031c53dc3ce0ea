# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations and members that make up a parsed module map file.

Every node is immutable. Each variant of a tagged union carries a ``kind``
discriminator so that unions validate and serialize unambiguously.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from modulemap.model.identifiers import ModuleId, WildcardModuleId

# ###############
# Public Interface
# ###############

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# ------------------------------------------------------------------
# requires
# ------------------------------------------------------------------


class Feature(_Node):
    """A feature a module requires, or is incompatible with when ``incompatible`` is set."""

    incompatible: bool = False
    identifier: str


class RequiresDeclaration(_Node):
    """Requirements an importing translation unit must satisfy to use the module."""

    kind: Literal["requires"] = "requires"
    features: tuple[Feature, ...] = _Field(min_length=1)


# ------------------------------------------------------------------
# Headers
# ------------------------------------------------------------------


class StandardHeader(_Node):
    """A header whose declarations are placed into the enclosing module."""

    kind: Literal["standard"] = "standard"
    private: bool = False


class TextualHeader(_Node):
    """A header that is textually included rather than compiled into the module."""

    kind: Literal["textual"] = "textual"
    private: bool = False


class UmbrellaHeader(_Node):
    """A header that includes every header in its directory."""

    kind: Literal["umbrella"] = "umbrella"


class ExcludeHeader(_Node):
    """A header explicitly kept out of the module."""

    kind: Literal["exclude"] = "exclude"


HeaderKind = Annotated[
    StandardHeader | TextualHeader | UmbrellaHeader | ExcludeHeader,
    _Field(discriminator="kind"),
]


class HeaderAttribute(_Node):
    """A ``key value`` pair from a header attribute block, such as ``size 123``."""

    key: str
    value: int = _Field(ge=INT64_MIN, le=INT64_MAX)


class HeaderDeclaration(_Node):
    """Associates a header file with the enclosing module."""

    kind: Literal["header"] = "header"
    header_kind: HeaderKind = StandardHeader()
    file_path: str
    header_attributes: tuple[HeaderAttribute, ...] = ()


class UmbrellaDirectoryDeclaration(_Node):
    """Includes every header of a directory in the enclosing module."""

    kind: Literal["umbrella_directory"] = "umbrella_directory"
    file_path: str


# ------------------------------------------------------------------
# Module declarations and submodules
# ------------------------------------------------------------------


class LocalModuleDeclaration(_Node):
    """A module defined in the containing file.

    ``explicit`` is only meaningful when the declaration is nested as a submodule.
    """

    kind: Literal["local"] = "local"
    explicit: bool = False
    framework: bool = False
    module_id: ModuleId
    attributes: tuple[str, ...] = ()
    members: tuple[ModuleMember, ...] = ()


class ExternModuleDeclaration(_Node):
    """A module declared in another module map file."""

    kind: Literal["extern"] = "extern"
    module_id: ModuleId
    file_path: str


ModuleDeclaration = Annotated[
    LocalModuleDeclaration | ExternModuleDeclaration,
    _Field(discriminator="kind"),
]


class InferredSubmoduleMember(_Node):
    """The only member an inferred submodule may have: ``export *``."""


class InferredSubmoduleDeclaration(_Node):
    """``module *``: one submodule per header not covered by a header declaration."""

    kind: Literal["inferred"] = "inferred"
    explicit: bool = False
    framework: bool = False
    attributes: tuple[str, ...] = ()
    members: tuple[InferredSubmoduleMember, ...] = ()


class SubmoduleDeclaration(_Node):
    """A module nested inside another module's member list."""

    kind: Literal["submodule"] = "submodule"
    declaration: Annotated[
        LocalModuleDeclaration | ExternModuleDeclaration | InferredSubmoduleDeclaration,
        _Field(discriminator="kind"),
    ]


# ------------------------------------------------------------------
# Remaining members
# ------------------------------------------------------------------


class ExportDeclaration(_Node):
    """Re-exports imported modules as part of the enclosing module's API."""

    kind: Literal["export"] = "export"
    module_id: WildcardModuleId


class ExportAsDeclaration(_Node):
    """Names the module that re-exports the enclosing module's interface."""

    kind: Literal["export_as"] = "export_as"
    identifier: str


class UseDeclaration(_Node):
    """Another module the enclosing top-level module intends to use."""

    kind: Literal["use"] = "use"
    module_id: ModuleId


class LinkDeclaration(_Node):
    """A library or framework to link against when the module is imported."""

    kind: Literal["link"] = "link"
    framework: bool = False
    library_or_framework_name: str


class ConfigMacrosDeclaration(_Node):
    """Configuration macros that affect the API of the enclosing module."""

    kind: Literal["config_macros"] = "config_macros"
    attributes: tuple[str, ...] = ()
    macro_names: tuple[str, ...] = ()


class ConflictDeclaration(_Node):
    """A module that is likely to cause problems alongside the enclosing one."""

    kind: Literal["conflict"] = "conflict"
    module_id: ModuleId
    diagnostic_message: str


ModuleMember = Annotated[
    RequiresDeclaration
    | HeaderDeclaration
    | UmbrellaDirectoryDeclaration
    | SubmoduleDeclaration
    | ExportDeclaration
    | ExportAsDeclaration
    | UseDeclaration
    | LinkDeclaration
    | ConfigMacrosDeclaration
    | ConflictDeclaration,
    _Field(discriminator="kind"),
]


class ModuleMapFile(_Node):
    """Top-level model representing the parsed contents of a single module map file."""

    module_declarations: tuple[ModuleDeclaration, ...] = ()


# Resolve forward references in self-referential models.
LocalModuleDeclaration.model_rebuild()
SubmoduleDeclaration.model_rebuild()
ModuleMapFile.model_rebuild()
