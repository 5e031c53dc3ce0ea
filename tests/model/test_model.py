# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct the module map syntax tree."""

import pydantic
import pytest

from modulemap.model import (
    INT64_MAX,
    INT64_MIN,
    ConfigMacrosDeclaration,
    ConflictDeclaration,
    ExcludeHeader,
    ExportDeclaration,
    ExternModuleDeclaration,
    Feature,
    HeaderAttribute,
    HeaderDeclaration,
    InferredSubmoduleDeclaration,
    InferredSubmoduleMember,
    LinkDeclaration,
    LocalModuleDeclaration,
    ModuleId,
    ModuleMapFile,
    RequiresDeclaration,
    StandardHeader,
    SubmoduleDeclaration,
    TextualHeader,
    UmbrellaDirectoryDeclaration,
    UseDeclaration,
    WildcardModuleId,
)


def test_module_id_str() -> None:
    """A ModuleId renders its components joined by dots."""
    assert str(ModuleId(components=("Foo", "Bar"))) == "Foo.Bar"


def test_module_id_requires_a_component() -> None:
    with pytest.raises(pydantic.ValidationError):
        ModuleId(components=())


def test_wildcard_module_id_forms() -> None:
    """Wildcard ids may be a bare star, a dotted name, or a dotted name ending in a star."""
    assert str(WildcardModuleId(trailing_star=True)) == "*"
    assert str(WildcardModuleId(components=("Foo", "Bar"))) == "Foo.Bar"
    assert str(WildcardModuleId(components=("Foo",), trailing_star=True)) == "Foo.*"


def test_empty_wildcard_module_id_is_rejected() -> None:
    with pytest.raises(pydantic.ValidationError, match="bare"):
        WildcardModuleId()


def test_requires_needs_a_feature() -> None:
    with pytest.raises(pydantic.ValidationError):
        RequiresDeclaration(features=())


def test_header_defaults_to_public_standard_header() -> None:
    header = HeaderDeclaration(file_path="MyLib.h")
    assert header.kind == "header"
    assert header.header_kind == StandardHeader(private=False)
    assert header.header_attributes == ()


def test_header_attribute_value_is_limited_to_int64() -> None:
    assert HeaderAttribute(key="size", value=INT64_MAX).value == INT64_MAX
    assert HeaderAttribute(key="size", value=INT64_MIN).value == INT64_MIN
    with pytest.raises(pydantic.ValidationError):
        HeaderAttribute(key="size", value=INT64_MAX + 1)


def test_nodes_are_frozen() -> None:
    """Syntax tree nodes cannot be changed after construction."""
    feature = Feature(identifier="objc")
    with pytest.raises(pydantic.ValidationError):
        feature.identifier = "blocks"  # type: ignore[misc]


def test_model_copy_creates_changed_node() -> None:
    header = HeaderDeclaration(file_path="a.h")
    private = header.model_copy(update={"header_kind": TextualHeader(private=True)})
    assert header.header_kind == StandardHeader()
    assert private.header_kind == TextualHeader(private=True)


def test_nodes_are_hashable_and_compare_by_value() -> None:
    a = UseDeclaration(module_id=ModuleId(components=("Other",)))
    b = UseDeclaration(module_id=ModuleId(components=("Other",)))
    assert a == b
    assert len({a, b}) == 1


def test_lists_are_stored_as_tuples() -> None:
    declaration = ConfigMacrosDeclaration(attributes=["exhaustive"], macro_names=["NDEBUG", "DEBUG"])
    assert declaration.attributes == ("exhaustive",)
    assert declaration.macro_names == ("NDEBUG", "DEBUG")


def test_full_module_tree() -> None:
    """A complete module can be assembled from members and submodules."""
    module = LocalModuleDeclaration(
        framework=True,
        module_id=ModuleId(components=("MyLib",)),
        attributes=("system",),
        members=(
            RequiresDeclaration(features=(Feature(identifier="objc"), Feature(incompatible=True, identifier="blocks"))),
            HeaderDeclaration(header_kind=ExcludeHeader(), file_path="Old.h"),
            UmbrellaDirectoryDeclaration(file_path="Headers"),
            SubmoduleDeclaration(
                declaration=ExternModuleDeclaration(module_id=ModuleId(components=("Sub",)), file_path="sub.modulemap")
            ),
            SubmoduleDeclaration(
                declaration=InferredSubmoduleDeclaration(explicit=True, members=(InferredSubmoduleMember(),))
            ),
            ExportDeclaration(module_id=WildcardModuleId(trailing_star=True)),
            LinkDeclaration(framework=True, library_or_framework_name="UIKit"),
            ConflictDeclaration(module_id=ModuleId(components=("Other",)), diagnostic_message="no"),
        ),
    )
    file = ModuleMapFile(module_declarations=(module,))
    assert file.module_declarations[0].members[3].declaration.kind == "extern"
    assert file.module_declarations[0].members[4].declaration.kind == "inferred"


def test_validate_members_from_dicts() -> None:
    """Tagged unions select the member type from the ``kind`` field."""
    module = LocalModuleDeclaration.model_validate(
        {
            "module_id": {"components": ["A"]},
            "members": [
                {"kind": "link", "library_or_framework_name": "z"},
                {"kind": "header", "header_kind": {"kind": "textual", "private": True}, "file_path": "t.h"},
                {"kind": "submodule", "declaration": {"kind": "local", "module_id": {"components": ["B"]}}},
            ],
        }
    )
    assert module.members[0] == LinkDeclaration(library_or_framework_name="z")
    assert module.members[1].header_kind == TextualHeader(private=True)
    assert module.members[2].declaration == LocalModuleDeclaration(module_id=ModuleId(components=("B",)))


def test_unknown_member_kind_is_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        LocalModuleDeclaration.model_validate(
            {"module_id": {"components": ["A"]}, "members": [{"kind": "banana"}]}
        )
