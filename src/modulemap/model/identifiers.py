# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dotted module identifiers used throughout the module map model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ModuleId(BaseModel):
    """The name of a module, e.g. ``MyLib.Sub``."""

    model_config = ConfigDict(frozen=True)

    components: tuple[str, ...] = _Field(min_length=1)

    def __str__(self) -> str:
        return ".".join(self.components)


class WildcardModuleId(BaseModel):
    """A module name that may end in ``*`` to match every module under a prefix.

    A bare ``*`` has no components and a trailing star.
    """

    model_config = ConfigDict(frozen=True)

    components: tuple[str, ...] = ()
    trailing_star: bool = False

    @model_validator(mode="after")
    def _require_star_without_components(self) -> WildcardModuleId:
        if not self.components and not self.trailing_star:
            raise ValueError("a wildcard module id without components must be a bare '*'")
        return self

    def __str__(self) -> str:
        parts = list(self.components)
        if self.trailing_star:
            parts.append("*")
        return ".".join(parts)
