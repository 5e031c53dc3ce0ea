# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of module map syntax trees.

Trees are stored as compact JSON for portability and human-readability.
The format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json

from modulemap.model.entities import ModuleMapFile

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"


def serialize(module_map_file: ModuleMapFile) -> str:
    """Serialize a ModuleMapFile to a compact JSON string."""
    payload = {"v": ARTIFACT_FORMAT_VERSION, "file": module_map_file.model_dump(mode="json")}
    return json.dumps(payload, separators=(",", ":"))


def deserialize(data: str) -> ModuleMapFile:
    """Deserialize a ModuleMapFile from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`ModuleMapFile` model.

    Raises:
        ValueError: If the artifact format version is not recognised or the
            payload does not describe a valid syntax tree.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return ModuleMapFile.model_validate(obj["file"])
