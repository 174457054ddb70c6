# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m nr_storage.runner``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from nr_storage.config import StorageSettings

Operation = Literal[
    "get_flows",
    "save_flows",
    "get_credentials",
    "save_credentials",
    "get_settings",
    "save_settings",
    "get_sessions",
    "save_sessions",
    "get_library_entry",
    "save_library_entry",
]


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        settings: Storage settings passed to ``NodeRedStorage.init``
        operation: Adapter method to call
        args: Keyword arguments for the operation (e.g. ``type_``, ``path``)
    """

    settings: StorageSettings = Field(default_factory=StorageSettings)
    operation: Operation
    args: dict[str, Any] = Field(default_factory=dict)


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether the operation completed successfully
        result: Operation result (on success)
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    result: Any = None
    error: str = ""
    error_type: str = ""
