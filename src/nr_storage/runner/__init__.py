# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for executing one storage operation from JSON.

Usage:
    python -m nr_storage.runner < input.json > output.json

Exports:
    Executor: Runs an operation against a freshly initialized storage
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import Executor
from .schema import RunnerInput, RunnerOutput

__all__ = [
    "Executor",
    "RunnerInput",
    "RunnerOutput",
]
