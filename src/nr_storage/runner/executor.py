# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running a single storage operation.

Orchestrates the full execution flow:
1. Build and initialize a NodeRedStorage from the input settings
2. Call the requested operation
3. Close the storage
4. Return structured result
"""

from __future__ import annotations

from typing import Any

from nr_storage.library import LibraryFile, SubDirectory
from nr_storage.storage import NodeRedStorage
from nr_storage.stores import DocumentStore

from .schema import RunnerInput, RunnerOutput


class Executor:
    """Executes one storage operation.

    Pass a store to the constructor to override store creation.

    Example:
        executor = Executor()
        output = await executor.execute(input_data)

        # For testing with an in-memory store:
        executor = Executor(store=InMemoryStore())
    """

    def __init__(self, store: DocumentStore | None = None) -> None:
        self._injected_store = store

    async def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Run the operation and report the outcome.

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        try:
            result = await self._execute_internal(input_data)
        except Exception as e:
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )
        return RunnerOutput(success=True, result=result)

    async def _execute_internal(self, input_data: RunnerInput) -> Any:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        storage = NodeRedStorage(store=self._injected_store)
        await storage.init(input_data.settings)
        try:
            operation = getattr(storage, input_data.operation)
            result = await operation(**input_data.args)
        finally:
            await storage.close()
        return self._to_wire(result)

    def _to_wire(self, result: Any) -> Any:
        """Convert listing markers to their JSON shape.

        Sub-directories become their name, files become ``{"fn": name}``.
        """
        if not isinstance(result, list):
            return result
        wire: list[Any] = []
        for item in result:
            if isinstance(item, SubDirectory):
                wire.append(item.name)
            elif isinstance(item, LibraryFile):
                wire.append({"fn": item.fn})
            else:
                wire.append(item)
        return wire
