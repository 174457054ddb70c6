# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the nr_storage runner.

Usage:
    python -m nr_storage.runner < input.json > output.json

The runner reads a JSON request from stdin, runs one storage operation,
and writes JSON output to stdout.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import asyncio
import logging
import sys

from .executor import Executor
from .schema import RunnerInput, RunnerOutput


def _run(request: str) -> RunnerOutput:
    try:
        input_data = RunnerInput.model_validate_json(request)
    except ValueError as e:
        return RunnerOutput(success=False, error=str(e), error_type=type(e).__name__)
    return asyncio.run(Executor().execute(input_data))


def main() -> int:
    """Read one request from stdin and print its outcome as JSON.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING)
    output = _run(sys.stdin.read())
    print(output.model_dump_json())
    return 0 if output.success else 1


if __name__ == "__main__":
    sys.exit(main())
