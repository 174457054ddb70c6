"""Tests for the runner executor."""

import io
import json

import pytest

from nr_storage.runner import Executor, RunnerInput
from nr_storage.runner.__main__ import main
from nr_storage.stores import InMemoryStore

MEMORY = {"store": {"type": "memory"}}


@pytest.fixture
def shared_store():
    return InMemoryStore()


@pytest.fixture
def executor(shared_store):
    return Executor(store=shared_store)


def _input(operation, **args):
    return RunnerInput.model_validate({"settings": MEMORY, "operation": operation, "args": args})


class TestExecute:
    """Tests for Executor.execute()."""

    async def test_get_flows_default(self, executor):
        output = await executor.execute(_input("get_flows"))
        assert output.success
        assert output.result == []

    async def test_save_then_get(self, executor):
        saved = await executor.execute(_input("save_settings", settings={"a": 1}))
        assert saved.success
        assert saved.result is None

        output = await executor.execute(_input("get_settings"))
        assert output.result == {"a": 1}

    async def test_library_listing_wire_shape(self, executor):
        await executor.execute(
            _input("save_library_entry", type_="t", path="a/b.txt", meta={}, body="b")
        )
        await executor.execute(
            _input("save_library_entry", type_="t", path="c.txt", meta={}, body="c")
        )

        output = await executor.execute(_input("get_library_entry", type_="t", path="/"))
        assert output.success
        assert output.result == ["a", {"fn": "c.txt"}]

    async def test_library_entry_body(self, executor):
        await executor.execute(
            _input("save_library_entry", type_="t", path="x.js", meta={"k": 1}, body="return 1;")
        )
        output = await executor.execute(_input("get_library_entry", type_="t", path="x.js"))
        assert output.result == "return 1;"

    async def test_decode_error_reported(self, executor, shared_store):
        await shared_store.set("nr:lib:t:bad", b"garbage")
        output = await executor.execute(_input("get_library_entry", type_="t", path="bad"))
        assert not output.success
        assert output.error_type == "LibraryEntryDecodeError"

    async def test_bad_arguments_reported(self, executor):
        output = await executor.execute(_input("get_library_entry", nope=1))
        assert not output.success
        assert output.error_type == "TypeError"

    async def test_config_error_reported(self):
        input_data = RunnerInput.model_validate(
            {"settings": {"store": {"type": "sqlite"}}, "operation": "get_flows"}
        )
        output = await Executor().execute(input_data)
        assert not output.success
        assert output.error_type == "StorageConfigError"


class TestMain:
    """Tests for the stdin/stdout entry point."""

    def test_round_trip_through_stdio(self, monkeypatch, capsys):
        request = {"settings": MEMORY, "operation": "get_sessions"}
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(request)))

        assert main() == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {"success": True, "result": {}, "error": "", "error_type": ""}

    def test_invalid_input_is_json_error(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"operation": "drop_everything"}'))

        assert main() == 1
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is False
        assert output["error_type"] == "ValidationError"
