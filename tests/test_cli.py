"""CLI: verifies the stdin check loop and the typer commands.

Tests cover:
    - One verdict line per id, matching the service outcome
    - Blank lines skipped, non-integer lines reported
    - Outcome counts returned for the run
    - init-db / set / check end to end against a SQLite file
"""

import pytest
from typer.testing import CliRunner

import numcheck.cli as cli_module
from numcheck.cli import app, run_check_loop
from numcheck.core.domain_types import CheckOutcome
from numcheck.core.errors import StoreLookupError
from numcheck.services.number_service import new_get_number
from tests.services.mock_store import MockNumberStore

runner = CliRunner()


async def test_check_loop_reports_each_id():
    store = MockNumberStore()
    store.on("get", 2).returns(7)
    store.on("get", 5).returns(24)
    store.on("get", 9).raises(StoreLookupError("failed"))
    out = []

    outcomes = await run_check_loop(
        new_get_number(store), ["2\n", "5\n", "9\n"], out.append,
    )

    store.assert_expectations()
    assert out == [
        "result valid",
        "result invalid: result too high: 24",
        "result invalid: failed",
    ]
    assert outcomes == {
        CheckOutcome.VALID: 1,
        CheckOutcome.TOO_HIGH: 1,
        CheckOutcome.LOOKUP_FAILED: 1,
    }


async def test_check_loop_skips_blank_and_rejects_garbage():
    store = MockNumberStore()
    store.on("get", -1).returns(10)
    out = []

    await run_check_loop(
        new_get_number(store), ["\n", "  \n", "abc\n", " -1 \n"], out.append,
    )

    store.assert_expectations()
    assert out == ["invalid id: abc", "result valid"]


async def test_check_loop_continues_after_foreign_store_exception():
    store = MockNumberStore()
    store.on("get", 1).raises(ConnectionRefusedError("refused"))
    store.on("get", 2).returns(7)
    out = []

    outcomes = await run_check_loop(new_get_number(store), ["1", "2"], out.append)

    store.assert_expectations()
    assert out == ["result invalid: refused", "result valid"]
    assert outcomes == {CheckOutcome.LOOKUP_FAILED: 1, CheckOutcome.VALID: 1}


@pytest.fixture
def db_url(tmp_path, monkeypatch):
    monkeypatch.setattr(cli_module, "setup_logging", lambda *a, **kw: None)
    return f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"


def test_commands_end_to_end(db_url):
    result = runner.invoke(app, ["init-db", "--database-url", db_url])
    assert result.exit_code == 0, result.output
    assert "numbers table ready" in result.output

    for record_id, value in (("2", "7"), ("5", "24")):
        result = runner.invoke(app, ["set", record_id, value, "--database-url", db_url])
        assert result.exit_code == 0, result.output
    assert "stored 5 = 24" in result.output

    result = runner.invoke(
        app, ["check", "--database-url", db_url], input="2\n5\n3\nx\n",
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "result valid",
        "result invalid: result too high: 24",
        "result invalid: number 3 not found",
        "invalid id: x",
    ]


def test_set_without_table_exits_1(db_url):
    result = runner.invoke(app, ["set", "1", "2", "--database-url", db_url])

    assert result.exit_code == 1
    assert "Database execute failed" in result.output


def test_check_without_table_reports_database_error(db_url):
    result = runner.invoke(app, ["check", "--database-url", db_url], input="1\n")

    assert result.exit_code == 0
    assert result.output.startswith("result invalid: Database execute failed")


def test_check_against_unreachable_database_reports_each_id(monkeypatch):
    monkeypatch.setattr(cli_module, "setup_logging", lambda *a, **kw: None)
    url = "postgresql+asyncpg://u:p@127.0.0.1:1/db"

    result = runner.invoke(app, ["check", "--database-url", url], input="1\n2\n")

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("result invalid: Database connect failed") for line in lines)


def test_init_db_against_unreachable_database_exits_1(monkeypatch):
    monkeypatch.setattr(cli_module, "setup_logging", lambda *a, **kw: None)
    url = "postgresql+asyncpg://u:p@127.0.0.1:1/db"

    result = runner.invoke(app, ["init-db", "--database-url", url])

    assert result.exit_code == 1
    assert "Database create failed" in result.output
