"""Tests for the command line interface."""

import asyncio

import pytest
from click.testing import CliRunner

from exercise_tracker.cli import main
from exercise_tracker.db import Database, UserRepository


@pytest.fixture
def invoke(settings):
    runner = CliRunner()

    def _invoke(*args, **kwargs):
        return runner.invoke(main, list(args), obj={"settings": settings}, **kwargs)

    return _invoke


def add_user(settings, user_id, username):
    async def scenario():
        database = Database(settings.DATABASE_PATH, pool_size=1)
        await database.open()
        try:
            await UserRepository(database).insert(user_id, username)
        finally:
            await database.close()

    asyncio.run(scenario())


class TestCli:
    """Tests for CLI commands."""

    def test_commands_require_init(self, invoke):
        result = invoke("users")
        assert result.exit_code == 1
        assert "exercise-tracker init" in result.output

    def test_init(self, invoke, settings):
        result = invoke("init")
        assert result.exit_code == 0
        assert settings.DATABASE_PATH.exists()

        result = invoke("users")
        assert result.exit_code == 0
        assert "No users yet" in result.output

    def test_users_table(self, invoke, settings):
        invoke("init")
        add_user(settings, "65a1b2c3d4e5f60718293a4b", "alice")
        result = invoke("users")
        assert result.exit_code == 0
        assert "alice" in result.output
        assert "65a1b2c3d4e5f60718293a4b" in result.output

    def test_log_unknown_user(self, invoke):
        invoke("init")
        result = invoke("log", "000000000000000000000000")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_log_bad_date(self, invoke):
        invoke("init")
        result = invoke("log", "000000000000000000000000", "--from", "soon")
        assert result.exit_code == 2

    def test_log_empty(self, invoke, settings):
        invoke("init")
        add_user(settings, "65a1b2c3d4e5f60718293a4b", "alice")
        result = invoke("log", "65a1b2c3d4e5f60718293a4b", "--limit", "3")
        assert result.exit_code == 0
        assert "alice (65a1b2c3d4e5f60718293a4b): 0 exercise(s)" in result.output

    def test_reset(self, invoke, settings):
        invoke("init")
        add_user(settings, "65a1b2c3d4e5f60718293a4b", "alice")
        result = invoke("reset", "--yes")
        assert result.exit_code == 0
        assert "alice" not in invoke("users").output

    def test_reset_aborted(self, invoke, settings):
        invoke("init")
        add_user(settings, "65a1b2c3d4e5f60718293a4b", "alice")
        result = invoke("reset", input="n\n")
        assert result.exit_code == 1
        assert "alice" in invoke("users").output

    def test_log_malformed_id(self, invoke):
        invoke("init")
        result = invoke("log", "alice")
        assert result.exit_code == 1
        assert "not a valid user id" in result.output
