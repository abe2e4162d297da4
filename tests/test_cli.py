"""Tests for the operator CLI."""

import pytest
from typer.testing import CliRunner

from cli.main import app
from src.exceptions import ConflictException


runner = CliRunner()

ARGS = [
    "employees",
    "create",
    "EMP042",
    "--full-name",
    "Riley Clerk",
    "--role",
    "clerk",
    "--department",
    "Cards",
]


@pytest.fixture
def created(monkeypatch) -> list[tuple]:
    calls: list[tuple] = []

    async def _fake_create(*args):
        calls.append(args)
        return "00000000-0000-0000-0000-000000000042"

    monkeypatch.setattr("cli.commands.employees._create_employee", _fake_create)
    return calls


def test_create_employee(created):
    result = runner.invoke(app, [*ARGS, "--password", "clerkpass"])

    assert result.exit_code == 0
    assert "Employee EMP042 created" in result.output
    assert created == [("EMP042", "clerkpass", "Riley Clerk", "clerk", "Cards")]


def test_create_employee_rejects_short_password(created):
    result = runner.invoke(app, [*ARGS, "--password", "abc"])

    assert result.exit_code == 1
    assert created == []


def test_create_employee_reports_conflict(monkeypatch):
    async def _conflict(*args):
        raise ConflictException("Employee EMP042 already exists")

    monkeypatch.setattr("cli.commands.employees._create_employee", _conflict)

    result = runner.invoke(app, [*ARGS, "--password", "clerkpass"])

    assert result.exit_code == 1
