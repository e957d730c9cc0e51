import pytest
from invoke import MockContext, Result

from aocnew.config import AocConfig


@pytest.fixture
def repo(tmp_path, monkeypatch):
    """An empty repository root as the working directory."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_context():
    def make(**commands):
        run = {cmd: Result(command=cmd, exited=code) for cmd, code in commands.items()}
        return MockContext(config=AocConfig(lazy=True), run=run)

    return make


@pytest.fixture
def day_seven(mock_context):
    return mock_context(**{"cargo new --bin aoc07": 0, "mkdir aoc07/input": 0})
