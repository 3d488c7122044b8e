"""Shared test fixtures for solbuild-cli tests.

Provides CliRunner fixtures, a source tree helper, and a fake solc that
replaces the py-solc-x supplier used by the compile command.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner
from structlog.testing import LogCapture

TOKEN_SOURCE = "pragma solidity ^0.8.0;\n\ncontract Token {\n    function total() public {}\n}\n"


class FakeCompiler:
    """Compiler returning canned standard-JSON output."""

    def __init__(self, output: dict[str, Any]) -> None:
        self.output = output
        self.requests: list[dict[str, Any]] = []

    def version(self) -> str:
        return "0.8.20+commit.a1b79de6"

    def compile(self, input_json: str) -> str:
        self.requests.append(json.loads(input_json))
        return json.dumps(self.output)


class FakeSupplier:
    """Supplier handing out a FakeCompiler and recording the solc config."""

    def __init__(self, output: dict[str, Any]) -> None:
        self.compiler = FakeCompiler(output)
        self.configs: list[Any] = []

    def load(self) -> FakeCompiler:
        return self.compiler


@pytest.fixture
def log_output() -> LogCapture:
    """Return the structlog capture used by every CLI test."""
    return LogCapture()


@pytest.fixture(autouse=True)
def configure_structlog_for_tests(log_output: LogCapture) -> None:
    """Collect structlog events in memory, away from CliRunner streams."""
    structlog.configure(
        processors=[log_output],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    This fixture creates a temporary directory and changes to it
    for the duration of the test.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def token_project(isolated_runner: CliRunner) -> Path:
    """Create contracts/Token.sol in the isolated filesystem.

    Returns:
        Path to the contracts directory.
    """
    contracts = Path("contracts")
    contracts.mkdir()
    (contracts / "Token.sol").write_text(TOKEN_SOURCE)
    return contracts


@pytest.fixture
def token_output() -> dict[str, Any]:
    """Return compiler output for contracts/Token.sol."""
    return {
        "sources": {"contracts/Token.sol": {"id": 0, "ast": {"nodes": []}}},
        "contracts": {
            "contracts/Token.sol": {
                "Token": {
                    "abi": [{"type": "function", "name": "total", "inputs": []}],
                    "evm": {
                        "bytecode": {"object": "6080", "sourceMap": "0:1:0"},
                        "deployedBytecode": {"object": "6001"},
                    },
                },
            },
        },
    }


@pytest.fixture
def fake_solc(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[dict[str, Any]], FakeSupplier]:
    """Factory fixture replacing the py-solc-x supplier with canned output.

    Returns:
        Function taking compiler output and returning the installed FakeSupplier.
    """

    def _install(output: dict[str, Any]) -> FakeSupplier:
        supplier = FakeSupplier(output)

        def _build(config: Any = None) -> FakeSupplier:
            supplier.configs.append(config)
            return supplier

        monkeypatch.setattr("solbuild_core.compiler.compiler.SolcxCompilerSupplier", _build)
        return supplier

    return _install
