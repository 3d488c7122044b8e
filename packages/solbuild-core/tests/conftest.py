"""Shared pytest fixtures for solbuild-core tests.

Provides a fake compiler supplier that returns canned standard-JSON
output, so the pipeline can be exercised without a solc binary.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any

import pytest
import structlog

SOLC_VERSION = "0.8.20+commit.a1b79de6"

LIB_PATH = "C:\\project\\contracts\\MathLib.sol"
TOKEN_PATH = "C:\\project\\contracts\\Token.sol"
PORTABLE_LIB_PATH = "/C/project/contracts/MathLib.sol"
PORTABLE_TOKEN_PATH = "/C/project/contracts/Token.sol"

LIB_SOURCE = """pragma solidity ^0.8.0;

library MathLib {
    function add(uint a, uint b) external pure returns (uint) { return a + b; }
}
"""

TOKEN_SOURCE = """pragma solidity ^0.8.0;

import "./MathLib.sol";

contract Token {
    event Transfer(address indexed from, address indexed to, uint value);

    function transfer(address to, uint value) public returns (bool) { return true; }

    function balanceOf(address owner) public view returns (uint) { return MathLib.add(0, 0); }
}
"""


class FakeCompiler:
    """LoadedCompiler returning a canned response and recording requests."""

    def __init__(self, output: dict[str, Any] | str, version: str = SOLC_VERSION) -> None:
        self.output = output
        self._version = version
        self.requests: list[dict[str, Any]] = []

    def version(self) -> str:
        return self._version

    def compile(self, input_json: str) -> str:
        self.requests.append(json.loads(input_json))
        if isinstance(self.output, str):
            return self.output
        return json.dumps(self.output)


class FakeSupplier:
    """CompilerSupplier handing out a single FakeCompiler."""

    def __init__(self, compiler: FakeCompiler) -> None:
        self.compiler = compiler
        self.load_count = 0

    def load(self) -> FakeCompiler:
        self.load_count += 1
        return self.compiler


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def make_supplier() -> Callable[..., FakeSupplier]:
    """Return a factory building a FakeSupplier around canned output.

    Usage:
        supplier = make_supplier({"contracts": {}, "sources": {}})
        supplier.compiler.requests  # requests seen by the fake compiler
    """

    def _make(output: dict[str, Any] | str, version: str = SOLC_VERSION) -> FakeSupplier:
        return FakeSupplier(FakeCompiler(output, version=version))

    return _make


@pytest.fixture
def raw_sources() -> dict[str, str]:
    """Return two Windows-style sources: a library and a contract importing it."""
    return {LIB_PATH: LIB_SOURCE, TOKEN_PATH: TOKEN_SOURCE}


@pytest.fixture
def token_ast() -> dict[str, Any]:
    """Return a compact AST for Token.sol."""
    return {
        "nodeType": "SourceUnit",
        "absolutePath": PORTABLE_TOKEN_PATH,
        "nodes": [
            {"nodeType": "PragmaDirective", "literals": ["solidity", "^", "0.8", ".0"]},
            {"nodeType": "ImportDirective", "file": "./MathLib.sol"},
            {
                "nodeType": "ContractDefinition",
                "name": "Token",
                "nodes": [
                    {"nodeType": "EventDefinition", "name": "Transfer"},
                    {"nodeType": "FunctionDefinition", "name": "transfer"},
                    {"nodeType": "FunctionDefinition", "name": "balanceOf"},
                ],
            },
        ],
    }


@pytest.fixture
def unlinked_bytecode() -> str:
    """Return 50 zero bytes of creation bytecode (no 0x prefix)."""
    return "00" * 50


@pytest.fixture
def compiler_output(token_ast: dict[str, Any], unlinked_bytecode: str) -> dict[str, Any]:
    """Return standard-JSON output for compiling Token.sol as the only target.

    MathLib.sol is listed without EVM output, as solc does for files that
    are parsed but not selected for compilation.
    """
    return {
        "sources": {
            PORTABLE_LIB_PATH: {
                "id": 0,
                "ast": {"nodeType": "SourceUnit", "nodes": []},
                "legacyAST": {"name": "SourceUnit"},
            },
            PORTABLE_TOKEN_PATH: {
                "id": 1,
                "ast": token_ast,
                "legacyAST": {"name": "SourceUnit", "id": 1},
            },
        },
        "contracts": {
            PORTABLE_LIB_PATH: {"MathLib": {"abi": [], "evm": {}}},
            PORTABLE_TOKEN_PATH: {
                "Token": {
                    "abi": [
                        {"type": "function", "name": "balanceOf", "inputs": []},
                        {"type": "event", "name": "Transfer", "inputs": []},
                        {"type": "function", "name": "transfer", "inputs": []},
                    ],
                    "metadata": '{"compiler":{"version":"0.8.20"}}',
                    "devdoc": {"kind": "dev", "methods": {}},
                    "userdoc": {"kind": "user", "methods": {}},
                    "evm": {
                        "bytecode": {
                            "object": unlinked_bytecode,
                            "sourceMap": "0:100:0:-:0",
                            "linkReferences": {
                                PORTABLE_LIB_PATH: {
                                    "MathLib": [{"start": 10, "length": 20}],
                                },
                            },
                        },
                        "deployedBytecode": {
                            "object": "6080",
                            "sourceMap": "0:50:0:-:0",
                            "linkReferences": {},
                        },
                    },
                },
            },
        },
        "errors": [],
    }
