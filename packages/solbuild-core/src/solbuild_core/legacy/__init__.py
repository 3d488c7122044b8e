"""Backward-compatible artifact shapes."""

from __future__ import annotations

from solbuild_core.legacy.shims import (
    shim_bytecode,
    shim_contract,
    shim_contracts,
    shim_output,
)

__all__: list[str] = [
    "shim_bytecode",
    "shim_contract",
    "shim_contracts",
    "shim_output",
]
