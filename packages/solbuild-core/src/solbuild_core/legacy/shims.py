"""Conversion of current artifacts into the legacy artifact shape.

Legacy consumers expect artifacts keyed by contract name, a snake_case
``contract_name`` field and an ``unlinked_binary`` copy of the creation
bytecode.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from solbuild_core.compiler.linker import replace_all_link_references
from solbuild_core.schemas import (
    AnyArtifact,
    BytecodeOutput,
    CompilationResult,
    ContractArtifact,
    LegacyCompilationResult,
    LegacyContractArtifact,
)

logger = structlog.get_logger(__name__)


def shim_bytecode(bytecode: str | BytecodeOutput) -> str:
    """Return legacy bytecode for resolved or pre-link bytecode.

    Resolved bytecode (already a 0x-prefixed string) passes through.
    Pre-link bytecode objects still carry their link references, so their
    placeholders are rewritten and the result is prefixed.
    """
    if isinstance(bytecode, BytecodeOutput):
        return replace_all_link_references(bytecode.object, bytecode.link_references)
    return bytecode


def shim_contract(contract: AnyArtifact) -> LegacyContractArtifact:
    """Convert an artifact of either shape into the legacy shape."""
    if isinstance(contract, LegacyContractArtifact):
        return contract

    return LegacyContractArtifact(
        contract_name=contract.contract_name,
        source_path=contract.source_path,
        source=contract.source,
        source_map=contract.source_map,
        deployed_source_map=contract.deployed_source_map,
        legacy_ast=contract.legacy_ast,
        ast=contract.ast,
        abi=contract.abi,
        metadata=contract.metadata,
        bytecode=shim_bytecode(contract.bytecode),
        deployed_bytecode=shim_bytecode(contract.deployed_bytecode),
        unlinked_binary=shim_bytecode(contract.bytecode),
        compiler=contract.compiler,
        devdoc=contract.devdoc,
        userdoc=contract.userdoc,
    )


def shim_contracts(contracts: Iterable[ContractArtifact]) -> dict[str, LegacyContractArtifact]:
    """Key legacy artifacts by contract name.

    Contracts sharing a name collide; the later one wins and the
    collision is logged.
    """
    shimmed: dict[str, LegacyContractArtifact] = {}

    for contract in contracts:
        legacy = shim_contract(contract)
        if legacy.contract_name in shimmed:
            logger.warning(
                "legacy_contract_name_collision",
                contract_name=legacy.contract_name,
                replaced=shimmed[legacy.contract_name].source_path,
                kept=legacy.source_path,
            )
        shimmed[legacy.contract_name] = legacy

    return shimmed


def shim_output(result: CompilationResult) -> LegacyCompilationResult:
    """Convert a pipeline result into the legacy result shape."""
    return LegacyCompilationResult(
        contracts=shim_contracts(result.contracts),
        source_indexes=result.source_indexes,
        compiler_info=result.compiler_info,
    )
