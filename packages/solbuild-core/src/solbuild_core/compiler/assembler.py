"""Artifact assembly from compiler output.

Converts the compiler's nested ``contracts[path][name]`` output graph into
a flat list of ContractArtifact, and the ``sources`` map into a list of
original paths indexed by compiler file id.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from solbuild_core.compiler.abi import order_abi
from solbuild_core.compiler.linker import replace_all_link_references
from solbuild_core.schemas import (
    CompilerInfo,
    CompilerOutput,
    ContractArtifact,
    ContractOutput,
    EvmOutput,
)


def process_sources(
    compiler_output: CompilerOutput,
    original_source_paths: Mapping[str, str],
) -> list[str | None]:
    """Return original source paths indexed by compiler file id.

    Ids the compiler did not report are left as None.
    """
    if not compiler_output.sources:
        return []

    size = max(source.id for source in compiler_output.sources.values()) + 1
    files: list[str | None] = [None] * size

    for source_path, source in compiler_output.sources.items():
        files[source.id] = original_source_paths.get(source_path)

    return files


def _iter_compiled_contracts(
    compiler_output: CompilerOutput,
) -> Iterator[tuple[str, str, ContractOutput, EvmOutput]]:
    for source_path, source_contracts in compiler_output.contracts.items():
        for contract_name, contract in source_contracts.items():
            # Every source gets a key, but only compiled contracts carry EVM output.
            if contract.evm is None:
                continue
            yield source_path, contract_name, contract, contract.evm


def process_contracts(
    compiler_output: CompilerOutput,
    sources: Mapping[str, str],
    original_source_paths: Mapping[str, str],
    solc_version: str,
) -> list[ContractArtifact]:
    """Convert compiler contract output into artifacts.

    Args:
        compiler_output: Parsed compiler response.
        sources: Portable path -> contents.
        original_source_paths: Portable path -> original path.
        solc_version: Version string of the compiler that ran.

    Returns:
        One artifact per contract with EVM output, in compiler output order.
    """
    compiler_info = CompilerInfo(name="solc", version=solc_version)
    artifacts: list[ContractArtifact] = []

    for source_path, contract_name, contract, evm in _iter_compiled_contracts(compiler_output):
        source_output = compiler_output.sources.get(source_path)
        ast = source_output.ast if source_output else None

        artifacts.append(
            ContractArtifact(
                contract_name=contract_name,
                abi=order_abi(contract.abi, contract_name, ast),
                metadata=contract.metadata,
                devdoc=contract.devdoc,
                userdoc=contract.userdoc,
                source_path=original_source_paths.get(source_path, source_path),
                source=sources.get(source_path, ""),
                source_map=evm.bytecode.source_map,
                deployed_source_map=evm.deployed_bytecode.source_map,
                ast=ast,
                legacy_ast=source_output.legacy_ast if source_output else None,
                bytecode=replace_all_link_references(
                    evm.bytecode.object,
                    evm.bytecode.link_references,
                ),
                deployed_bytecode=replace_all_link_references(
                    evm.deployed_bytecode.object,
                    evm.deployed_bytecode.link_references,
                ),
                compiler=compiler_info,
            )
        )

    return artifacts
