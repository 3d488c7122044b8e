"""Schema definitions for solbuild.

Configuration:
- CompileOptions: Options for one compilation run (solbuild.yaml)
- CompilersConfig, SolcConfig, SolcSettings, OptimizerSettings

Compiler wire format:
- CompilerRequest: solc standard-JSON input
- CompilerOutput: solc standard-JSON output (sources, contracts, errors)

Artifacts:
- ContractArtifact: Current per-contract artifact
- LegacyContractArtifact: Backward-compatible artifact
- CompilationResult, LegacyCompilationResult: Pipeline results
"""

from __future__ import annotations

from solbuild_core.schemas.artifacts import (
    AnyArtifact,
    CompilationResult,
    CompilerInfo,
    ContractArtifact,
    LegacyCompilationResult,
    LegacyContractArtifact,
)
from solbuild_core.schemas.compile_options import (
    CompileOptions,
    CompilersConfig,
    OptimizerSettings,
    SolcConfig,
    SolcSettings,
)
from solbuild_core.schemas.compiler_input import (
    CompilerRequest,
    CompilerSettings,
    OutputSelection,
    SourceContent,
)
from solbuild_core.schemas.compiler_output import (
    BytecodeOutput,
    CompilerOutput,
    ContractOutput,
    Diagnostic,
    EvmOutput,
    LinkReference,
    LinkReferences,
    SourceOutput,
)

__all__ = [
    # Configuration
    "CompileOptions",
    "CompilersConfig",
    "SolcConfig",
    "SolcSettings",
    "OptimizerSettings",
    # Compiler request
    "CompilerRequest",
    "CompilerSettings",
    "OutputSelection",
    "SourceContent",
    # Compiler response
    "CompilerOutput",
    "ContractOutput",
    "SourceOutput",
    "EvmOutput",
    "BytecodeOutput",
    "LinkReference",
    "LinkReferences",
    "Diagnostic",
    # Artifacts
    "AnyArtifact",
    "ContractArtifact",
    "LegacyContractArtifact",
    "CompilerInfo",
    "CompilationResult",
    "LegacyCompilationResult",
]
