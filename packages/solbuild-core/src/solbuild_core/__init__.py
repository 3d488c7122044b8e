"""solbuild-core: Solidity compilation and artifact assembly.

This package provides:
- Compiler: Run solc over sources and assemble contract artifacts
- ContractArtifact / LegacyContractArtifact: Artifact contracts
- shim_output: Convert results into the legacy artifact shape
- CompileOptions: Options model loaded from solbuild.yaml
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Compiler pipeline
from solbuild_core.compiler import (
    Compiler,
    CompilerSupplier,
    LoadedCompiler,
    SolcxCompilerSupplier,
    load_sources,
)

# Configuration
from solbuild_core.config import resolve_options

# Error types
from solbuild_core.errors import (
    CompilationError,
    CompilerInvocationError,
    ConfigurationError,
    LinkReferenceError,
    SolbuildError,
)

# JSON Schema export functions
from solbuild_core.export import (
    export_compile_options_schema,
    export_contract_artifact_schema,
)

# Legacy shape
from solbuild_core.legacy import shim_contract, shim_output

# Schema models
from solbuild_core.schemas import (
    AnyArtifact,
    CompilationResult,
    CompileOptions,
    CompilerInfo,
    ContractArtifact,
    LegacyCompilationResult,
    LegacyContractArtifact,
)

__all__ = [
    "__version__",
    # Compiler
    "Compiler",
    "CompilerSupplier",
    "LoadedCompiler",
    "SolcxCompilerSupplier",
    "load_sources",
    # Configuration
    "CompileOptions",
    "resolve_options",
    # Errors
    "SolbuildError",
    "CompilerInvocationError",
    "CompilationError",
    "LinkReferenceError",
    "ConfigurationError",
    # JSON Schema exports
    "export_contract_artifact_schema",
    "export_compile_options_schema",
    # Legacy shape
    "shim_contract",
    "shim_output",
    # Artifacts
    "AnyArtifact",
    "ContractArtifact",
    "LegacyContractArtifact",
    "CompilerInfo",
    "CompilationResult",
    "LegacyCompilationResult",
]
