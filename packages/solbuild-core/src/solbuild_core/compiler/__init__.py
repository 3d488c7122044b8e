"""Compiler module for solbuild.

This module exports the pipeline entry point and its stages:
- Compiler: Main pipeline class (run / run_legacy)
- collect_sources, get_portable_source_path: Path normalization
- prepare_compiler_input, prepare_output_selection: Request construction
- invoke_compiler, CompilerSupplier, SolcxCompilerSupplier: Compiler invocation
- detect_errors: Diagnostic classification
- process_contracts, process_sources: Artifact assembly
- replace_all_link_references: Library placeholder rewriting
- order_abi: ABI canonicalization
"""

from __future__ import annotations

from solbuild_core.compiler.abi import order_abi
from solbuild_core.compiler.assembler import process_contracts, process_sources
from solbuild_core.compiler.compiler import Compiler, load_sources
from solbuild_core.compiler.diagnostics import (
    VERSION_MISMATCH_MARKER,
    DetectedErrors,
    detect_errors,
)
from solbuild_core.compiler.input_builder import (
    AST_SELECTORS,
    CONTRACT_SELECTORS,
    default_selectors,
    prepare_compiler_input,
    prepare_output_selection,
)
from solbuild_core.compiler.invoker import (
    CompilerSupplier,
    InvocationResult,
    LoadedCompiler,
    SolcxCompiler,
    SolcxCompilerSupplier,
    invoke_compiler,
)
from solbuild_core.compiler.linker import (
    PLACEHOLDER_WIDTH,
    link_placeholder,
    replace_all_link_references,
    replace_link_references,
)
from solbuild_core.compiler.paths import (
    CollectedSources,
    collect_sources,
    get_portable_source_path,
)

__all__: list[str] = [
    # Pipeline
    "Compiler",
    "load_sources",
    # Path normalization
    "CollectedSources",
    "collect_sources",
    "get_portable_source_path",
    # Request construction
    "AST_SELECTORS",
    "CONTRACT_SELECTORS",
    "default_selectors",
    "prepare_compiler_input",
    "prepare_output_selection",
    # Invocation
    "CompilerSupplier",
    "LoadedCompiler",
    "InvocationResult",
    "SolcxCompiler",
    "SolcxCompilerSupplier",
    "invoke_compiler",
    # Diagnostics
    "DetectedErrors",
    "VERSION_MISMATCH_MARKER",
    "detect_errors",
    # Assembly
    "process_contracts",
    "process_sources",
    "PLACEHOLDER_WIDTH",
    "link_placeholder",
    "replace_link_references",
    "replace_all_link_references",
    "order_abi",
]
