"""Compiler pipeline for solbuild.

This module implements the Compiler class that turns raw Solidity sources
into ContractArtifacts:

    raw sources -> portable paths -> compiler request -> solc
        -> diagnostics (may abort) -> artifacts + source indexes

Every run builds fresh source maps, requests and artifact lists. The only
state shared between runs is whatever the compiler supplier caches.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

import structlog

from solbuild_core.compiler.assembler import process_contracts, process_sources
from solbuild_core.compiler.diagnostics import detect_errors
from solbuild_core.compiler.input_builder import prepare_compiler_input
from solbuild_core.compiler.invoker import (
    CompilerSupplier,
    SolcxCompilerSupplier,
    invoke_compiler,
)
from solbuild_core.compiler.paths import collect_sources
from solbuild_core.errors import CompilationError
from solbuild_core.legacy.shims import shim_output
from solbuild_core.schemas import (
    CompilationResult,
    CompileOptions,
    CompilerInfo,
    LegacyCompilationResult,
    SolcConfig,
)

logger = structlog.get_logger(__name__)

SOLIDITY_EXTENSION = ".sol"


class Compiler:
    """Compile Solidity sources into contract artifacts.

    Args:
        supplier: Compiler supplier collaborator. Defaults to a py-solc-x
            supplier built from the run's ``compilers.solc`` options.

    Example:
        >>> compiler = Compiler()
        >>> result = compiler.run(
        ...     {"contracts/Token.sol": "pragma solidity ^0.8.0; contract Token {}"},
        ...     CompileOptions(),
        ... )
        >>> [artifact.contract_name for artifact in result.contracts]
        ['Token']
    """

    def __init__(self, supplier: CompilerSupplier | None = None) -> None:
        self.supplier = supplier
        self._default_suppliers: dict[SolcConfig, SolcxCompilerSupplier] = {}
        self._log = logger.bind(component="compiler")

    def run(
        self,
        raw_sources: Mapping[str, str],
        options: CompileOptions | None = None,
    ) -> CompilationResult:
        """Compile sources and assemble artifacts.

        Args:
            raw_sources: Original path -> contents.
            options: Compile options. Defaults to CompileOptions().

        Returns:
            CompilationResult with artifacts, source indexes, compiler
            identity and any non-blocking warnings.

        Raises:
            CompilerInvocationError: If the compiler cannot be run or returns
                malformed output.
            CompilationError: If the compiler reports blocking diagnostics.
        """
        options = options or CompileOptions()

        if not raw_sources:
            return CompilationResult()

        collected = collect_sources(raw_sources, options.compilation_targets)

        request = prepare_compiler_input(
            sources=collected.sources,
            targets=collected.targets,
            settings=options.compilers.solc.settings,
        )

        self._log.info(
            "compilation_started",
            source_count=len(collected.sources),
            target_count=len(collected.targets),
            strict=options.strict,
        )

        invocation = invoke_compiler(request, self._get_supplier(options))

        detected = detect_errors(
            invocation.compiler_output.errors,
            strict=options.strict,
            configured_version=options.compilers.solc.version,
            solc_version=invocation.solc_version,
        )

        if detected.warnings and not options.quiet:
            self._log.warning("compilation_warnings", warnings=detected.warnings)

        if detected.errors:
            self._log.error("compilation_failed", solc_version=invocation.solc_version)
            raise CompilationError(detected.errors)

        contracts = process_contracts(
            invocation.compiler_output,
            sources=collected.sources,
            original_source_paths=collected.original_source_paths,
            solc_version=invocation.solc_version,
        )

        self._log.info(
            "compilation_complete",
            solc_version=invocation.solc_version,
            contract_count=len(contracts),
        )

        return CompilationResult(
            contracts=contracts,
            source_indexes=process_sources(
                invocation.compiler_output,
                collected.original_source_paths,
            ),
            compiler_info=CompilerInfo(name="solc", version=invocation.solc_version),
            warnings=detected.warnings,
        )

    def run_legacy(
        self,
        raw_sources: Mapping[str, str],
        options: CompileOptions | None = None,
    ) -> LegacyCompilationResult:
        """Compile sources and return artifacts in the legacy shape."""
        return shim_output(self.run(raw_sources, options))

    def _get_supplier(self, options: CompileOptions) -> CompilerSupplier:
        if self.supplier is not None:
            return self.supplier

        solc_config = options.compilers.solc
        if solc_config not in self._default_suppliers:
            self._default_suppliers[solc_config] = SolcxCompilerSupplier(solc_config)
        return self._default_suppliers[solc_config]


def load_sources(paths: Iterable[Path | str]) -> dict[str, str]:
    """Read Solidity sources from disk.

    Directories are searched recursively for ``.sol`` files. Keys are the
    paths as given (or as found beneath a given directory).

    Args:
        paths: Files and/or directories.

    Returns:
        Original path -> contents, in sorted order per directory.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    sources: dict[str, str] = {}

    for path in map(Path, paths):
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if path.is_dir():
            for source_file in sorted(path.rglob(f"*{SOLIDITY_EXTENSION}")):
                sources[str(source_file)] = source_file.read_text(encoding="utf-8")
        else:
            sources[str(path)] = path.read_text(encoding="utf-8")

    return sources
