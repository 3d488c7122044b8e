"""Compiler invocation.

The pipeline depends only on two narrow collaborator contracts:
- CompilerSupplier.load() returns a LoadedCompiler
- LoadedCompiler.compile(input_json) maps a standard-JSON request string
  to a standard-JSON response string, synchronously

SolcxCompilerSupplier is the default supplier, backed by py-solc-x.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import structlog
from pydantic import ValidationError
from solcx import get_installed_solc_versions, get_solc_version, install_solc
from solcx.install import get_executable
from solcx.wrapper import get_solc_version as get_version
from solcx.wrapper import solc_wrapper

from solbuild_core.errors import CompilerInvocationError, SolbuildError
from solbuild_core.schemas import CompilerOutput, CompilerRequest, SolcConfig

logger = structlog.get_logger(__name__)


class LoadedCompiler(Protocol):
    """A compiler instance ready to accept standard-JSON requests."""

    def version(self) -> str:
        """Return the compiler's version string."""
        ...

    def compile(self, input_json: str) -> str:
        """Compile a standard-JSON request string, returning the response string."""
        ...


class CompilerSupplier(Protocol):
    """Acquires and loads a compiler. May cache instances across calls."""

    def load(self) -> LoadedCompiler:
        """Return a loaded compiler."""
        ...


@dataclass(frozen=True)
class InvocationResult:
    """Parsed compiler response and the version that produced it."""

    compiler_output: CompilerOutput
    solc_version: str


def invoke_compiler(request: CompilerRequest, supplier: CompilerSupplier) -> InvocationResult:
    """Load the compiler, run the request and parse the response.

    Args:
        request: Compiler request.
        supplier: Compiler supplier collaborator.

    Returns:
        InvocationResult with the parsed output and compiler version.

    Raises:
        CompilerInvocationError: If loading or calling the compiler fails,
            or its response is not a valid standard-JSON document.
    """
    try:
        compiler = supplier.load()
        solc_version = compiler.version()
        output_string = compiler.compile(request.to_json())
    except SolbuildError:
        raise
    except Exception as e:
        raise CompilerInvocationError(
            "Solidity compiler invocation failed",
            internal_details=f"{type(e).__name__}: {e}",
        ) from e

    logger.debug(
        "compiler_invoked",
        solc_version=solc_version,
        source_count=len(request.sources),
    )

    try:
        compiler_output = CompilerOutput.model_validate_json(output_string)
    except ValidationError as e:
        raise CompilerInvocationError(
            "Solidity compiler returned malformed output",
            internal_details=str(e),
        ) from e

    return InvocationResult(compiler_output=compiler_output, solc_version=solc_version)


class SolcxCompiler:
    """A solc binary managed by py-solc-x, driven in ``--standard-json`` mode."""

    def __init__(self, solc_binary: str, solc_version: str) -> None:
        self.solc_binary = solc_binary
        self._version = solc_version

    def version(self) -> str:
        return self._version

    def compile(self, input_json: str) -> str:
        stdout, _stderr, _command, _proc = solc_wrapper(
            solc_binary=self.solc_binary,
            stdin=input_json,
            standard_json=True,
        )
        return stdout


class SolcxCompilerSupplier:
    """Supply solc binaries through py-solc-x.

    Uses the configured version, installing it when ``install`` is set,
    or the active py-solc-x version when none is configured. Loaded
    compilers report the full version of their binary, commit hash
    included, and are cached per version for the lifetime of the supplier.

    Example:
        >>> supplier = SolcxCompilerSupplier(SolcConfig(version="0.8.20", install=True))
        >>> compiler = supplier.load()
        >>> compiler.version()
        '0.8.20+commit.a1b79de6'
    """

    def __init__(self, config: SolcConfig | None = None) -> None:
        self.config = config or SolcConfig()
        self._cache: dict[str, SolcxCompiler] = {}
        self._log = logger.bind(component="solcx_supplier")

    def load(self) -> SolcxCompiler:
        version = self._resolve_version()

        if version not in self._cache:
            binary = get_executable(version)
            reported = str(get_version(binary, with_commit_hash=True))
            self._log.info("solc_loaded", solc_version=reported, solc_binary=str(binary))
            self._cache[version] = SolcxCompiler(str(binary), reported)

        return self._cache[version]

    def _resolve_version(self) -> str:
        configured = self.config.version
        if configured is None:
            return str(get_solc_version())

        installed = {str(v) for v in get_installed_solc_versions()}
        if configured not in installed:
            if not self.config.install:
                raise CompilerInvocationError(
                    f"solc {configured} is not installed. "
                    "Set compilers.solc.install to install it automatically."
                )
            self._log.info("solc_installing", solc_version=configured)
            install_solc(configured)

        return configured
