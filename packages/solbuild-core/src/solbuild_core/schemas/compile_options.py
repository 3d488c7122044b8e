"""Compile options model.

Options consumed by a single pipeline run: which files are compilation
targets, strict/quiet policy, and the solc version and settings forwarded
into the compiler request.

Example solbuild.yaml:

    compilation_targets:
      - contracts/Token.sol
    strict: false
    compilers:
      solc:
        version: "0.8.20"
        settings:
          evm_version: paris
          optimizer:
            enabled: true
            runs: 200
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


class OptimizerSettings(BaseModel):
    """Solc optimizer settings forwarded verbatim into the request.

    Attributes:
        enabled: Whether the optimizer runs.
        runs: Expected number of contract runs the optimizer tunes for.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = Field(default=False, description="Enable the solc optimizer")
    runs: int = Field(default=200, ge=1, description="Optimizer runs parameter")


class SolcSettings(BaseModel):
    """Compiler settings section of the request.

    Attributes:
        evm_version: Target EVM version (e.g., "paris"). Omitted from the
            request when unset so solc picks its default.
        optimizer: Optimizer settings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    evm_version: str | None = Field(default=None, description="Target EVM version")
    optimizer: OptimizerSettings = Field(
        default_factory=OptimizerSettings,
        description="Optimizer settings",
    )


class SolcConfig(BaseModel):
    """Solc selection and settings.

    Attributes:
        version: Configured solc version (e.g., "0.8.20"). None uses the
            compiler supplier's active version.
        install: Install the configured version on demand if missing.
        settings: Settings forwarded into the compiler request.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str | None = Field(
        default=None,
        pattern=r"^\d+\.\d+\.\d+$",
        description="Configured solc version",
    )
    install: bool = Field(default=False, description="Install missing solc versions")
    settings: SolcSettings = Field(
        default_factory=SolcSettings,
        description="Compiler settings",
    )


class CompilersConfig(BaseModel):
    """Per-compiler configuration. Only solc is supported."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    solc: SolcConfig = Field(default_factory=SolcConfig, description="Solc configuration")


class CompileOptions(BaseModel):
    """Options for one compilation run.

    Attributes:
        compilation_targets: Original source paths that need full output.
            Empty means every source is a target.
        strict: Treat warnings as blocking errors.
        quiet: Suppress warning logging. Warnings are still returned.
        compilers: Compiler configuration.

    Example:
        >>> options = CompileOptions(strict=True)
        >>> options.compilers.solc.settings.optimizer.runs
        200
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    compilation_targets: list[str] = Field(
        default_factory=list,
        description="Original paths of files to compile fully",
    )
    strict: bool = Field(default=False, description="Treat warnings as errors")
    quiet: bool = Field(default=False, description="Suppress warning output")
    compilers: CompilersConfig = Field(
        default_factory=CompilersConfig,
        description="Compiler configuration",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> CompileOptions:
        """Load and validate CompileOptions from a YAML file.

        Args:
            path: Path to solbuild.yaml.

        Returns:
            Validated CompileOptions instance.

        Raises:
            FileNotFoundError: If file doesn't exist.
            yaml.YAMLError: If YAML syntax is invalid.
            ValidationError: If schema validation fails.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r") as f:
            data: dict[str, Any] | None = yaml.safe_load(f)

        return cls.model_validate(data or {})
