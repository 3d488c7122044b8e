"""Unit tests for CompileOptions."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from solbuild_core.schemas import CompileOptions, OptimizerSettings, SolcConfig


class TestCompileOptions:
    """Tests for CompileOptions defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults compile everything, non-strict, with the active solc."""
        options = CompileOptions()

        assert options.compilation_targets == []
        assert options.strict is False
        assert options.quiet is False
        assert options.compilers.solc.version is None
        assert options.compilers.solc.install is False
        assert options.compilers.solc.settings.evm_version is None
        assert options.compilers.solc.settings.optimizer == OptimizerSettings()

    @pytest.mark.parametrize("version", ["0.8", "^0.8.0", "latest", "0.8.20+commit.a1b79de6"])
    def test_version_must_be_exact(self, version: str) -> None:
        """Only exact x.y.z versions are accepted."""
        with pytest.raises(ValidationError):
            SolcConfig(version=version)

    def test_optimizer_runs_positive(self) -> None:
        """Optimizer runs must be at least 1."""
        with pytest.raises(ValidationError):
            OptimizerSettings(runs=0)

    def test_unknown_keys_rejected(self) -> None:
        """Typos in the options file are caught."""
        with pytest.raises(ValidationError):
            CompileOptions.model_validate({"stritc": True})

    def test_solc_config_is_hashable(self) -> None:
        """Equal solc configurations hash equal."""
        assert hash(SolcConfig(version="0.8.20")) == hash(SolcConfig(version="0.8.20"))


class TestCompileOptionsFromYaml:
    """Tests for CompileOptions.from_yaml()."""

    def test_loads_full_file(self, tmp_path: Path) -> None:
        """All sections are read."""
        path = tmp_path / "solbuild.yaml"
        path.write_text(
            """
compilation_targets:
  - contracts/Token.sol
strict: true
compilers:
  solc:
    version: "0.8.20"
    install: true
    settings:
      evm_version: paris
      optimizer:
        enabled: true
        runs: 999
"""
        )

        options = CompileOptions.from_yaml(path)

        assert options.compilation_targets == ["contracts/Token.sol"]
        assert options.strict is True
        assert options.compilers.solc.version == "0.8.20"
        assert options.compilers.solc.install is True
        assert options.compilers.solc.settings.evm_version == "paris"
        assert options.compilers.solc.settings.optimizer.runs == 999

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty file is treated as no options."""
        path = tmp_path / "solbuild.yaml"
        path.write_text("")
        assert CompileOptions.from_yaml(path) == CompileOptions()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            CompileOptions.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Broken YAML syntax surfaces the parser error."""
        path = tmp_path / "solbuild.yaml"
        path.write_text("strict: [unclosed")
        with pytest.raises(yaml.YAMLError):
            CompileOptions.from_yaml(path)
