"""Tests for the solbuild schema command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from solbuild_cli.commands.schema import export_schema, schema


class TestSchemaGroup:
    """Tests for schema command group."""

    def test_schema_help(self, cli_runner: CliRunner) -> None:
        """Test schema --help shows subcommands."""
        result = cli_runner.invoke(schema, ["--help"])
        assert result.exit_code == 0
        assert "export" in result.output.lower()


class TestSchemaExport:
    """Tests for schema export command."""

    def test_export_creates_files(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Both schema files are written to the output directory."""
        result = cli_runner.invoke(export_schema, ["--output", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "contract-artifact.schema.json").exists()
        assert (tmp_path / "compile-options.schema.json").exists()

    @pytest.mark.parametrize(
        "file_name",
        ["contract-artifact.schema.json", "compile-options.schema.json"],
    )
    def test_export_creates_json_schema(
        self, cli_runner: CliRunner, tmp_path: Path, file_name: str
    ) -> None:
        """Exported files are JSON Schema documents."""
        cli_runner.invoke(export_schema, ["--output", str(tmp_path)])

        content = json.loads((tmp_path / file_name).read_text())
        assert "json-schema.org" in content["$schema"]
        assert content["$id"].endswith(file_name)
        assert "properties" in content

    def test_export_creates_directory_if_needed(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Nested output directories are created."""
        output_dir = tmp_path / "nested" / "dir"
        result = cli_runner.invoke(export_schema, ["--output", str(output_dir)])

        assert result.exit_code == 0
        assert (output_dir / "contract-artifact.schema.json").exists()

    def test_export_default_directory(self, isolated_runner: CliRunner) -> None:
        """Without --output, schemas land in ./schemas."""
        result = isolated_runner.invoke(export_schema, [])

        assert result.exit_code == 0
        assert Path("schemas/contract-artifact.schema.json").exists()
        assert "Schemas exported to schemas" in result.stderr

    def test_export_permission_error(
        self,
        cli_runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """An unwritable directory exits with the system error code."""

        def _deny(output_path: object = None) -> None:
            raise PermissionError("denied")

        monkeypatch.setattr("solbuild_core.export_contract_artifact_schema", _deny)

        result = cli_runner.invoke(export_schema, ["--output", str(tmp_path)])

        assert result.exit_code == 2
        assert "Cannot write to" in result.stderr
