"""solbuild schema command - Export JSON Schema."""

from __future__ import annotations

from pathlib import Path

import click

from solbuild_cli.output import error, success


@click.group()
def schema() -> None:
    """Export JSON Schema for artifacts and solbuild.yaml.

    **Commands:**

    - `solbuild schema export` - Export artifact and options schemas
    """
    pass


@schema.command("export")
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False),
    default="./schemas",
    help="Output directory [default: ./schemas]",
)
def export_schema(output_dir: str) -> None:
    """Export ContractArtifact and CompileOptions JSON Schemas.

    Examples:

        solbuild schema export

        solbuild schema export --output build/schemas
    """
    output = Path(output_dir)

    try:
        # Import here to avoid heavy imports at CLI startup
        from solbuild_core import export_compile_options_schema, export_contract_artifact_schema

        artifact_path = output / "contract-artifact.schema.json"
        options_path = output / "compile-options.schema.json"

        export_contract_artifact_schema(artifact_path)
        export_compile_options_schema(options_path)

        success(f"Schemas exported to {output}")

    except PermissionError:
        error(f"Cannot write to: {output_dir}")
        raise SystemExit(2) from None
