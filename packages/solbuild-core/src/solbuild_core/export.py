"""JSON Schema export functions for solbuild.

Exports JSON Schema Draft 2020-12 documents for the artifact format and
the options file, for downstream validation and IDE autocomplete.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from solbuild_core.schemas import CompileOptions, ContractArtifact

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_BASE_ID = "https://solbuild.dev/schemas"


def export_contract_artifact_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the ContractArtifact JSON Schema.

    Field names follow the serialized artifact (``contractName``,
    ``deployedBytecode``, ...).

    Args:
        output_path: Optional path to write schema file. If provided,
            creates parent directories as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_contract_artifact_schema()
        >>> schema["$id"]
        'https://solbuild.dev/schemas/contract-artifact.schema.json'
    """
    return _export_schema(ContractArtifact, "contract-artifact.schema.json", output_path)


def export_compile_options_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the CompileOptions (solbuild.yaml) JSON Schema.

    Args:
        output_path: Optional path to write schema file.

    Returns:
        Dictionary containing the JSON Schema.
    """
    return _export_schema(CompileOptions, "compile-options.schema.json", output_path)


def _export_schema(
    model: type[BaseModel],
    file_name: str,
    output_path: Path | str | None,
) -> dict[str, Any]:
    schema = model.model_json_schema(by_alias=True, mode="serialization")

    schema["$schema"] = SCHEMA_DIALECT
    schema["$id"] = f"{SCHEMA_BASE_ID}/{file_name}"

    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def _write_schema_file(schema: dict[str, Any], output_path: Path | str) -> None:
    """Write schema to file with pretty formatting."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(schema, indent=2) + "\n")
