"""Solc standard-JSON request models.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from solbuild_core.schemas.compile_options import OptimizerSettings

# Output selection: path-or-"*" -> contract-or-"" -> selectors
OutputSelection = dict[str, dict[str, list[str]]]


class SourceContent(BaseModel):
    """Inline source content for one file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    content: str


class CompilerSettings(BaseModel):
    """Settings section of the compiler request.

    Attributes:
        evm_version: Target EVM version, omitted on the wire when None.
        optimizer: Optimizer settings.
        output_selection: Requested outputs per file and contract.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    evm_version: str | None = None
    optimizer: OptimizerSettings = Field(default_factory=OptimizerSettings)
    output_selection: OutputSelection


class CompilerRequest(BaseModel):
    """Complete solc standard-JSON request.

    Example:
        >>> request = CompilerRequest(
        ...     sources={"/C/a.sol": SourceContent(content="contract A {}")},
        ...     settings=CompilerSettings(output_selection={"*": {"": ["ast"]}}),
        ... )
        >>> request.to_json()[:23]
        '{"language":"Solidity",'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: Literal["Solidity"] = "Solidity"
    sources: dict[str, SourceContent]
    settings: CompilerSettings

    def to_json(self) -> str:
        """Serialize to the JSON string fed to the compiler."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
