"""Contract artifact models.

Two artifact shapes are produced:
- ContractArtifact: current shape, one entry per contract in a list.
- LegacyContractArtifact: backward-compatible shape keyed by contract name,
  with snake_case ``contract_name`` and an ``unlinked_binary`` duplicate
  of the creation bytecode.

Both carry an ``artifact_format`` tag (never serialized) so they form the
discriminated union ``AnyArtifact``. Conversion lives in
``solbuild_core.legacy.shims``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_ARTIFACT_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class CompilerInfo(BaseModel):
    """Identity of the compiler that produced an artifact."""

    model_config = _ARTIFACT_CONFIG

    name: str = "solc"
    version: str = Field(..., min_length=1)


def _require_hex_prefix(value: str) -> str:
    if not value.startswith("0x"):
        raise ValueError("bytecode must be 0x-prefixed")
    return value


HexBytecode = Annotated[str, AfterValidator(_require_hex_prefix)]


class ContractArtifact(BaseModel):
    """Assembled artifact for one contract (current shape).

    Attributes:
        contract_name: Contract name as declared in source.
        abi: ABI with functions in source declaration order.
        metadata: Compiler metadata JSON string.
        devdoc: Developer documentation.
        userdoc: User documentation.
        source_path: Original (pre-normalization) path of the defining file.
        source: Contents of the defining file.
        source_map: Creation bytecode source map.
        deployed_source_map: Runtime bytecode source map.
        ast: Compact AST of the defining file.
        legacy_ast: Legacy AST of the defining file.
        bytecode: 0x-prefixed creation bytecode with readable link placeholders.
        deployed_bytecode: 0x-prefixed runtime bytecode with readable link placeholders.
        compiler: Compiler identity.
    """

    model_config = _ARTIFACT_CONFIG

    artifact_format: Literal["current"] = Field(default="current", exclude=True)

    contract_name: str = Field(..., min_length=1)
    abi: list[dict[str, Any]] = Field(default_factory=list)
    metadata: str | None = None
    devdoc: dict[str, Any] | None = None
    userdoc: dict[str, Any] | None = None
    source_path: str
    source: str
    source_map: str | None = None
    deployed_source_map: str | None = None
    ast: dict[str, Any] | None = None
    legacy_ast: dict[str, Any] | None = Field(default=None, alias="legacyAST")
    bytecode: HexBytecode
    deployed_bytecode: HexBytecode
    compiler: CompilerInfo

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready artifact with wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class LegacyContractArtifact(BaseModel):
    """Artifact in the pre-migration shape.

    Identical to ContractArtifact except ``contract_name`` keeps its
    snake_case key and ``unlinked_binary`` duplicates ``bytecode``.
    """

    model_config = _ARTIFACT_CONFIG

    artifact_format: Literal["legacy"] = Field(default="legacy", exclude=True)

    contract_name: str = Field(..., min_length=1, alias="contract_name")
    source_path: str
    source: str
    source_map: str | None = None
    deployed_source_map: str | None = None
    legacy_ast: dict[str, Any] | None = Field(default=None, alias="legacyAST")
    ast: dict[str, Any] | None = None
    abi: list[dict[str, Any]] = Field(default_factory=list)
    metadata: str | None = None
    bytecode: HexBytecode
    deployed_bytecode: HexBytecode
    unlinked_binary: HexBytecode = Field(..., alias="unlinked_binary")
    compiler: CompilerInfo
    devdoc: dict[str, Any] | None = None
    userdoc: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready artifact with legacy field names."""
        return self.model_dump(mode="json", by_alias=True)


AnyArtifact = Annotated[
    Union[ContractArtifact, LegacyContractArtifact],
    Field(discriminator="artifact_format"),
]


class CompilationResult(BaseModel):
    """Successful result of one pipeline run.

    Attributes:
        contracts: One artifact per contract with EVM output.
        source_indexes: Original source path per compiler file id.
        compiler_info: Compiler identity, None when no sources were given.
        warnings: Joined non-blocking warning messages.
    """

    model_config = _ARTIFACT_CONFIG

    contracts: list[ContractArtifact] = Field(default_factory=list)
    source_indexes: list[str | None] = Field(default_factory=list)
    compiler_info: CompilerInfo | None = None
    warnings: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready result with wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class LegacyCompilationResult(BaseModel):
    """Result reshaped for consumers of the legacy artifact format."""

    model_config = _ARTIFACT_CONFIG

    contracts: dict[str, LegacyContractArtifact] = Field(default_factory=dict)
    source_indexes: list[str | None] = Field(default_factory=list)
    compiler_info: CompilerInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready result with legacy field names."""
        return self.model_dump(mode="json", by_alias=True)
