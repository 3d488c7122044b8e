"""Solc standard-JSON response models.

Only the keys consumed by artifact assembly are modeled. Unknown keys
(gas estimates, IR, future additions) are ignored rather than rejected, so
newer compilers keep working.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_RESPONSE_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    populate_by_name=True,
)


class LinkReference(BaseModel):
    """One unresolved library slot inside bytecode.

    Attributes:
        start: Byte offset of the slot.
        length: Slot width in bytes (always 20 for addresses).
    """

    model_config = _RESPONSE_CONFIG

    start: int = Field(..., ge=0)
    length: int = Field(default=20, ge=0)


# source path -> library name -> slots
LinkReferences = dict[str, dict[str, list[LinkReference]]]


class BytecodeOutput(BaseModel):
    """Bytecode section of the EVM output.

    ``object`` is unprefixed hex as emitted by the compiler, with library
    slots still holding the compiler's own placeholders.
    """

    model_config = _RESPONSE_CONFIG

    object: str = ""
    source_map: str | None = None
    link_references: LinkReferences = Field(default_factory=dict)


class EvmOutput(BaseModel):
    """EVM section of a contract's output."""

    model_config = _RESPONSE_CONFIG

    bytecode: BytecodeOutput = Field(default_factory=BytecodeOutput)
    deployed_bytecode: BytecodeOutput = Field(default_factory=BytecodeOutput)


class ContractOutput(BaseModel):
    """Compiler output for a single contract.

    Attributes:
        abi: ABI entries in compiler order.
        metadata: Compiler metadata JSON string.
        devdoc: Developer documentation.
        userdoc: User documentation.
        evm: EVM output, or None when the compiler produced none
            (interfaces, or files outside the compilation targets).
    """

    model_config = _RESPONSE_CONFIG

    abi: list[dict[str, Any]] = Field(default_factory=list)
    metadata: str | None = None
    devdoc: dict[str, Any] | None = None
    userdoc: dict[str, Any] | None = None
    evm: EvmOutput | None = None

    @field_validator("evm", mode="before")
    @classmethod
    def empty_evm_is_none(cls, value: Any) -> Any:
        """Treat an empty ``evm`` object as absent."""
        return value or None


class SourceOutput(BaseModel):
    """Per-file compiler output."""

    model_config = _RESPONSE_CONFIG

    id: int = Field(..., ge=0)
    ast: dict[str, Any] | None = None
    legacy_ast: dict[str, Any] | None = Field(default=None, alias="legacyAST")


class Diagnostic(BaseModel):
    """A compiler error or warning.

    Attributes:
        severity: "error", "warning" or "info".
        formatted_message: Message with source location, as printed by solc.
    """

    model_config = _RESPONSE_CONFIG

    severity: str = "error"
    formatted_message: str = ""
    message: str | None = None
    type: str | None = None
    component: str | None = None


class CompilerOutput(BaseModel):
    """Complete solc standard-JSON response."""

    model_config = _RESPONSE_CONFIG

    sources: dict[str, SourceOutput] = Field(default_factory=dict)
    contracts: dict[str, dict[str, ContractOutput]] = Field(default_factory=dict)
    errors: list[Diagnostic] = Field(default_factory=list)
