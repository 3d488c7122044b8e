"""Solc standard-JSON request construction."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from solbuild_core.schemas import (
    CompilerRequest,
    CompilerSettings,
    OutputSelection,
    SolcSettings,
    SourceContent,
)

AST_SELECTORS: tuple[str, ...] = ("legacyAST", "ast")

CONTRACT_SELECTORS: tuple[str, ...] = (
    "abi",
    "metadata",
    "evm.bytecode.object",
    "evm.bytecode.sourceMap",
    "evm.deployedBytecode.object",
    "evm.deployedBytecode.sourceMap",
    "userdoc",
    "devdoc",
)


def default_selectors() -> dict[str, list[str]]:
    """Return the full selector set: file-level AST plus per-contract output."""
    return {
        "": list(AST_SELECTORS),
        "*": list(CONTRACT_SELECTORS),
    }


def prepare_output_selection(targets: Sequence[str] = ()) -> OutputSelection:
    """Build the ``outputSelection`` setting.

    Without targets every file gets the full selector set. With targets,
    every file still gets its AST (needed to order ABIs and index sources)
    but bytecode, ABI and docs are requested only for the targets.

    Args:
        targets: Portable paths of the compilation targets.

    Returns:
        Output selection mapping.
    """
    if not targets:
        return {"*": default_selectors()}

    selection: OutputSelection = {"*": {"": list(AST_SELECTORS)}}
    for target in targets:
        selection[target] = default_selectors()
    return selection


def prepare_compiler_input(
    sources: Mapping[str, str],
    targets: Sequence[str],
    settings: SolcSettings,
) -> CompilerRequest:
    """Build the complete compiler request.

    Args:
        sources: Portable path -> contents.
        targets: Portable paths of the compilation targets.
        settings: Configured solc settings.

    Returns:
        CompilerRequest ready for serialization.
    """
    return CompilerRequest(
        sources={path: SourceContent(content=content) for path, content in sources.items()},
        settings=CompilerSettings(
            evm_version=settings.evm_version,
            optimizer=settings.optimizer,
            output_selection=prepare_output_selection(targets),
        ),
    )
