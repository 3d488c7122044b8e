"""ABI ordering by source declaration order."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def order_abi(
    abi: Sequence[Mapping[str, Any]],
    contract_name: str,
    ast: Mapping[str, Any] | None,
) -> list[dict[str, Any]]:
    """Reorder ABI entries so functions follow source declaration order.

    Entries whose name matches a ``FunctionDefinition`` of the contract move
    to the end, sorted by declaration index. Everything else (events,
    errors, constructor, fallback, unmatched names) keeps its original
    relative order at the front. Overloads share a name, so they keep their
    ABI order relative to each other.

    The ABI is returned unchanged when the AST has no matching
    ``ContractDefinition`` or that definition has no child nodes.

    Args:
        abi: ABI entries as emitted by the compiler.
        contract_name: Name of the contract the ABI belongs to.
        ast: Compact AST of the file defining the contract.

    Returns:
        Reordered ABI entries.
    """
    # A file can define several contracts; match by name.
    contract_definition = next(
        (
            node
            for node in (ast or {}).get("nodes") or []
            if node.get("nodeType") == "ContractDefinition" and node.get("name") == contract_name
        ),
        None,
    )

    if not contract_definition or not contract_definition.get("nodes"):
        return [dict(entry) for entry in abi]

    ordered_function_names = [
        node.get("name")
        for node in contract_definition["nodes"]
        if node.get("nodeType") == "FunctionDefinition"
    ]

    function_indexes: dict[str, int] = {}
    for index, function_name in enumerate(ordered_function_names):
        function_indexes[function_name] = index

    unmatched = [dict(entry) for entry in abi if entry.get("name") not in function_indexes]
    functions = sorted(
        (dict(entry) for entry in abi if entry.get("name") in function_indexes),
        key=lambda entry: function_indexes[entry["name"]],
    )

    return unmatched + functions
