"""Library link placeholder rewriting.

Unlinked bytecode holds a 20-byte (40 hex character) slot for every
library address. Each slot is overwritten with a readable, fixed-width
token (``__MathLib_____...``) that downstream linkers recognize.

Every splice replaces exactly 40 characters with exactly 40 characters,
so the byte offsets reported by the compiler stay valid regardless of the
order in which references are processed.
"""

from __future__ import annotations

from collections.abc import Iterable

from solbuild_core.errors import LinkReferenceError
from solbuild_core.schemas import LinkReference, LinkReferences

PLACEHOLDER_WIDTH = 40


def link_placeholder(library_name: str) -> str:
    """Return the 40-character placeholder token for ``library_name``.

    Example:
        >>> link_placeholder("MathLib")
        '__MathLib_______________________________'
    """
    return ("__" + library_name)[:PLACEHOLDER_WIDTH].ljust(PLACEHOLDER_WIDTH, "_")


def replace_link_references(
    bytecode: str,
    link_references: Iterable[LinkReference],
    library_name: str,
) -> str:
    """Splice the placeholder for one library into every one of its slots.

    Args:
        bytecode: Unprefixed hex bytecode.
        link_references: Slots of ``library_name`` (byte offsets).
        library_name: Library the slots belong to.

    Returns:
        Bytecode with every slot overwritten.

    Raises:
        LinkReferenceError: If a slot extends past the end of the bytecode.
    """
    link_id = link_placeholder(library_name)

    for ref in link_references:
        # byte offset -> hex character offset
        start = ref.start * 2
        if start + PLACEHOLDER_WIDTH > len(bytecode):
            raise LinkReferenceError(library_name, ref.start, len(bytecode))

        bytecode = bytecode[:start] + link_id + bytecode[start + PLACEHOLDER_WIDTH :]

    return bytecode


def replace_all_link_references(bytecode: str, link_references: LinkReferences | None) -> str:
    """Rewrite every library slot and prefix the result with ``0x``.

    Args:
        bytecode: Unprefixed hex bytecode as emitted by the compiler.
        link_references: Slots grouped by defining file, then library name.

    Returns:
        0x-prefixed bytecode of unchanged length.
    """
    library_link_references = [
        (library_name, links)
        for file_links in (link_references or {}).values()
        for library_name, links in file_links.items()
    ]

    for library_name, links in library_link_references:
        bytecode = replace_link_references(bytecode, links, library_name)

    return f"0x{bytecode}"
