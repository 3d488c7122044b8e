"""Operating-system independent source paths.

Solc expects POSIX-style source unit names. Windows paths are converted
(``C:\\a\\b.sol`` -> ``/C/a/b.sol``) and a reverse mapping is kept so
artifacts can report the caller's original path.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CollectedSources:
    """Sources and targets keyed by portable path.

    Attributes:
        sources: Portable path -> contents, in input order.
        targets: Portable paths of the compilation targets.
        original_source_paths: Portable path -> original path.
    """

    sources: dict[str, str]
    targets: list[str]
    original_source_paths: dict[str, str]


def get_portable_source_path(source_path: str) -> str:
    """Return an operating-system independent form of ``source_path``.

    Backslashes become forward slashes, and a drive letter prefix
    (``G:/...``) becomes a leading path segment (``/G/...``). Anything
    else passes through unchanged.

    Example:
        >>> get_portable_source_path("C:\\\\a\\\\b.sol")
        '/C/a/b.sol'
        >>> get_portable_source_path("/already/posix.sol")
        '/already/posix.sol'
    """
    replacement = source_path.replace("\\", "/")

    if len(replacement) >= 2 and replacement[1] == ":":
        replacement = "/" + replacement.replace(":", "", 1)

    return replacement


def collect_sources(
    original_sources: Mapping[str, str],
    original_targets: Iterable[str] = (),
) -> CollectedSources:
    """Collect sources and targets under portable paths.

    Two original paths that normalize to the same portable path collide;
    the later one wins and the collision is logged. Targets with no
    matching source are dropped with a warning.

    Args:
        original_sources: Original path -> contents.
        original_targets: Original paths of the compilation targets.

    Returns:
        CollectedSources with aligned sources, targets and reverse mapping.
    """
    target_set = set(original_targets)
    sources: dict[str, str] = {}
    targets: list[str] = []
    original_source_paths: dict[str, str] = {}

    for original_path, contents in original_sources.items():
        source_path = get_portable_source_path(original_path)

        if source_path in original_source_paths:
            logger.warning(
                "source_path_collision",
                source_path=source_path,
                replaced=original_source_paths[source_path],
                kept=original_path,
            )

        sources[source_path] = contents
        original_source_paths[source_path] = original_path

        if original_path in target_set and source_path not in targets:
            targets.append(source_path)

    for target in target_set.difference(original_sources):
        logger.warning("unknown_compilation_target", target=target)

    return CollectedSources(
        sources=sources,
        targets=targets,
        original_source_paths=original_source_paths,
    )
