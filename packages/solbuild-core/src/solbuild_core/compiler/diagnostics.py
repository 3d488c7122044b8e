"""Classification of compiler diagnostics into warnings and errors."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass

from solbuild_core.schemas import Diagnostic

VERSION_MISMATCH_MARKER = "requires different compiler version"

_PRAGMA_PATTERN = re.compile(r"pragma solidity[^;]*", re.MULTILINE)
_SEMVER_PATTERN = re.compile(r"\d+\.\d+\.\d+")


@dataclass(frozen=True)
class DetectedErrors:
    """Joined diagnostic text per bucket. Empty strings mean none."""

    errors: str
    warnings: str


def detect_errors(
    diagnostics: Sequence[Diagnostic],
    *,
    strict: bool = False,
    configured_version: str | None = None,
    solc_version: str | None = None,
) -> DetectedErrors:
    """Split diagnostics into blocking errors and warnings.

    Severities other than ``"warning"`` are always errors. Warnings are
    errors in strict mode and plain warnings otherwise. Each bucket is the
    formatted messages joined with ``","``.

    When the errors report a pragma/compiler version conflict, a
    remediation note naming both versions is appended.

    Args:
        diagnostics: Diagnostics from the compiler output.
        strict: Treat warnings as errors.
        configured_version: Version from compile options, if any.
        solc_version: Version string reported by the running compiler.

    Returns:
        DetectedErrors with joined error and warning text.
    """
    if strict:
        raw_errors = list(diagnostics)
        raw_warnings: list[Diagnostic] = []
    else:
        raw_errors = [d for d in diagnostics if d.severity != "warning"]
        raw_warnings = [d for d in diagnostics if d.severity == "warning"]

    errors = ",".join(d.formatted_message for d in raw_errors)
    warnings = ",".join(d.formatted_message for d in raw_warnings)

    if VERSION_MISMATCH_MARKER in errors:
        errors += version_mismatch_hint(errors, configured_version, solc_version)

    return DetectedErrors(errors=errors, warnings=warnings)


def version_mismatch_hint(
    errors: str,
    configured_version: str | None,
    solc_version: str | None,
) -> str:
    """Build the remediation note for a pragma/compiler version conflict."""
    pragma_match = _PRAGMA_PATTERN.search(errors)
    contract_version = pragma_match.group(0) if pragma_match else "an incompatible version"

    config_version = configured_version
    if config_version is None and solc_version:
        semver_match = _SEMVER_PATTERN.search(solc_version)
        config_version = semver_match.group(0) if semver_match else solc_version

    eol = os.linesep
    return "".join(
        [
            eol,
            f"Error: solbuild is currently using solc {config_version or 'unknown'}, ",
            f'but one or more of your contracts specify "{contract_version}".',
            eol,
            "Please update compilers.solc.version in your solbuild.yaml or the pragma statement(s).",
        ]
    )
