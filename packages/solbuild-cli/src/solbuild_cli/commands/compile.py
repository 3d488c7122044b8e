"""solbuild compile command - Compile sources and print artifacts."""

from __future__ import annotations

from pathlib import Path

import click

from solbuild_cli.output import print_json, success, warning


@click.command("compile")
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="Path to solbuild.yaml [default: $SOLBUILD_CONFIG or ./solbuild.yaml]",
)
@click.option(
    "-t",
    "--target",
    "targets",
    multiple=True,
    help="Compile only this file fully (repeatable). Other files are parsed for their AST.",
)
@click.option("--strict", is_flag=True, default=False, help="Treat warnings as errors.")
@click.option("--quiet", is_flag=True, default=False, help="Do not report warnings.")
@click.option(
    "--legacy",
    is_flag=True,
    default=False,
    help="Print artifacts in the legacy shape, keyed by contract name.",
)
def compile_cmd(
    paths: tuple[str, ...],
    config_path: str | None,
    targets: tuple[str, ...],
    strict: bool,
    quiet: bool,
    legacy: bool,
) -> None:
    """Compile Solidity sources and print contract artifacts as JSON.

    Directories are searched recursively for .sol files.

    Examples:

        solbuild compile contracts/

        solbuild compile contracts/ --target contracts/Token.sol

        solbuild compile contracts/Token.sol --strict --legacy
    """
    # Import here to avoid heavy imports at CLI startup
    from solbuild_cli.errors import handle_file_not_found, handle_solbuild_error
    from solbuild_core import (
        Compiler,
        SolbuildError,
        load_sources,
        resolve_options,
        shim_output,
    )

    try:
        options = resolve_options(config_path)
        raw_sources = load_sources(paths)
    except FileNotFoundError as e:
        handle_file_not_found(str(e))
    except SolbuildError as e:
        handle_solbuild_error(e)

    overrides: dict[str, object] = {}
    if targets:
        overrides["compilation_targets"] = [str(Path(t)) for t in targets]
    if strict:
        overrides["strict"] = True
    if quiet:
        overrides["quiet"] = True
    options = options.model_copy(update=overrides)

    # The command reports warnings itself
    pipeline_options = options.model_copy(update={"quiet": True})
    try:
        result = Compiler().run(raw_sources, pipeline_options)
    except SolbuildError as e:
        handle_solbuild_error(e)

    output = shim_output(result) if legacy else result
    print_json(output.to_dict())

    if result.warnings and not options.quiet:
        warning(f"Compilation warnings:\n{result.warnings}")

    contract_count = len(output.contracts)
    success(f"Compiled {contract_count} contract(s) from {len(raw_sources)} file(s)")
