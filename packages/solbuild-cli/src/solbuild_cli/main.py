"""CLI entry point for solbuild.

The main group loads subcommands lazily so ``solbuild --help`` does not
import solc tooling.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from solbuild_cli import __version__
from solbuild_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that loads commands lazily.

    Attributes:
        lazy_subcommands: Mapping of command names to "module.attribute" paths.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands.keys())
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        if cmd_name not in self.lazy_subcommands:
            return None

        module_path = self.lazy_subcommands[cmd_name]
        module_name, attr_name = module_path.rsplit(".", 1)
        mod = importlib.import_module(module_name)
        return getattr(mod, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "compile": "solbuild_cli.commands.compile.compile_cmd",
    "schema": "solbuild_cli.commands.schema.schema",
}


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="solbuild")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log level for diagnostics written to stderr [default: WARNING]",
)
def cli(log_level: str) -> None:
    """solbuild - Solidity compilation and artifact assembly.

    Compile Solidity sources with solc and print normalized contract
    artifacts.

    **Getting Started:**

    - `solbuild compile contracts/` - Compile every contract
    - `solbuild compile contracts/ --legacy` - Print legacy-shaped artifacts
    - `solbuild schema export` - Export artifact JSON Schema
    """
    from solbuild_core.observability import configure_logging

    configure_logging(log_level=log_level, json_format=False)


if __name__ == "__main__":
    cli()
