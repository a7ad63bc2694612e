import logging

import click

from skillsync.cli.output import user_output
from skillsync.context import create_context
from skillsync.error_boundary import cli_error_boundary
from skillsync.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Commands import skillsync.cli.output, so they are registered on first use
_commands_registered = False


class LazyGroup(click.Group):
    """Click Group that registers its commands on first lookup."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        _register_commands()
        return super().list_commands(ctx)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        _register_commands()
        return super().get_command(ctx, cmd_name)


@click.command(cls=LazyGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Log debug output, including tracebacks")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Install and keep in sync skill guides for AI coding agents."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Tests inject a prepared context through CliRunner.invoke(obj=...)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)

    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())


def _register_commands() -> None:
    """Register all commands with the CLI group."""
    global _commands_registered

    if _commands_registered:
        return

    from skillsync.commands.add import add
    from skillsync.commands.cache import cache_group
    from skillsync.commands.config import config_group
    from skillsync.commands.diff import diff
    from skillsync.commands.doctor import doctor
    from skillsync.commands.init import init
    from skillsync.commands.info import info
    from skillsync.commands.list import list_cmd
    from skillsync.commands.remove import remove
    from skillsync.commands.search import search
    from skillsync.commands.update import update

    cli.add_command(init)
    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(list_cmd)
    cli.add_command(search)
    cli.add_command(info)
    cli.add_command(doctor)
    cli.add_command(update)
    cli.add_command(diff)

    # Register command groups
    cli.add_command(config_group)
    cli.add_command(cache_group)

    _commands_registered = True


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
