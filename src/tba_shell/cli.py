# src/tba_shell/cli.py
from __future__ import annotations

import click

from .data.tba_api import TbaApi
from .shell.command import TbaShell

MAIN_HELP = """
Syntax: <Command>
<Command>:
\t?\t\t\t\t- Print the short help message.
\thelp\t\t\t\t- Print the long help message (with raw request syntax).
\tquit\t\t\t\t- Exit this program.
\texit\t\t\t\t- Exit this program.
\tlist [<Options>] <Model>\t- Retrieve and list model data.
\tget <Request>\t\t\t- Send raw <Request> to the web server.
"""


def _help_text(shell: TbaShell, long_version: bool) -> str:
    return MAIN_HELP + shell.command_help(long_version)


def _shell(ctx: click.Context) -> TbaShell:
    if ctx.obj is None:
        ctx.obj = TbaShell(TbaApi.from_settings())
    return ctx.obj


def _run_batch(ctx: click.Context, tokens: list[str]) -> None:
    res = _shell(ctx).process_command(tokens)
    if not res.ok:
        click.echo(res.error)
        ctx.exit(1)


def interactive(shell: TbaShell) -> None:
    """Prompt for commands until quit/exit (or end of input)."""
    while True:
        try:
            command = click.prompt("\nTBA Command (? for help)", default="", show_default=False).strip()
        except click.Abort:
            click.echo()
            break
        if command in ("quit", "exit"):
            click.echo("Program terminated.")
            break
        if not command:
            continue
        if command == "?":
            click.echo(_help_text(shell, False))
        elif command == "help":
            click.echo(_help_text(shell, True))
        else:
            res = shell.process_command(command.split())
            if not res.ok:
                click.echo(res.error)


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx: click.Context) -> None:
    """TBA Shell: query The Blue Alliance API.

    Without a command, starts the interactive prompt.
    """
    if ctx.invoked_subcommand is None:
        interactive(_shell(ctx))


# --------------------- get --------------------- #
@main.command("get")
@click.argument("request")
@click.pass_context
def get_cmd(ctx: click.Context, request: str) -> None:
    """Send a raw REQUEST path (e.g. team/frc492/robots)."""
    _run_batch(ctx, ["get", request])


# --------------------- list --------------------- #
@main.command("list", context_settings={"ignore_unknown_options": True})
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def list_cmd(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """List model data: [-0|-1|-2] <Model>[?<Filters>]."""
    _run_batch(ctx, ["list", *tokens])


# --------------------- help --------------------- #
@main.command("help")
@click.option("--long", "long_version", is_flag=True, help="Include the raw request syntax.")
@click.pass_context
def help_cmd(ctx: click.Context, long_version: bool) -> None:
    """Print the command and model syntax."""
    click.echo(_help_text(_shell(ctx), long_version))


if __name__ == "__main__":
    main()
