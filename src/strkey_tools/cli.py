"""Command line interface to mux, demux and dump strkey accounts."""
import logging
import sys
import typing as t

import click

from strkey_tools import accounts
from strkey_tools.strkeys import encoding, errors
from strkey_tools.strkeys.constants import VersionByte

logger = logging.getLogger("strkey_tools.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StrkeyToolsGroup(click.Group):
    """Command group exiting with status 1 on usage errors instead of click's default 2."""

    def main(self, *args: t.Any, **kwargs: t.Any) -> t.Any:
        standalone_mode = kwargs.pop("standalone_mode", True)
        try:
            rv = super().main(*args, standalone_mode=False, **kwargs)
        except click.ClickException as exc:
            exc.show()
            rv = 1
        except click.Abort:
            click.echo("Aborted!", err=True)
            rv = 1
        if not standalone_mode:
            return rv
        sys.exit(rv if isinstance(rv, int) else 0)


def _fail(ctx: click.Context, message: str, exc: Exception) -> t.NoReturn:
    logger.debug("command %s failed", ctx.info_name, exc_info=exc)
    click.echo(f"{ctx.find_root().info_name}: {message}", err=True)
    ctx.exit(1)


@click.group(
    cls=StrkeyToolsGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--log-level",
    envvar="STRKEY_TOOLS_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level, also read from STRKEY_TOOLS_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Encode and decode strkey ed25519 accounts and muxed accounts."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)


@cli.command("help")
@click.pass_context
def help_(ctx: click.Context) -> None:
    """Show usage and exit."""
    click.echo(ctx.find_root().get_help())


@cli.command()
@click.argument("routing_id", metavar="ID")
@click.argument("public_key")
@click.pass_context
def mux(ctx: click.Context, routing_id: str, public_key: str) -> None:
    """Print the muxed account routing ID to ed25519 PUBLIC_KEY."""
    try:
        id = accounts.parse_uint64(routing_id)
    except ValueError as exc:
        _fail(ctx, f"can't parse {routing_id!r} as integer: {exc}", exc)
    try:
        muxed = accounts.mux(id, public_key)
    except errors.StrkeyError as exc:
        _fail(ctx, f"can't parse {public_key!r} as ed25519 public key", exc)
    click.echo(muxed)


@cli.command()
@click.argument("muxed_account")
@click.pass_context
def demux(ctx: click.Context, muxed_account: str) -> None:
    """Print the routing id and ed25519 public key of MUXED_ACCOUNT."""
    try:
        id, public_key = accounts.demux(muxed_account)
    except errors.StrkeyError as exc:
        _fail(ctx, f"can't parse {muxed_account!r} as muxed ed25519 account ID", exc)
    click.echo(f"{id} {public_key}")


@cli.command()
@click.argument("strkey")
@click.pass_context
def dump(ctx: click.Context, strkey: str) -> None:
    """Print the XDR bytes of any STRKEY.

    Muxed accounts are demuxed first.
    """
    try:
        payload, version = encoding.decode(strkey)
    except errors.StrkeyError as exc:
        _fail(ctx, f"can't parse {strkey!r} as strkey: {exc}", exc)
    if version == VersionByte.MUXED:
        id, public_key = accounts.split_muxed_payload(payload)
        click.echo(f"{id} {public_key}")
    click.echo(accounts.format_dump(accounts.dump_payload(payload, version)))


def main() -> None:
    cli(prog_name="strkey-tools")
