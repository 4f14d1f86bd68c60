"""
Zillow CLI - call web service operations from the shell.
"""

import json

import click
import httpx

from zillow import __version__
from zillow.api.base import ZillowClient
from zillow.api.exceptions import InvalidMethodError, MissingZwsIdError
from zillow.api.methods import ZillowMethod
from zillow.util.log import configure_logging, get_logger, shutdown_logging


def _parse_params(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    """Turn repeated ``key=value`` options into a dict (last one wins)."""
    params: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"'{item}' is not in key=value form")
        params[key] = value
    return params


@click.group()
@click.version_option(version=__version__, prog_name="zillow")
def cli():
    """Zillow web service CLI tool."""
    pass


@cli.command("methods")
def cmd_methods():
    """List the supported operations."""
    for method in ZillowMethod:
        click.echo(method.value)


@cli.command("call")
@click.argument("method")
@click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    callback=_parse_params,
    help="Query parameter in key=value form. Can be specified multiple times. e.g., -p zpid=48749425",
)
@click.option(
    "--zws-id",
    envvar="ZWSID",
    default=None,
    help="Zillow Web Services ID (default: $ZWSID)",
)
@click.option(
    "--url",
    default=None,
    help="Base URL of the web service (default: http://www.zillow.com/webservice/)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log requests and responses",
)
@click.pass_context
def cmd_call(
    ctx: click.Context,
    method: str,
    params: dict[str, str],
    zws_id: str | None,
    url: str | None,
    verbose: bool,
):
    """Call METHOD and print the response code, message and data."""
    configure_logging(level="DEBUG" if verbose else "WARNING", intercept_transport=verbose)
    try:
        with ZillowClient(zws_id, url) as client:
            client.set_logger(get_logger("zillow-cli"))
            response = client.execute(method, params)
    except (InvalidMethodError, MissingZwsIdError) as e:
        raise click.UsageError(str(e)) from e
    except httpx.RequestError as e:
        raise click.ClickException(f"Request failed: {e}") from e
    finally:
        shutdown_logging()

    click.echo(f"code: {response.code}")
    click.echo(f"message: {response.message}")
    if response.data is not None:
        click.echo(json.dumps(response.data, indent=2, ensure_ascii=False))

    if not response.is_successful():
        ctx.exit(1)


def main():
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
