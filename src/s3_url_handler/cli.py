"""Command-line interface for s3-url-handler.

Commands:
    - fetch: Download the object behind an s3 URL
    - credentials: Show which credential source would be used
"""

import shutil
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .credentials import get_default_resolver
from .protocol import open_s3_url

app = typer.Typer(
    name="s3-url-handler",
    help="Fetch s3:// URLs using automatically discovered AWS credentials.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-url-handler {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3-URL-Handler: read s3://<host>/<bucket>/<key> URLs through urllib.
    """
    pass


@app.command("fetch")
def fetch_cmd(
    url: Annotated[str, typer.Argument(help="s3 URL to fetch")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """
    Fetch an object and write its bytes to a file or stdout.

    Examples:
        s3-url-handler fetch s3://s3-eu-west-1.amazonaws.com/bucket/lib.jar -o lib.jar
    """
    try:
        with open_s3_url(url) as response:
            if output is None:
                shutil.copyfileobj(response, sys.stdout.buffer)
                sys.stdout.buffer.flush()
            else:
                with open(output, "wb") as f:
                    shutil.copyfileobj(response, f)
                typer.echo(f"Saved {url} to {output}", err=True)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("credentials")
def credentials_cmd() -> None:
    """
    Resolve credentials and show where they came from.

    Secrets are never printed; the access key id is masked.
    """
    resolver = get_default_resolver()
    client = resolver.resolve()

    if client is None:
        typer.echo("✗ No credentials found. Searched:", err=True)
        for source in resolver.sources:
            typer.echo(f"  - {source.describe()}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Source: {client.source}")
    typer.echo(f"Region: {client.region}")
    typer.echo(f"Access key id: {client.credentials.masked_access_key_id}")


if __name__ == "__main__":
    app()
