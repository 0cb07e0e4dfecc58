import logging

import typer

from bitbucket_rest.config import AppConfig
from bitbucket_rest.exceptions import BitbucketAuthenticationError
from bitbucket_rest.services.bitbucket_client import BitbucketClient

app = typer.Typer(help="Bitbucket Server REST client", no_args_is_help=True)
auth_app = typer.Typer(help="Authentication commands")

app.add_typer(auth_app, name="auth")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@auth_app.command("status")
def auth_status() -> None:
    config = AppConfig.from_env()
    typer.echo(
        f"Target Bitbucket: {config.bitbucket_url} (expected version {config.bitbucket_version_target})"
    )
    typer.echo(f"Authorization scheme: {config.auth_scheme()}")


@auth_app.command("check")
def auth_check() -> None:
    """Validate the configured credential without contacting the server."""
    config = AppConfig.from_env()
    client = BitbucketClient.from_config(config)
    try:
        request = client.prepare("GET", "rest/api/1.0/application-properties")
    except BitbucketAuthenticationError as exc:
        typer.echo(f"Invalid credential: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if request.header("Authorization") is None:
        typer.echo("Credential OK: anonymous")
    else:
        typer.echo(f"Credential OK: {config.auth_scheme()}")


if __name__ == "__main__":
    app()
