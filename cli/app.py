from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_temperature


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Run or query the CEP weather service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Service base URL (defaults to API_BASE_URL env or http://localhost:8080).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the service to answer.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("lookup")
def lookup_command(
    ctx: typer.Context,
    zipcode: str = typer.Argument(..., help="Eight digit postal code, e.g. 01001000."),
) -> None:
    """Print the current temperature for a postal code."""
    state = _get_state(ctx)
    payload = state.client.get_temperature(zipcode)
    render_temperature(zipcode, payload)


@app.command("serve")
def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (defaults to HOST env)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Listen port (defaults to PORT env or 8080)."),
) -> None:
    """Start the HTTP service."""
    from app import main as server

    server.run(host=host, port=port)
