"""
storefront-qa command line.

    storefront-qa config --env staging
    storefront-qa run --suite e2e --soft-assert-scope session -- -k checkout
    storefront-qa version
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum
from typing import Annotated

import pytest
import typer
from rich.console import Console
from rich.table import Table

from storefront_qa import __version__
from storefront_qa.environment import STOREFRONT_ENV_VAR, get_environment_config
from storefront_qa.errors import ConfigurationError
from storefront_qa.logging import get_logger, log_with_context, setup_logging
from storefront_qa.soft_assert.plugin import DEFAULT_SCOPE, SCOPES

app = typer.Typer(
    help="Run and inspect the storefront test suites",
    no_args_is_help=True,
)

console = Console()
logger = get_logger("cli")

LIVE_ENV_VAR = "STOREFRONT_LIVE"


class Suite(StrEnum):
    UNIT = "unit"
    API = "api"
    E2E = "e2e"
    ALL = "all"


SUITE_PATHS: dict[Suite, str] = {
    Suite.UNIT: "tests/unit",
    Suite.API: "tests/api",
    Suite.E2E: "tests/e2e",
    Suite.ALL: "tests",
}


def _load_config(env: str | None):
    try:
        return get_environment_config(env)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from exc


# =============================================================================
# Commands
# =============================================================================


@app.command()
def config(
    env: Annotated[
        str | None,
        typer.Option("--env", "-e", help="Environment (default: $STOREFRONT_ENV or dev)"),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the resolved configuration for an environment."""
    resolved = _load_config(env)

    if output_json:
        console.print_json(resolved.model_dump_json())
        return

    table = Table(title=f"Environment: {resolved.env}")
    table.add_column("Setting", style="dim")
    table.add_column("Value")
    for name, value in resolved.model_dump().items():
        table.add_row(name, str(value))
    table.add_row("screenshots_dir", str(resolved.screenshots_dir))
    table.add_row("videos_dir", str(resolved.videos_dir))
    console.print(table)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def run(
    ctx: typer.Context,
    env: Annotated[
        str | None,
        typer.Option("--env", "-e", help="Environment (default: $STOREFRONT_ENV or dev)"),
    ] = None,
    suite: Annotated[Suite, typer.Option("--suite", "-s", help="Suite to run")] = Suite.ALL,
    scope: Annotated[
        str,
        typer.Option("--soft-assert-scope", help=f"Soft assertion window: {', '.join(SCOPES)}"),
    ] = DEFAULT_SCOPE,
    live: Annotated[
        bool, typer.Option("--live", help="Run suites that hit the real storefront and API")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Run pytest for a suite; extra arguments are passed through to pytest."""
    if scope not in SCOPES:
        console.print(f"[red]Unknown soft assertion scope '{scope}'[/red]")
        raise typer.Exit(2)

    resolved = _load_config(env)
    os.environ[STOREFRONT_ENV_VAR] = resolved.env.value
    if live:
        os.environ[LIVE_ENV_VAR] = "1"

    log_dir = setup_logging(resolved.logs_dir, level=logging.DEBUG if verbose else logging.INFO)

    args = [SUITE_PATHS[suite], f"--soft-assert-scope={scope}", *ctx.args]
    log_with_context(
        logger,
        logging.INFO,
        f"Running {suite.value} suite against {resolved.env.value}",
        suite=suite.value,
        env=resolved.env.value,
        scope=scope,
        live=live,
        pytest_args=args,
    )
    logger.debug("Logs in %s", log_dir)

    exit_code = pytest.main(args)
    raise typer.Exit(int(exit_code))


@app.command()
def version() -> None:
    """Show the installed version."""
    console.print(f"storefront-qa {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
