"""gotestflow CLI - gotest command."""

import asyncio
import sys

import click

from gotestflow.cli.utils import find_module_root
from gotestflow.config.loader import load_config
from gotestflow.core.errors import GoTestFlowError, TestRunError
from gotestflow.core.logging import configure_logging, get_logger
from gotestflow.core.progress import status
from gotestflow.testing.orchestrator import Orchestrator


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version="0.1.0", prog_name="gotest")
@click.option(
    "--timeout",
    "timeout_sec",
    type=click.IntRange(min=1),
    default=None,
    help="go test -timeout in seconds (default: testing.timeout_sec from config)",
)
@click.option("--skip-race", is_flag=True, help="Run native tests without -race")
@click.option("--no-cache", is_flag=True, help="Ignore a cached result for this tree")
@click.option("--all", "run_all", is_flag=True, help="Include integration-tagged tests")
@click.option("-v", "--verbose", is_flag=True, help="Show unfiltered output and debug logging")
@click.argument("go_args", nargs=-1, type=click.UNPROCESSED)
def cli(
    timeout_sec: int | None,
    skip_race: bool,
    no_cache: bool,
    run_all: bool,
    verbose: bool,
    go_args: tuple[str, ...],
) -> None:
    """Run vet, tests, race detection, coverage and wasm tests for a Go module.

    Extra go test flags (after --) skip vet and the result cache:

        gotest -- -run TestLogin -count=3
    """
    module_root = find_module_root()

    try:
        config = load_config(module_root)
    except GoTestFlowError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        configure_logging(level="DEBUG")
    else:
        configure_logging(config=config.logging)

    log = get_logger("cli")
    orchestrator = Orchestrator(module_root, config=config, verbose=verbose)

    try:
        summary = asyncio.run(
            orchestrator.run(
                custom_args=list(go_args),
                skip_race=skip_race,
                timeout_sec=timeout_sec or 0,
                no_cache=no_cache,
                run_all=run_all,
            )
        )
    except TestRunError as e:
        click.echo(f"Tests failed: {e.summary}")
        sys.exit(1)
    except GoTestFlowError as e:
        log.debug("run_aborted", **e.to_dict())
        raise click.ClickException(str(e)) from e
    except KeyboardInterrupt:
        status("Interrupted", style="error")
        sys.exit(130)

    click.echo(summary)


if __name__ == "__main__":
    cli()
