"""Command-line interface for propcheck."""

import asyncio
import importlib
import json
import sys

import click
import structlog

from .logging import configure_logging
from .output.formatter import format_run_details
from .output.stringify import stringify
from .property.property import AsyncProperty, Property
from .runner.configuration import Parameters
from .runner.errors import ConfigLoadError, ConfigValidationError
from .runner.loader import load_parameters
from .runner.runner import async_check, check, replay_path

logger = structlog.get_logger(__name__)


class TargetError(Exception):
    """Raised when a module:attribute target cannot be resolved to a property."""


def load_target(target: str) -> Property | AsyncProperty:
    """Import the property named by a ``module:attribute`` target.

    Raises:
        TargetError: If the target is malformed, missing, or not a property.
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise TargetError(f"Expected MODULE:ATTRIBUTE, got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetError(f"Cannot import module {module_name!r}: {e}") from e

    obj = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetError(f"{module_name!r} has no attribute {attribute!r}") from e

    if not isinstance(obj, (Property, AsyncProperty)):
        raise TargetError(f"{target} is a {type(obj).__name__}, not a property")
    return obj


def _fail_config(e: Exception) -> None:
    if isinstance(e, ConfigValidationError):
        click.echo(f"Configuration validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    else:
        click.echo(f"Error loading configuration: {e}", err=True)
    sys.exit(2)


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log level for run events (written to stderr)",
)
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON")
def main(log_level: str, json_logs: bool):
    """propcheck: property-based testing runner."""
    configure_logging(json_output=json_logs, level=log_level)


@main.command("check")
@click.argument("target")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    help="YAML file with run parameters",
)
@click.option("--seed", type=int, help="Seed of the run")
@click.option("--num-runs", type=int, help="Number of judged trials")
@click.option("--path", "replay_from", help="Replay a reported counterexample path")
@click.option("-v", "--verbose", count=True, help="Verbosity (-v failures, -vv tree)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def check_cmd(
    target: str,
    config_file: str | None,
    seed: int | None,
    num_runs: int | None,
    replay_from: str | None,
    verbose: int,
    output_format: str,
):
    """Check the property named by TARGET (MODULE:ATTRIBUTE).

    Exit codes:
      0 - Property passed, or was interrupted without counting as a failure
      1 - Property failed
      2 - Configuration or target error
    """
    try:
        parameters = load_parameters(config_file) if config_file else Parameters()
    except (ConfigLoadError, ConfigValidationError) as e:
        _fail_config(e)

    overrides: dict = {}
    if seed is not None:
        overrides["seed"] = seed
    if num_runs is not None:
        overrides["num_runs"] = num_runs
    if replay_from is not None:
        overrides["path"] = replay_from
    if verbose:
        overrides["verbose"] = min(verbose, 2)

    try:
        prop = load_target(target)
    except TargetError as e:
        click.echo(f"Target error: {e}", err=True)
        sys.exit(2)

    try:
        if prop.is_async():
            out = asyncio.run(async_check(prop, parameters, **overrides))
        else:
            out = check(prop, parameters, **overrides)
    except ValueError as e:
        # Malformed replay path or invalid override
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    logger.info("Check finished", target=target, **out.summary())

    report = format_run_details(out, output_format)  # type: ignore
    if report is not None:
        click.echo(report)
        sys.exit(1)

    # Interrupted runs not marked as failures still say so
    outcome = "interrupted" if out.interrupted else "passed"
    if output_format == "json":
        click.echo(json.dumps({**out.summary(), "outcome": outcome}, indent=2))
    else:
        click.echo(f"Property {outcome} after {out.num_runs} tests\n{{ seed: {out.seed} }}")
    sys.exit(0)


@main.command("replay")
@click.argument("target")
@click.option("--seed", type=int, required=True, help="Seed of the reported run")
@click.option("--path", "replay_path_", required=True, help="Reported counterexample path")
def replay_cmd(target: str, seed: int, replay_path_: str):
    """Print the value addressed by a counterexample path of TARGET.

    Exit codes:
      0 - Value printed
      2 - Target or path error
    """
    try:
        prop = load_target(target)
        value = replay_path(prop, seed, replay_path_)
    except (TargetError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo(stringify(value))
    sys.exit(0)


if __name__ == "__main__":
    main()
