"""testkit CLI: run the bundled examples and inspect configuration.

Usage:
    testkit demo [--verbose] [--json]
    testkit config
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict, replace
from typing import Annotated

import typer
from tabulate import tabulate

from testkit.config import ConfigurationError, TestkitConfig, set_config
from testkit.env import load_user_env
from testkit.logging.console import set_color_enabled, set_verbose

app = typer.Typer(
    name="testkit",
    help="In-process test support: mocks, spies, assertions and fixtures",
    add_completion=False,
)


def _load_config() -> TestkitConfig:
    """Load .env and environment config, exiting with code 2 on errors."""
    load_user_env()
    try:
        return TestkitConfig.from_env()
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        raise typer.Exit(2) from e


def _apply(config: TestkitConfig) -> None:
    """Install config globally: logging level, console flags, active config."""
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    set_verbose(config.verbose)
    set_color_enabled(config.color)
    set_config(config)


@app.command()
def demo(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show full failure messages and recorded call logs",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """Run the bundled example suite and print its results."""
    # Imported here so the demo module only loads for this command
    from testkit.demo import build_suite

    config = _load_config()
    if verbose:
        config = replace(config, verbose=True)
    _apply(config)

    suite = build_suite()

    if json_output:
        payload = {
            "suite": suite.name,
            "passed": suite.passed,
            "failed": suite.failed,
            "results": [asdict(result) for result in suite.results],
        }
        print(json.dumps(payload, indent=2))
    else:
        rows = [
            [result.name, "pass" if result.passed else "FAIL", result.message]
            for result in suite.results
        ]
        print(tabulate(rows, headers=["Example", "Result", "Message"], tablefmt="simple"))
        print()
        suite.report()

    if not suite.all_passed:
        raise typer.Exit(1)


@app.command(name="config")
def show_config() -> None:
    """Show the configuration resolved from the environment."""
    config = _load_config()
    rows = [[key, value] for key, value in asdict(config).items()]
    print(tabulate(rows, headers=["Setting", "Value"], tablefmt="simple"))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
