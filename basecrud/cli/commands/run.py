"""CLI command for running jobs."""

import json
import sys
from pathlib import Path

import click
import requests

from basecrud import run_job
from basecrud.cli.inputs import load_items, parse_cli_vars
from basecrud.core.exceptions import BaseCrudError, JobError
from basecrud.core.logging import configure_logging
from basecrud.models.loader import load_job


@click.command()
@click.argument("job_path", type=click.Path(exists=True))
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(exists=True),
    help="JSON / JSON Lines file with the input items",
)
@click.option(
    "--items-path",
    help="JSONPath selecting the item list inside the input document",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(),
    help="Write output items to this file instead of stdout",
)
@click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)
@click.option(
    "--continue-on-fail",
    is_flag=True,
    help="Emit error items for failed items instead of aborting",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def run(
    job_path: str,
    input_path: str,
    items_path: str | None,
    output_path: str | None,
    vars: tuple,
    continue_on_fail: bool,
    log_level: str,
    json_logs: bool,
):
    """Run a job over input items and print the output items as JSON.

    Examples:

        basecrud run job.yaml --input items.json
        basecrud run job.yaml --input page.json --items-path 'json.data.items'
        basecrud run job.yaml --input items.jsonl --continue-on-fail
        basecrud run job.yaml --input items.json --vars table=tblXXXX
    """
    try:
        cli_vars = parse_cli_vars(vars)
        job = load_job(job_path, cli_vars=cli_vars)
        configure_logging(level=log_level, json_format=json_logs, job_name=job.name)

        if continue_on_fail:
            job.runtime.continue_on_fail = True

        items = load_items(input_path, items_path)
        results = run_job(job, items)

        payload = json.dumps(
            [result.to_dict() for result in results], ensure_ascii=False, indent=2
        )
        if output_path:
            Path(output_path).write_text(payload + "\n", encoding="utf-8")
            click.echo(f"Wrote {len(results)} items to {output_path}", err=True)
        else:
            click.echo(payload)

    except JobError as e:
        click.echo(f"Job error: {e}", err=True)
        sys.exit(1)
    except (BaseCrudError, requests.RequestException) as e:
        click.echo(f"Execution error: {e}", err=True)
        sys.exit(1)
