"""CLI command for dry-run execution."""

import json
import sys

import click

from basecrud.cli.inputs import load_items, parse_cli_vars
from basecrud.core.context import ExecutionContext
from basecrud.core.exceptions import JobError, ParameterError
from basecrud.models.loader import load_job
from basecrud.operations.resolver import resolve_operation


@click.command("dry-run")
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
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)
def dry_run(job_path: str, input_path: str, items_path: str | None, vars: tuple):
    """Resolve every item's operation without sending any request.

    Prints the operation (with its payload) each item would run.

    Examples:

        basecrud dry-run job.yaml --input items.json
    """
    try:
        job = load_job(job_path, cli_vars=parse_cli_vars(vars))
    except JobError as e:
        click.echo(f"Job error: {e}", err=True)
        sys.exit(1)

    items = load_items(input_path, items_path)
    click.echo(f"Dry-run for job: {job.name} ({len(items)} items)", err=True)

    failures = 0
    planned = []
    for index, item in enumerate(items):
        context = ExecutionContext(job_name=job.name, item_index=index)
        try:
            operation = resolve_operation(job.parameters, item, context)
        except ParameterError as e:
            failures += 1
            planned.append({"item": index, "error": e.message})
            continue
        planned.append({"item": index, "operation": operation.model_dump(mode="json")})

    click.echo(json.dumps(planned, ensure_ascii=False, indent=2))
    if failures:
        click.echo(f"✗ {failures} item(s) have invalid parameters", err=True)
        sys.exit(1)
