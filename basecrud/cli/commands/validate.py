"""CLI command for validating job files."""

import sys

import click

from basecrud.cli.inputs import parse_cli_vars
from basecrud.core.exceptions import JobError
from basecrud.models.loader import load_job


@click.command()
@click.argument("job_path", type=click.Path(exists=True))
@click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)
def validate(job_path: str, vars: tuple):
    """Validate a job YAML file.

    Checks:
    - YAML syntax
    - Job schema validation
    - Template variable resolution

    Examples:

        basecrud validate job.yaml
        basecrud validate job.yaml --vars env=prod
    """
    try:
        job = load_job(job_path, cli_vars=parse_cli_vars(vars))
    except JobError as e:
        click.echo(f"✗ Job validation failed: {e}", err=True)
        sys.exit(1)

    params = job.parameters
    click.echo(f"✓ Job '{job.name}' is valid")
    click.echo(f"  Operation: {params.operation.value}")
    click.echo(f"  Table: {params.app_token}/{params.table_id}")
    click.echo(f"  Base URL: {job.connection.base_url}")
    click.echo(f"  Continue on fail: {job.runtime.continue_on_fail}")
