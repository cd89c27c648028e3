"""CLI command for scaffolding a new job file."""

import sys
from pathlib import Path

import click

JOB_TEMPLATE = """name: {job_name}

connection:
  access_token: "{{{{ env_var('BASE_ACCESS_TOKEN') }}}}"
  timeout: 30
  max_retries: 3

parameters:
  operation: {operation}
  app_token: "{{{{ var('app_token') }}}}"
  table_id: "{{{{ var('table_id') }}}}"
  # create / update
  kind: mapEachColumns
  mapping_mode: mapEachColumnManually
  values_to_send:
    - field_id: Name
      field_value: "{{{{ item.name }}}}"
  # get / update / delete
  record_id: "{{{{ item.record_id }}}}"
  # getAll
  return_all: false
  limit: 50

runtime:
  continue_on_fail: false
"""


@click.command()
@click.option(
    "--job-name",
    default="my_job",
    help="Name for the example job file (default: my_job)",
)
@click.option(
    "--operation",
    default="create",
    type=click.Choice(["create", "get", "getAll", "update", "delete"]),
    help="Operation for the example job (default: create)",
)
@click.option(
    "--output-dir",
    default=".",
    type=click.Path(),
    help="Directory to create the job file in (default: current directory)",
)
def init(job_name: str, operation: str, output_dir: str):
    """Create an example job file.

    Examples:

        basecrud init
        basecrud init --job-name customers --operation getAll
        basecrud init --output-dir jobs/
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    job_file = output_path / f"{job_name}.yaml"
    if job_file.exists():
        click.echo(f"Job file already exists: {job_file}", err=True)
        click.echo("Use --job-name to specify a different name", err=True)
        sys.exit(1)

    job_file.write_text(JOB_TEMPLATE.format(job_name=job_name, operation=operation))
    click.echo(f"Created job file: {job_file}")

    click.echo("")
    click.echo("Next steps:")
    click.echo("  1. export BASE_ACCESS_TOKEN=<tenant access token>")
    click.echo(f"  2. Edit {job_file} with your table and fields")
    click.echo(
        f"  3. Run: basecrud run {job_file} --input items.json "
        "--vars app_token=<app> --vars table_id=<table>"
    )
