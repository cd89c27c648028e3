"""CLI command for listing available operations."""

import click

from basecrud.operations.registry import list_operation_types


@click.command("list-operations")
def list_operations():
    """List available record operations."""
    click.echo("Available Operations:")
    for operation_type in list_operation_types():
        click.echo(f"  - {operation_type}")
