"""Helpers shared by CLI commands: --vars parsing and input item loading."""

import json
from pathlib import Path
from typing import Any, Optional

import click
from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathParserError


def parse_cli_vars(vars: tuple) -> dict[str, str] | None:
    """Parse ``key=value`` pairs given via --vars."""
    cli_vars = {}
    for var in vars:
        if "=" not in var:
            raise click.BadParameter(
                f"Invalid variable format: {var}. Use key=value", param_hint="--vars"
            )
        key, value = var.split("=", 1)
        cli_vars[key] = value
    return cli_vars or None


def load_items(path: str, items_path: Optional[str] = None) -> list[dict[str, Any]]:
    """Load input items from a JSON or JSON Lines file.

    Args:
        path: File containing a JSON array, a single JSON object, a JSON
            document navigated with ``items_path``, or one JSON object per line.
        items_path: Optional JSONPath selecting the item array
            (e.g. ``json.data.items`` to feed a previous getAll output).

    Raises:
        click.BadParameter: If the file cannot be parsed into a list of objects.
    """
    text = Path(path).read_text(encoding="utf-8")

    try:
        document: Any = json.loads(text) if text.strip() else []
    except json.JSONDecodeError:
        try:
            document = [json.loads(line) for line in text.splitlines() if line.strip()]
        except json.JSONDecodeError as e:
            raise click.BadParameter(
                f"Input is neither JSON nor JSON Lines: {e}", param_hint="--input"
            ) from e

    if items_path:
        try:
            expr = parse_jsonpath(items_path)
        except JsonPathParserError as e:
            raise click.BadParameter(
                f"Invalid JSONPath '{items_path}': {e}", param_hint="--items-path"
            ) from e
        matches = [match.value for match in expr.find(document)]
        if len(matches) == 1 and isinstance(matches[0], list):
            document = matches[0]
        else:
            document = matches

    if isinstance(document, dict):
        document = [document]

    if not isinstance(document, list) or not all(isinstance(i, dict) for i in document):
        raise click.BadParameter(
            "Input must be a list of JSON objects", param_hint="--input"
        )
    return document
