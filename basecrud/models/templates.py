"""Template rendering for job values with Jinja2-style syntax."""

import os
import re
from typing import Any, Dict, Iterable

from basecrud.core.exceptions import JobError

TEMPLATE_PATTERN = r"\{\{\s*([^}]+)\s*\}\}"
FUNC_PATTERN = r"(\w+)\(['\"]([^'\"]+)['\"]\)"

# Roots only known while processing an item; left untouched at load time
ITEM_ROOTS = ("item", "item_index")
ITEM_SECTION = "parameters"


def render_templates(
    job_dict: Dict[str, Any], cli_vars: Dict[str, str] | None = None
) -> Dict[str, Any]:
    """
    Render load-time templates in a job dictionary.

    Supports:
    - {{ env_var('VAR_NAME') }} - environment variable lookup
    - {{ var('VAR_NAME') }} - CLI variable lookup
    - {{ job.name }} - job metadata

    Per-item expressions ({{ item.<key> }}, {{ item_index }}) are kept as-is
    under ``parameters`` and rendered later by ``render_item_templates``.
    Anywhere else they raise JobError.

    Args:
        job_dict: Job dictionary (may contain template expressions)
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Job dictionary with templates rendered
    """
    context = {
        "job": {"name": job_dict.get("name", "")},
        "env_var": lambda key: _get_env_var(key),
        "var": lambda key: _get_cli_var(key, cli_vars or {}),
    }
    return {
        key: _render_value(
            value, context, deferred=ITEM_ROOTS if key == ITEM_SECTION else ()
        )
        for key, value in job_dict.items()
    }


def render_item_templates(
    data: Dict[str, Any], item: Dict[str, Any], item_index: int
) -> Dict[str, Any]:
    """
    Render per-item templates against one input item.

    Supports:
    - {{ item.key }} / {{ item.nested.key }} - value from the item
    - {{ item_index }} - position of the item in the input

    Raises:
        JobError: If an expression cannot be resolved against the item
    """
    context = {"item": item, "item_index": item_index}
    return _render_value(data, context, deferred=())


def _get_env_var(key: str) -> str:
    """Get environment variable or raise error if not found."""
    value = os.environ.get(key)
    if value is None:
        raise JobError(
            f"Environment variable '{key}' not found",
            context={"key": key},
        )
    return value


def _get_cli_var(key: str, cli_vars: Dict[str, str]) -> str:
    """Get CLI variable or raise error if not found."""
    if key not in cli_vars:
        raise JobError(
            f"CLI variable '{key}' not provided",
            context={"key": key, "available": list(cli_vars.keys())},
        )
    return cli_vars[key]


def _render_value(value: Any, context: Dict[str, Any], deferred: Iterable[str]) -> Any:
    """Render template in value based on type."""
    if isinstance(value, dict):
        return {k: _render_value(v, context, deferred) for k, v in value.items()}
    elif isinstance(value, list):
        return [_render_value(item, context, deferred) for item in value]
    elif isinstance(value, str):
        return _render_string(value, context, tuple(deferred))
    else:
        return value


def _render_string(text: str, context: Dict[str, Any], deferred: tuple) -> str:
    """Render Jinja2-style templates in string."""

    def replace(match):
        expr = match.group(1).strip()
        root = re.split(r"[.(]", expr, maxsplit=1)[0]
        if root in deferred:
            return match.group(0)
        if root in ITEM_ROOTS and root not in context:
            raise JobError(
                f"Per-item template '{expr}' is only allowed under '{ITEM_SECTION}'",
                context={"expression": expr},
            )
        try:
            func_match = re.match(FUNC_PATTERN, expr)
            if func_match:
                func_name = func_match.group(1)
                arg = func_match.group(2)
                if func_name in context and callable(context[func_name]):
                    return str(context[func_name](arg))
                raise JobError(
                    f"Unknown function: {func_name}",
                    context={"expression": expr, "available": list(context.keys())},
                )

            # Dot-notation: job.name, item.customer.email
            result = context
            for part in expr.split("."):
                result = result[part]
            return str(result)
        except (KeyError, TypeError) as e:
            raise JobError(
                f"Template rendering failed: {expr}",
                context={"expression": expr, "error": str(e)},
            ) from e

    return re.sub(TEMPLATE_PATTERN, replace, text)
