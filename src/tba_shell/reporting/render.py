from __future__ import annotations
import json
from typing import Any, TextIO
import click

INDENT = "    "


def _literal(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def render(
    value: Any,
    indent_level: int = 0,
    key1: str | None = None,
    key2: str | None = None,
    *,
    name: str | None = None,
    out: TextIO | None = None,
) -> None:
    """Print a JSON value as indented text.

    With key1 set, objects are projected to ``value[key1]`` (and
    ``": " + value[key2]`` when key2 is set) instead of being expanded.
    Arrays and scalars are unaffected by the projection keys, except that
    objects nested in arrays are projected too.
    """
    pad = INDENT * indent_level
    prefix = f"{name}: " if name is not None else ""

    if isinstance(value, dict):
        if key1 is not None:
            line = _literal(value.get(key1))
            if key2 is not None:
                line += ": " + _literal(value.get(key2))
            click.echo(pad + line, file=out)
            return
        click.echo(pad + prefix + "{", file=out)
        for child_name, child in value.items():
            render(child, indent_level + 1, key1, key2, name=child_name, out=out)
        click.echo(pad + "}", file=out)
    elif isinstance(value, list):
        click.echo(pad + prefix + "[", file=out)
        for item in value:
            render(item, indent_level + 1, key1, key2, out=out)
        click.echo(pad + "]", file=out)
    else:
        click.echo(pad + prefix + _literal(value), file=out)


def print_data(value: Any, key1: str | None = None, key2: str | None = None, out: TextIO | None = None) -> None:
    if value is not None:
        render(value, 0, key1, key2, out=out)
